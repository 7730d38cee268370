"""
CODEBREAKER - Encrypt and decrypt cheat codes for all versions of CodeBreaker PS2

Uses the CB v1 and CB v7 ciphers under the hood and switches between them the
way the cartridge does: a beefcode (BEEFC0DE/BEEFC0DF) turns on CB v7 for the
rest of the code list.
"""

from . import cb1
from .api_codes import (
    auto_decrypt_codes,
    decrypt_codes,
    encrypt_codes,
    format_code,
    format_codes,
    parse_code,
    parse_codes,
)
from .cb7 import BEEFCODE, Cb7, is_beefcode
from .engine import Codebreaker, Scheme, num_code_lines
from .version import __version__


# ============================================================================
# CODE LIST FUNCTIONS (text in, text out)
# ============================================================================

def encrypt_text(text: str, v7: bool = False) -> str:
    """
    Encrypt a textual code list.

    Args:
        text: One "XXXXXXXX YYYYYYYY" code per line
        v7: Start in CB v7 mode instead of CB v1

    Returns:
        Encrypted code list, one code per line

    Note:
        - Lines after a beefcode are encrypted with CB v7
        - Reversible with decrypt_text() using the same mode
    """
    return format_codes(encrypt_codes(parse_codes(text), v7=v7))


def decrypt_text(text: str, v7: bool = False) -> str:
    return format_codes(decrypt_codes(parse_codes(text), v7=v7))


def auto_decrypt_text(text: str, v7: bool = False) -> str:
    """
    Decrypt a textual code list of unknown format.

    Args:
        text: One "XXXXXXXX YYYYYYYY" code per line, raw, v1 or v7
        v7: Start in CB v7 mode (for lists without the leading beefcode)

    Returns:
        Decrypted code list, one code per line

    How it works:
        - Raw and v1 codes are told apart per code by the address bits
        - Multi-line codes are framed by the command nibble of their first line
        - A decrypted beefcode switches to CB v7 for the rest of the list
    """
    return format_codes(auto_decrypt_codes(parse_codes(text), v7=v7))


__all__ = [
    "BEEFCODE",
    "Cb7",
    "Codebreaker",
    "Scheme",
    "__version__",
    "auto_decrypt_codes",
    "auto_decrypt_text",
    "cb1",
    "decrypt_codes",
    "decrypt_text",
    "encrypt_codes",
    "encrypt_text",
    "format_code",
    "format_codes",
    "is_beefcode",
    "num_code_lines",
    "parse_code",
    "parse_codes",
]
