"""Code list text helpers and batch wrappers."""

import re
import typing

from .engine import Codebreaker

Code = typing.Tuple[int, int]

_CODE_PATTERN = re.compile(r"^\s*(?:0x)?([0-9A-Fa-f]{8})\s+(?:0x)?([0-9A-Fa-f]{8})\s*$")
_COMMENT_PREFIXES = ("#", "//")


def parse_code(line: str) -> Code:
    match = _CODE_PATTERN.match(line)
    if not match:
        raise ValueError(f"Malformed code line: {line.strip()!r}")
    return int(match.group(1), 16), int(match.group(2), 16)


def format_code(code: Code) -> str:
    addr, val = code
    return f"{addr:08X} {val:08X}"


def parse_codes(text: str) -> "typing.List[Code]":
    """
    Parse a code list, one "XXXXXXXX YYYYYYYY" pair per line.

    Blank lines and lines starting with '#' or '//' are skipped.
    """
    codes = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        try:
            codes.append(parse_code(stripped))
        except ValueError as exc:
            raise ValueError(f"line {lineno}: {exc}") from exc
    return codes


def format_codes(codes: "typing.Iterable[Code]") -> str:
    return "\n".join(format_code(code) for code in codes)


def _new_engine(v7: bool) -> Codebreaker:
    return Codebreaker.new_v7() if v7 else Codebreaker()


def encrypt_codes(codes: "typing.Iterable[Code]", v7: bool = False) -> "typing.List[Code]":
    cb = _new_engine(v7)
    return [cb.encrypt_code(addr, val) for addr, val in codes]


def decrypt_codes(codes: "typing.Iterable[Code]", v7: bool = False) -> "typing.List[Code]":
    cb = _new_engine(v7)
    return [cb.decrypt_code(addr, val) for addr, val in codes]


def auto_decrypt_codes(codes: "typing.Iterable[Code]", v7: bool = False) -> "typing.List[Code]":
    cb = _new_engine(v7)
    return [cb.auto_decrypt_code(addr, val) for addr, val in codes]


__all__ = [
    "auto_decrypt_codes",
    "decrypt_codes",
    "encrypt_codes",
    "format_code",
    "format_codes",
    "parse_code",
    "parse_codes",
]
