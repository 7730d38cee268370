"""Code processor that switches between raw, CB v1 and CB v7 codes."""

import enum
import typing

from . import cb1
from .cb7 import Cb7, is_beefcode

MASK32 = 0xFFFFFFFF


class Scheme(enum.Enum):
    RAW = "raw"
    V1 = "v1"
    V7 = "v7"


def num_code_lines(addr: int) -> int:
    """
    Number of lines taken by the code whose first address word is addr.

    Only the command nibble matters, plus bit 22 for command 3.
    """
    cmd = (addr & MASK32) >> 28
    if cmd < 3 or cmd > 6:
        return 1
    if cmd == 3:
        return 2 if addr & 0x00400000 else 1
    return 2


class Codebreaker:
    """
    Encrypts and decrypts all CB v1 and v7 codes of a single code list.

    The processor is a sequential cursor: feed it the lines of one list in
    order and use a new instance for the next list. Once a beefcode has been
    seen every following line is handled as CB v7.
    """

    def __init__(self) -> None:
        self.scheme = Scheme.RAW
        self.cb7 = Cb7()
        self.code_lines = 0

    @classmethod
    def new_v7(cls) -> "Codebreaker":
        """
        Processor for CB v7 codes as published on CMGSCCC.com.

        Lets you omit ``B4336FA9 4DFEFB79`` as the first code in the list.
        """
        cb = cls()
        cb.scheme = Scheme.V7
        cb.cb7 = Cb7.default()
        return cb

    def _activate(self, addr: int, val: int) -> None:
        self.cb7.beefcode(addr, val)
        self.scheme = Scheme.V7

    def encrypt_code(self, addr: int, val: int) -> "typing.Tuple[int, int]":
        """
        Encrypt one code with the current scheme.

        A beefcode is encrypted with the scheme that was active before it;
        only the codes after it are CB v7.
        """
        oldaddr, oldval = addr & MASK32, val & MASK32
        if self.scheme is Scheme.V7:
            addr, val = self.cb7.encrypt_code(oldaddr, oldval)
        else:
            addr, val = cb1.encrypt_code(oldaddr, oldval)

        if is_beefcode(oldaddr):
            self._activate(oldaddr, oldval)
        return addr, val

    def decrypt_code(self, addr: int, val: int) -> "typing.Tuple[int, int]":
        if self.scheme is Scheme.V7:
            addr, val = self.cb7.decrypt_code(addr, val)
        else:
            addr, val = cb1.decrypt_code(addr, val)

        if is_beefcode(addr):
            self._activate(addr, val)
        return addr, val

    def auto_decrypt_code(self, addr: int, val: int) -> "typing.Tuple[int, int]":
        """
        Smart version of decrypt_code that detects if and how a code needs to
        be decrypted.

        The number of lines of each code is taken from its first line, so a
        code list with wrong line counts silently goes out of sync.
        """
        addr &= MASK32
        val &= MASK32
        if self.scheme is not Scheme.V7:
            if self.code_lines == 0:
                self.code_lines = num_code_lines(addr)
                if (addr >> 24) & 0x0E:
                    if is_beefcode(addr):
                        # ignore raw beefcode
                        self.code_lines -= 1
                        return addr, val
                    self.scheme = Scheme.V1
                    self.code_lines -= 1
                    addr, val = cb1.decrypt_code(addr, val)
                else:
                    self.scheme = Scheme.RAW
                    self.code_lines -= 1
            else:
                self.code_lines -= 1
                if self.scheme is Scheme.RAW:
                    return addr, val
                addr, val = cb1.decrypt_code(addr, val)
        else:
            addr, val = self.cb7.decrypt_code(addr, val)
            if self.code_lines == 0:
                self.code_lines = num_code_lines(addr)
                if self.code_lines == 1 and addr == 0xFFFFFFFF:
                    # changing encryption via "FFFFFFFF 000xnnnn" is not supported
                    self.code_lines = 0
                    return addr, val
            self.code_lines -= 1

        if is_beefcode(addr):
            self._activate(addr, val)
            self.code_lines = 1
        return addr, val


__all__ = ["Codebreaker", "Scheme", "num_code_lines"]
