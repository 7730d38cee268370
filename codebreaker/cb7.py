"""Encrypt and decrypt cheat codes for CodeBreaker PS2 v7+.

Every code goes through four layers: a multiplication modulo 2^32, an ARC4
keystream, a 64-bit RSA exponentiation and 64 rounds of add/xor mixing with
words taken from the seed tables. Key and seed tables are (re)generated by
"beefcodes":

    BEEFC0DE vvvvvvvv

    or:

    BEEFC0DF vvvvvvvv
    wwwwwwww wwwwwwww

    v = seed value
    w = extra seed value
"""

import os
import struct
import typing

from cryptography.hazmat.decrepit.ciphers.algorithms import ARC4
from cryptography.hazmat.primitives.ciphers import Cipher

MASK32 = 0xFFFFFFFF
BEEFCODE = 0xBEEFC0DE

SEED_TABLES = 5
SEED_TABLE_SIZE = 256
SEED_DUMP_SIZE = SEED_TABLES * SEED_TABLE_SIZE


def is_beefcode(addr: int) -> bool:
    """Return True for the activation codes BEEFC0DE and BEEFC0DF."""
    return (addr & 0xFFFFFFFE) == BEEFCODE


def mul_encrypt(a: int, b: int) -> int:
    return (a * (b | 1)) & MASK32


def mul_decrypt(a: int, b: int) -> int:
    # b | 1 is odd, so it always has an inverse modulo 2^32
    return (a * pow(b | 1, -1, 1 << 32)) & MASK32


def rsa_crypt(addr: int, val: int, rsakey: int, modulus: int) -> "typing.Tuple[int, int]":
    code = (addr << 32) | val
    # Exponentiation is only invertible if code < modulus
    if code < modulus:
        code = pow(code, rsakey, modulus)
        addr, val = code >> 32, code & MASK32
    return addr, val


def _arc4(key: bytes):
    return Cipher(ARC4(key), mode=None).encryptor()


class Cb7:
    """
    Key and seed state of the CB v7 cipher.

    A fresh ``Cb7()`` is uninitialized; ``Cb7.default()`` is ready for codes
    published with the canonical ``BEEFC0DE 00000000`` header.
    Encryption consumes state and must run in the same order as decryption.
    """

    DEFAULT_KEY = (0xD0DBA9D7, 0x13A0A96C, 0x80410DF0, 0x2CCDBE1F, 0xE570A86B)
    RSA_DEC_KEY = 11
    RSA_ENC_KEY = 2682110966135737091
    RSA_MODULUS = 18446744073709551605  # 2^64 - 11
    SEEDS_ENV = "CODEBREAKER_CB7_SEEDS"
    _SEED_DUMP_OVERRIDE: typing.ClassVar[typing.Optional[bytes]] = None

    def __init__(self) -> None:
        self.seeds = bytearray(SEED_DUMP_SIZE)
        self.key = (0, 0, 0, 0, 0)
        self.beefcodf = False
        self.initialized = False
        self._words = self._seed_words(self.seeds)

    @classmethod
    def default(cls) -> "Cb7":
        cb7 = cls()
        cb7.beefcode(BEEFCODE, 0)
        return cb7

    @classmethod
    def load_seed_tables(cls, source: "typing.Union[str, os.PathLike, bytes, None]") -> None:
        """
        Register the 1280-byte CB7 seed table dump (a path or raw bytes).

        Only beefcodes with a non-zero value need it. Pass None to fall back
        to the CODEBREAKER_CB7_SEEDS environment variable again.
        """
        if source is None:
            cls._SEED_DUMP_OVERRIDE = None
            return
        if isinstance(source, (bytes, bytearray, memoryview)):
            data = bytes(source)
        else:
            with open(source, "rb") as handle:
                data = handle.read()
        cls._SEED_DUMP_OVERRIDE = cls._check_seed_dump(data)

    @classmethod
    def _load_seed_dump(cls) -> bytes:
        if cls._SEED_DUMP_OVERRIDE is not None:
            return cls._SEED_DUMP_OVERRIDE
        path = os.getenv(cls.SEEDS_ENV)
        if not path:
            raise ValueError(
                f"CB7 seed tables required for a non-zero beefcode value; set {cls.SEEDS_ENV}"
            )
        with open(path, "rb") as handle:
            return cls._check_seed_dump(handle.read())

    @staticmethod
    def _check_seed_dump(data: bytes) -> bytes:
        if len(data) != SEED_DUMP_SIZE:
            raise ValueError(f"CB7 seed dump must be {SEED_DUMP_SIZE} bytes, got {len(data)}")
        return bytes(data)

    @staticmethod
    def _seed_words(seeds: bytearray) -> "typing.Tuple[typing.Tuple[int, ...], ...]":
        return tuple(
            struct.unpack_from("<64I", seeds, i * SEED_TABLE_SIZE) for i in range(SEED_TABLES)
        )

    def beefcode(self, addr: int, val: int) -> None:
        """Generate a new key and seed tables from an activation code."""
        addr &= MASK32
        val &= MASK32
        key = list(self.DEFAULT_KEY)
        if val:
            seeds = bytearray(self._load_seed_dump())
            v = val.to_bytes(4, "little")
            for i in range(4):
                key[i] = (
                    (seeds[((i + 3) % 5) * SEED_TABLE_SIZE + v[3]] << 24)
                    | (seeds[((i + 2) % 5) * SEED_TABLE_SIZE + v[2]] << 16)
                    | (seeds[((i + 1) % 5) * SEED_TABLE_SIZE + v[1]] << 8)
                    | seeds[(i % 5) * SEED_TABLE_SIZE + v[0]]
                )
        else:
            seeds = bytearray(SEED_DUMP_SIZE)

        key_bytes = struct.pack("<5I", *key)
        for i in range(SEED_TABLES):
            rc4 = _arc4(key_bytes)
            start = i * SEED_TABLE_SIZE
            seeds[start:start + SEED_TABLE_SIZE] = rc4.update(bytes(seeds[start:start + SEED_TABLE_SIZE]))
            # the encrypted key becomes the ARC4 key for the next table
            key_bytes = rc4.update(key_bytes)

        self.seeds = seeds
        self.key = struct.unpack("<5I", key_bytes)
        self.beefcodf = bool(addr & 1)
        self.initialized = True
        self._words = self._seed_words(self.seeds)

    def _rc4_code(self, addr: int, val: int) -> "typing.Tuple[int, int]":
        data = _arc4(struct.pack("<5I", *self.key)).update(struct.pack("<2I", addr, val))
        return struct.unpack("<2I", data)

    def _extra_seeds(self, addr: int, val: int) -> None:
        # second line of BEEFC0DF
        rc4 = _arc4(struct.pack("<2I", addr, val))
        self.seeds = bytearray(rc4.update(bytes(self.seeds)))
        self._words = self._seed_words(self.seeds)
        self.beefcodf = False

    def encrypt_code(self, addr: int, val: int) -> "typing.Tuple[int, int]":
        addr &= MASK32
        val &= MASK32
        oldaddr, oldval = addr, val
        key = self.key

        addr = mul_encrypt(addr, (key[0] - key[1]) & MASK32)
        val = mul_encrypt(val, (key[2] + key[3]) & MASK32)
        addr, val = self._rc4_code(addr, val)
        addr, val = rsa_crypt(addr, val, self.RSA_ENC_KEY, self.RSA_MODULUS)

        s = self._words
        for i in range(64):
            addr = ((addr + s[2][i]) & MASK32) ^ s[0][i]
            val = ((val - s[3][i]) & MASK32) ^ s[1][i]

        if self.beefcodf:
            self._extra_seeds(oldaddr, oldval)
        return addr, val

    def decrypt_code(self, addr: int, val: int) -> "typing.Tuple[int, int]":
        addr &= MASK32
        val &= MASK32
        key = self.key

        s = self._words
        for i in range(63, -1, -1):
            val = ((val ^ s[1][i]) + s[3][i]) & MASK32
            addr = ((addr ^ s[0][i]) - s[2][i]) & MASK32

        addr, val = rsa_crypt(addr, val, self.RSA_DEC_KEY, self.RSA_MODULUS)
        addr, val = self._rc4_code(addr, val)
        addr = mul_decrypt(addr, (key[0] - key[1]) & MASK32)
        val = mul_decrypt(val, (key[2] + key[3]) & MASK32)

        if self.beefcodf:
            self._extra_seeds(addr, val)
        return addr, val


__all__ = [
    "BEEFCODE",
    "Cb7",
    "is_beefcode",
    "mul_decrypt",
    "mul_encrypt",
    "rsa_crypt",
]
