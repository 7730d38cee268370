"""Encrypt and decrypt cheat codes for CodeBreaker PS2 v1 - v6."""

SEEDS = (
    (
        0x0A0B8D9B, 0x0A0133F8, 0x0AF733EC, 0x0A15C574,
        0x0A50AC20, 0x0A920FB9, 0x0A599F0B, 0x0A4AA0E3,
        0x0A21C012, 0x0A906254, 0x0A31FD54, 0x0A091C0E,
        0x0A372B38, 0x0A6F266C, 0x0A61DD4A, 0x0A0DBF92,
    ),
    (
        0x00288596, 0x0037DD28, 0x003BEEF1, 0x000BC822,
        0x00BC935D, 0x00A139F2, 0x00E9BBF8, 0x00F57F7B,
        0x0090D704, 0x001814D4, 0x00C5848E, 0x005B83E7,
        0x00108CF7, 0x0046CE5A, 0x003A5BF4, 0x006FAFFC,
    ),
    (
        0x1DD9A10A, 0xB95AB9B0, 0x5CF5D328, 0x95FE7F10,
        0x8E2D6303, 0x16BB6286, 0xE389324C, 0x07AC6EA8,
        0xAA4811FE, 0x76CE4E18, 0xFE447516, 0xF9CD94D0,
        0x8C27F8C1, 0x1B2A7B4D, 0x82E84D0F, 0xB9A98C89,
    ),
)

MASK32 = 0xFFFFFFFF


def encrypt_code(addr: int, val: int) -> tuple[int, int]:
    """
    Encrypt a single CB v1 code.

    The top byte of the address (and with it the command nibble) survives
    encryption, which is what lets a decoder pick the seed row back up.
    The value word is only touched for commands above 2.
    """
    addr &= MASK32
    val &= MASK32
    cmd = addr >> 28
    top = addr & 0xFF000000
    addr = ((addr & 0xFF) << 16) | ((addr >> 8) & 0xFFFF)
    addr = (top | ((addr + SEEDS[1][cmd]) & 0x00FFFFFF)) ^ SEEDS[0][cmd]
    if cmd > 2:
        val = addr ^ ((val + SEEDS[2][cmd]) & MASK32)
    return addr, val


def decrypt_code(addr: int, val: int) -> tuple[int, int]:
    """Decrypt a single CB v1 code (inverse of encrypt_code)."""
    addr &= MASK32
    val &= MASK32
    cmd = addr >> 28
    if cmd > 2:
        val = ((addr ^ val) - SEEDS[2][cmd]) & MASK32
    tmp = addr ^ SEEDS[0][cmd]
    addr = (tmp - SEEDS[1][cmd]) & MASK32
    addr = (tmp & 0xFF000000) | ((addr & 0xFFFF) << 8) | ((addr >> 16) & 0xFF)
    return addr, val


__all__ = ["SEEDS", "encrypt_code", "decrypt_code"]
