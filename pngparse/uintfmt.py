"""Text renderings of unsigned integers for diagnostic output."""


def _bits(val, num):
    return "".join("1" if (val >> i) & 1 else "0" for i in range(num, -1, -1))


def bits_u8(val, num=7):
    """Bits ``num`` down to 0 of an 8-bit value, most significant first."""
    return _bits(val & 0xFF, num & 0b111)


def chr_u8(val):
    """The byte as a single character."""
    return chr(val & 0xFF)


def hex_u8(val):
    """The byte as two upper-case hex digits."""
    return f"{val & 0xFF:02X}"


def bits_u32(val, num=31):
    """Bits ``num`` down to 0 of a 32-bit value, most significant first."""
    return _bits(val & 0xFFFFFFFF, num & 0b11111)


def chr_u32(val):
    """The four bytes of a 32-bit value, in memory order, as characters."""
    return (val & 0xFFFFFFFF).to_bytes(4, "little").decode("latin-1")


def _hex_bytes(val, size):
    raw = (val & ((1 << (8 * size)) - 1)).to_bytes(size, "little")
    return " ".join(f"{byte:02X}" for byte in raw)


def hex_u32(val):
    """The four bytes of a 32-bit value, in memory order, as hex pairs."""
    return _hex_bytes(val, 4)


def hex_u64(val):
    """The eight bytes of a 64-bit value, in memory order, as hex pairs."""
    return _hex_bytes(val, 8)