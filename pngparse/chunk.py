"""PNG chunks: length, type, data and CRC."""

import zlib

from .bitstream import BitFlag, BitStream
from .uintfmt import chr_u32, hex_u32

KNOWN_CHUNK_TYPES = (b"IHDR", b"IDAT", b"IEND")
UNKNOWN_TYPE = 0xFF


def known_type_index(type_):
    """Index of a chunk type among the known ones, or 0xFF if unknown."""
    name = (type_ & 0xFFFFFFFF).to_bytes(4, "little")
    try:
        return KNOWN_CHUNK_TYPES.index(name)
    except ValueError:
        return UNKNOWN_TYPE


class Chunk:
    """One chunk read from a PNG stream; the stream is left after it."""

    def __init__(self, bits):
        self.length = bits.byte32(BitFlag.REV)
        self.type = bits.byte32()
        self.data = bytes(bits.data_at_index()[:self.length])
        self.crc = bits.byte32(BitFlag.REV, self.length)
        self.type_index = known_type_index(self.type)

    def calc_crc(self):
        """The CRC-32 of the type and data, as stored in the file."""
        return zlib.crc32(self.type.to_bytes(4, "little") + self.data) & 0xFFFFFFFF

    def to_bitstream(self):
        """A stream over the chunk's data."""
        return BitStream(self.data)

    def describe(self):
        """Length, type and CRC check as text."""
        known = (
            "\x1b[31mUnknown\x1b[m"
            if self.type_index == UNKNOWN_TYPE
            else "\x1b[32mKnown\x1b[m"
        )
        crc = self.calc_crc()
        match = "\x1b[32mMatch\x1b[m" if self.crc == crc else "\x1b[31mNoMatch\x1b[m"
        return (
            f"Length: {self.length}\n"
            f"Type: {chr_u32(self.type)} ({known})\n"
            f"CRC: {hex_u32(self.crc)}\n"
            f"     {hex_u32(crc)} ({match})\n"
        )

    def is_ihdr(self):
        return self.type_index == 0

    def is_idat(self):
        return self.type_index == 1

    def is_iend(self):
        return self.type_index == 2