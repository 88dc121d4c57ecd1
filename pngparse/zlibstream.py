"""The zlib wrapper around a DEFLATE stream."""

from .bitstream import BitFlag, BitStream
from .debug import debug_out
from .deflate import blocks
from .errors import InvalidDataError
from .uintfmt import bits_u8, hex_u32


class ZlibHeader:
    """The zlib header and trailer, and the DEFLATE data between them."""

    def __init__(self, bits):
        self.cmf = bits.byte8()
        self.flg = bits.byte8()

        if self.fdict:
            self.dictid = bits.byte32()
            overhead = 10
        else:
            self.dictid = 0
            overhead = 6

        self.length = bits.length - overhead
        if self.length < 0:
            raise InvalidDataError()
        self.data = bytes(bits.data_at_index()[:self.length])
        self.adler32 = bits.byte32(BitFlag.REV, self.length)

    @property
    def cm(self):
        return self.cmf & 0b1111

    @property
    def cinfo(self):
        return (self.cmf >> 4) & 0b1111

    @property
    def fcheck(self):
        return self.flg & 0b11111

    @property
    def fdict(self):
        return (self.flg >> 5) & 0b1

    @property
    def flevel(self):
        return (self.flg >> 6) & 0b11

    def to_bitstream(self):
        """A stream over the compressed DEFLATE data."""
        return BitStream(self.data)

    def describe(self):
        """The header fields as text."""
        return (
            f"CMF   : {bits_u8(self.cmf)}\n"
            f"CM    : {bits_u8(self.cm, 3)}\n"
            f"CINFO : {bits_u8(self.cinfo, 3)}\n"
            f"FLG    : {bits_u8(self.flg)}\n"
            f"FCHECK : {bits_u8(self.fcheck, 4)}\n"
            f"FDICT  : {bits_u8(self.fdict, 0)}\n"
            f"FLEVEL : {bits_u8(self.flevel, 1)}\n"
            f"DICTID  : {hex_u32(self.dictid)}\n"
            f"ADLER32 : {hex_u32(self.adler32)}\n"
            f"Length : {self.length}\n"
        )


def decompress(bits, data):
    """Decompress the zlib stream in ``bits`` into ``data``."""
    out = debug_out()
    print("\x1b[34mzlib ...\x1b[m", file=out)

    header = ZlibHeader(bits)
    out.write(header.describe())
    print(file=out)

    blocks(header.to_bitstream(), data)

    print("\x1b[34mzlib done\x1b[m", file=out)