"""Decoded RGBA images and loading them from PNG files."""

import struct
import sys

from .bitstream import BitFlag, BitStream, LengthReachedError
from .chunk import Chunk
from .datastream import DataStream
from .debug import debug_out, set_debug
from .errors import InvalidDataError, PngError, SignatureError
from .fileio import read_file
from .pngfilter import unfilter
from .uintfmt import hex_u64
from .zlibstream import decompress

PNG_SIGNATURE = 0x0A1A0A0D474E5089
DECODE_CAPACITY = 0xFFFFFFFF


def _f32(value):
    """Round ``value`` to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class PngImage:
    """An image of ``w`` by ``h`` pixels stored as 8-bit RGBA rows."""

    def __init__(self, w, h):
        self.w = w
        self.h = h
        self.data = bytearray(w * h * 4)

    def data_index(self, x, y):
        """Offset of the first byte of pixel (x, y) in ``data``."""
        return (x + y * self.w) * 4

    def set_pixel_rgba(self, x, y, pxl):
        """Store ``pxl`` given as 0xRRGGBBAA at (x, y)."""
        idx = self.data_index(x, y)
        self.data[idx:idx + 4] = (pxl & 0xFFFFFFFF).to_bytes(4, "big")

    def scale(self, new_w, new_h):
        """A nearest-neighbour resized copy of the image."""
        img = PngImage(new_w, new_h)
        for y in range(new_h):
            sy = int(_f32(_f32(_f32(y) / _f32(new_h)) * _f32(self.h)))
            for x in range(new_w):
                sx = int(_f32(_f32(_f32(x) / _f32(new_w)) * _f32(self.w)))
                old = self.data_index(sx, sy)
                new = img.data_index(x, y)
                img.data[new:new + 4] = self.data[old:old + 4]
        return img


class Ihdr:
    """The fields of a PNG image header chunk."""

    def __init__(self, bits):
        self.width = bits.byte32(BitFlag.REV)
        self.height = bits.byte32(BitFlag.REV)
        self.bit_depth = bits.byte8()
        self.color_type = bits.byte8()
        self.compression_method = bits.byte8()
        self.filter_method = bits.byte8()
        self.interlace_method = bits.byte8()

    def describe(self):
        """The header fields as text."""
        return (
            f" width: {self.width}\n"
            f"height: {self.height}\n"
            f" bit_depth: {self.bit_depth}\n"
            f"color_type: {self.color_type}\n"
            f"compression_method: {self.compression_method}\n"
            f"     filter_method: {self.filter_method}\n"
            f"  interlace_method: {self.interlace_method}\n"
        )


def _decode(file_path):
    out = debug_out()
    print(f"loading '{file_path}' ...", file=out)
    file = BitStream(read_file(file_path))
    print(f"file length: {file.length}", file=out)
    print(file=out)

    received = file.byte64()
    print("signature", file=out)
    print(f"template: {hex_u64(PNG_SIGNATURE)}", file=out)
    print(f"received: {hex_u64(received)}", file=out)
    if received != PNG_SIGNATURE:
        raise SignatureError()
    print(file=out)

    header = None
    image_data = DataStream(0)
    while True:
        print(file=out)
        chunk = Chunk(file)
        out.write(chunk.describe())
        print(file=out)
        if chunk.is_ihdr():
            header = Ihdr(chunk.to_bitstream())
            out.write(header.describe())
        if chunk.is_idat():
            image_data.concatenate(chunk.data)
        if chunk.is_iend():
            break

    if header is None:
        raise InvalidDataError()

    decoded = DataStream(DECODE_CAPACITY)
    decompress(BitStream(bytes(image_data.data)), decoded)

    img = PngImage(header.width, header.height)
    unfilter(decoded, img)
    return img


def load_png(file_path, debug=False):
    """Load an 8-bit RGBA PNG; on any failure return ``missing_image()``."""
    if file_path is None:
        return missing_image()
    set_debug(debug)
    try:
        return _decode(file_path)
    except (PngError, LengthReachedError, IndexError, ValueError) as exc:
        print(f"Exception while loading Image: {exc}", file=sys.stderr)
    return missing_image()


def missing_image():
    """An 8 by 4 black and magenta checkerboard used as a placeholder."""
    img = PngImage(8, 4)
    for y in range(4):
        for x in range(8):
            pxl = 0x000000FF if (x & 1) == (y & 1) else 0xFF00FFFF
            img.set_pixel_rgba(x, y, pxl)
    return img