# pngparse

A small, dependency-free PNG reader. It walks the PNG chunk list, inflates
the image data with its own zlib and DEFLATE decoder, reverses the per-row
PNG filters and hands back an RGBA pixel buffer.

## Installation

```
pip install .
```

## Loading an image

```python
from pngparse.image import load_png

img = load_png("picture.png")
print(img.w, img.h)

offset = img.data_index(0, 0)
r, g, b, a = img.data[offset:offset + 4]
```

`img.data` is a `bytearray` of `w * h * 4` bytes, one RGBA quadruple per
pixel, row by row.

`load_png` does not raise for a file it cannot decode: when reading or
decoding fails with a `PngError`, a `LengthReachedError`, an `IndexError`
or a `ValueError`, it prints `Exception while loading Image: ...` on
standard error and returns the placeholder from `missing_image()`, an 8×4
checkerboard of black and magenta. Passing `None` as the path returns the
placeholder as well. With `debug=True` the decoder's trace goes to standard
output.

Pixels can be written with `set_pixel_rgba(x, y, 0xRRGGBBAA)`, and images
can be resized with nearest-neighbour sampling:

```python
thumb = img.scale(32, 32)
```

## What is decoded

- All three DEFLATE block types: stored, fixed Huffman and dynamic Huffman.
- The five PNG row filters (None, Sub, Up, Average, Paeth); an unknown
  filter type raises `InvalidDataError`.
- The `IHDR`, `IDAT` and `IEND` chunks; other chunks are read past.

## Limitations

- Pixel data is always read as 8-bit RGBA (four bytes per pixel). Other
  bit depths and colour types are not converted and decode wrongly.
- Interlaced images are not supported.
- Chunk CRCs and the zlib Adler-32 checksum are read but not enforced.
- There is no encoder and no command-line tool.

## Lower-level pieces

- `pngparse.bitstream.BitStream` reads bits (least significant first) and
  byte-aligned words from a byte buffer; `BitFlag.STAY` and `BitFlag.REV`
  change how a read behaves. Reading past the end raises
  `LengthReachedError`.
- `pngparse.chunk.Chunk` parses one PNG chunk; `calc_crc()` computes its
  CRC-32 and `describe()` reports whether it matches.
- `pngparse.zlibstream.ZlibHeader` parses the zlib header and trailer, and
  `pngparse.zlibstream.decompress` inflates a zlib stream into a
  `pngparse.datastream.DataStream`.
- `pngparse.deflate.blocks` decodes raw DEFLATE blocks.
- `pngparse.huffman.HuffmanTree` builds canonical Huffman codes from bit
  lengths and decodes symbols from a `BitStream`.
- `pngparse.pngfilter.unfilter` reverses PNG scanline filters into a
  `PngImage`.
- `pngparse.uintfmt` formats integers as bit strings, characters and hex.
- `pngparse.debug.set_debug(True)` sends the decoder's trace output to
  standard output; `debug_out()` returns the current destination.
- `pngparse.fileio.read_file` reads a whole file, raising `BadFileError` if
  it cannot.

Errors derive from `pngparse.errors.PngError`: `NotImplementedFeatureError`,
`InvalidDataError`, `BadFileError` and `SignatureError`.