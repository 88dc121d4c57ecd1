"""Pure-Python PNG decoding: chunks, zlib/DEFLATE, Huffman codes and filters."""

__version__ = "0.1.0"