"""DEFLATE block decoding."""

from .debug import debug_out
from .errors import InvalidDataError
from .huffman import HuffmanTree
from .uintfmt import bits_u8

END_OF_BLOCK = 256

LENGTH_BASE = (
    3, 4, 5, 6, 7, 8, 9, 10,
    11, 13, 15, 17,
    19, 23, 27, 31,
    35, 43, 51, 59,
    67, 83, 99, 115,
    131, 163, 195, 227,
    258,
)

LENGTH_EXTRA_BITS = (
    0, 0, 0, 0, 0, 0, 0, 0,
    1, 1, 1, 1,
    2, 2, 2, 2,
    3, 3, 3, 3,
    4, 4, 4, 4,
    5, 5, 5, 5,
    0,
)

# Codes 30 and 31 never occur in valid data; their base of 0 marks them.
DIST_BASE = (
    1, 2, 3, 4,
    5, 7,
    9, 13,
    17, 25,
    33, 49,
    65, 97,
    129, 193,
    257, 385,
    513, 769,
    1025, 1537,
    2049, 3073,
    4097, 6145,
    8193, 12289,
    16385, 24577,
    0, 0,
)

DIST_EXTRA_BITS = (
    0, 0, 0, 0,
    1, 1,
    2, 2,
    3, 3,
    4, 4,
    5, 5,
    6, 6,
    7, 7,
    8, 8,
    9, 9,
    10, 10,
    11, 11,
    12, 12,
    13, 13,
    0, 0,
)

CODE_LENGTH_ORDER = (16, 17, 18, 0, 8, 7, 9, 6, 10, 5, 11, 4, 12, 3, 13, 2, 14, 1, 15)

_FIXED_LITERAL = HuffmanTree([8] * 144 + [9] * 112 + [7] * 24 + [8] * 8)
_FIXED_DISTANCE = HuffmanTree([5] * 32)


def decode_huffman(bits, literal, distance, data):
    """Decode literal/length and distance symbols until end of block."""
    out = debug_out()
    print("\x1b[34mHuffman decode ... \x1b[m", file=out)

    while True:
        value = literal.decode(bits)
        if value == END_OF_BLOCK:
            break
        if value < 256:
            data.insert(value)
            continue
        if value >= 286:
            print("\x1b[31mError: Invalid Huffman Decode\x1b[m", file=out)
            raise InvalidDataError()

        len_idx = value - 257
        length = LENGTH_BASE[len_idx] + bits.bits(LENGTH_EXTRA_BITS[len_idx])

        dist_idx = distance.decode(bits)
        if dist_idx >= len(DIST_BASE):
            raise InvalidDataError()
        dist = DIST_BASE[dist_idx] + bits.bits(DIST_EXTRA_BITS[dist_idx])
        if dist == 0 or dist > data.index:
            raise InvalidDataError()

        back = data.index - dist
        for _ in range(length):
            data.insert(data.data[back])
            back += 1

    print("\x1b[34mHuffman decode done \x1b[m", file=out)


def dynamic_huffman(bits, hlit, hdist, hclen):
    """Read the code lengths of a dynamic block's literal and distance trees."""
    code_lengths = [0] * 19
    for symbol in CODE_LENGTH_ORDER[:hclen]:
        code_lengths[symbol] = bits.bits(3)
    tree = HuffmanTree(code_lengths)

    total = hlit + hdist
    lengths = []
    while len(lengths) < total:
        value = tree.decode(bits)
        if value < 16:
            lengths.append(value)
            continue
        if value == 16:
            if not lengths:
                raise InvalidDataError()
            repeat = bits.bits(2) + 3
            fill = lengths[-1]
        elif value == 17:
            repeat = bits.bits(3) + 3
            fill = 0
        elif value == 18:
            repeat = bits.bits(7) + 11
            fill = 0
        else:
            print("\x1b[31mError: Invalid Huffman Decode\x1b[m", file=debug_out())
            raise InvalidDataError()
        if len(lengths) + repeat > total:
            raise InvalidDataError()
        lengths.extend([fill] * repeat)
    return lengths


def block_direct(bits, data):
    """Copy a stored (uncompressed) block."""
    out = debug_out()
    print("\x1b[34mdirect Data ...\x1b[m", file=out)

    bits.move_index(0)
    size = bits.bits(16)
    inverse = bits.bits(16)
    if size != inverse ^ 0xFFFF:
        raise InvalidDataError()
    payload = bits.data_at_index()
    if len(payload) < size:
        raise InvalidDataError()
    for byte in payload[:size]:
        data.insert(byte)
    bits.move_index(size)

    print("\x1b[34mdirect Data done\x1b[m", file=out)


def block_static(bits, data):
    """Decode a block compressed with the fixed Huffman codes."""
    out = debug_out()
    print("\x1b[34mstatic Huffman ...\x1b[m", file=out)
    decode_huffman(bits, _FIXED_LITERAL, _FIXED_DISTANCE, data)
    print("\x1b[34mstatic Huffman done\x1b[m", file=out)


def block_dynamic(bits, data):
    """Decode a block that carries its own Huffman code description."""
    out = debug_out()
    print("\x1b[34mdynamic Huffman ...\x1b[m", file=out)

    hlit = bits.bits(5) + 257
    hdist = bits.bits(5) + 1
    hclen = bits.bits(4) + 4
    print(f"H_LIT  : {hlit}", file=out)
    print(f"H_DIST : {hdist}", file=out)
    print(f"H_CLEN : {hclen}", file=out)

    lengths = dynamic_huffman(bits, hlit, hdist, hclen)
    literal = HuffmanTree(lengths[:hlit])
    distance = HuffmanTree(lengths[hlit:])
    decode_huffman(bits, literal, distance, data)

    print("\x1b[34mdynamic Huffman done\x1b[m", file=out)


_BLOCK_HANDLERS = {
    0b00: block_direct,
    0b01: block_static,
    0b10: block_dynamic,
}


def blocks(bits, data):
    """Decode DEFLATE blocks from ``bits`` into ``data`` up to the final one."""
    out = debug_out()
    while True:
        print(f"decoding ...  {bits.byte_index}/{bits.length}", file=out)
        final = bits.bits(1)
        block_type = bits.bits(2)
        print(f"BFINAL : {bits_u8(final, 0)}", file=out)
        print(f"BTYPE  : {bits_u8(block_type, 1)}", file=out)

        handler = _BLOCK_HANDLERS.get(block_type)
        if handler is None:
            print("\x1b[31mError: Invalid Block Type\x1b[m", file=out)
            raise InvalidDataError()
        handler(bits, data)
        print(file=out)
        if final:
            break
    print(f"decoding done {bits.byte_index}/{bits.length}", file=out)