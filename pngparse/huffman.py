"""Canonical Huffman codes built from code lengths, as used by DEFLATE."""

from .bitstream import BitFlag
from .uintfmt import bits_u32


def _canonical_codes(bit_lengths):
    max_length = max(bit_lengths, default=0)

    counts = [0] * (max_length + 1)
    for length in bit_lengths:
        counts[length] += 1
    counts[0] = 0

    first_codes = [0] * (max_length + 1)
    code = 0
    for length in range(max_length):
        code = (code + counts[length]) << 1
        if counts[length + 1] > 0:
            first_codes[length + 1] = code

    codes = []
    for length in bit_lengths:
        if length:
            codes.append(first_codes[length])
            first_codes[length] += 1
        else:
            codes.append(0)
    return codes


class HuffmanTree:
    """Decoder for a canonical Huffman code given one bit length per symbol.

    Symbols with length zero take no part in the code.
    """

    def __init__(self, bit_lengths):
        self.bit_lengths = list(bit_lengths)
        self.codes = _canonical_codes(self.bit_lengths)
        self._lookup = {}
        for symbol, (length, code) in enumerate(zip(self.bit_lengths, self.codes)):
            if length:
                self._lookup.setdefault((length, code), symbol)
        self._lengths = sorted({length for length in self.bit_lengths if length})

    def __len__(self):
        return len(self.bit_lengths)

    def decode(self, bits):
        """Read one symbol from ``bits``.

        The lowest symbol whose code matches the upcoming bits wins; if no
        code matches, 0 is returned and the stream is left where it was.
        """
        best = None
        for length in self._lengths:
            code = bits.bits(length, BitFlag.STAY | BitFlag.REV)
            symbol = self._lookup.get((length, code))
            if symbol is not None and (best is None or symbol < best[0]):
                best = (symbol, length)
        if best is None:
            return 0
        symbol, length = best
        bits.index += length
        return symbol

    def describe(self):
        """One line per symbol showing its assigned code."""
        return "".join(
            f"[{symbol:3d}] {bits_u32(code, length)}\n"
            for symbol, (length, code) in enumerate(zip(self.bit_lengths, self.codes))
        )