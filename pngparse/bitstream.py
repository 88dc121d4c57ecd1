"""Bit- and byte-level reader over an immutable byte buffer."""

import enum


class BitFlag(enum.IntFlag):
    """Options for reads: STAY keeps the position, REV reverses the order."""

    NONE = 0
    STAY = 0b01
    REV = 0b10


class LengthReachedError(Exception):
    """A read moved past the end of the stream."""

    def __init__(self, message="BitStream Length reached"):
        super().__init__(message)


def reverse_bits(bits):
    """Reverse the order of the 32 bits of ``bits``."""
    bits &= 0xFFFFFFFF
    bits = ((bits & 0xFFFF0000) >> 16) | ((bits & 0x0000FFFF) << 16)
    bits = ((bits & 0xFF00FF00) >> 8) | ((bits & 0x00FF00FF) << 8)
    bits = ((bits & 0xF0F0F0F0) >> 4) | ((bits & 0x0F0F0F0F) << 4)
    bits = ((bits & 0xCCCCCCCC) >> 2) | ((bits & 0x33333333) << 2)
    bits = ((bits & 0xAAAAAAAA) >> 1) | ((bits & 0x55555555) << 1)
    return bits & 0xFFFFFFFF


class BitStream:
    """Reads bits (LSB first) and byte-aligned integers from a buffer.

    ``index`` counts bits: its low three bits are the bit within the
    current byte, the rest is the byte position.
    """

    def __init__(self, data):
        if isinstance(data, str):
            data = data.encode("latin-1")
        self.data = bytes(data)
        self.length = len(self.data)
        self.index = 0

    def __len__(self):
        return self.length

    @property
    def bit_index(self):
        return self.index & 0b111

    @property
    def byte_index(self):
        return self.index >> 3

    def set_index(self, bits, byte_index):
        """Place the cursor at bit ``bits`` of byte ``byte_index``."""
        self.index = (byte_index << 3) | (bits & 0b111)

    def _window(self, start, count):
        chunk = self.data[start:start + count]
        return chunk + bytes(count - len(chunk))

    def bits(self, num, extra=BitFlag.NONE):
        """Read ``num`` bits (1 to 32, wrapping modulo 32)."""
        if num == 0:
            return 0
        num = ((num - 1) & 0b11111) + 1
        shift = 32 - num

        raw = int.from_bytes(self._window(self.byte_index, 5), "little")
        value = (raw >> self.bit_index) & 0xFFFFFFFF

        if extra & BitFlag.REV:
            value = reverse_bits(value) >> shift
        value &= 0xFFFFFFFF >> shift

        if not extra & BitFlag.STAY:
            self.index += num

        if self.byte_index > self.length:
            raise LengthReachedError()
        return value

    def _read_bytes(self, count, extra, skip_bytes):
        start = self.byte_index + skip_bytes
        if start + count > self.length:
            raise LengthReachedError()
        order = "big" if extra & BitFlag.REV else "little"
        value = int.from_bytes(self.data[start:start + count], order)
        if not extra & BitFlag.STAY:
            self.move_index(count + skip_bytes)
        return value

    def byte8(self, extra=BitFlag.NONE, skip_bytes=0):
        """Read the next byte-aligned byte, after skipping ``skip_bytes``."""
        return self._read_bytes(1, extra, skip_bytes)

    def byte32(self, extra=BitFlag.NONE, skip_bytes=0):
        """Read 4 byte-aligned bytes: little-endian, or big-endian with REV."""
        return self._read_bytes(4, extra, skip_bytes)

    def byte64(self, extra=BitFlag.NONE, skip_bytes=0):
        """Read 8 byte-aligned bytes: little-endian, or big-endian with REV."""
        return self._read_bytes(8, extra, skip_bytes)

    def move_index(self, skip):
        """Align to the next byte boundary and advance ``skip`` bytes."""
        idx = self.byte_index
        if self.bit_index != 0:
            idx += 1
        idx += skip
        if idx > self.length:
            raise LengthReachedError()
        self.set_index(0, idx)

    def data_at_index(self, skip_bytes=0):
        """Return a view of the data from the current byte onwards."""
        return memoryview(self.data)[self.byte_index + skip_bytes:]