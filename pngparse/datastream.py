"""Growable byte buffer with a read/write cursor and a fixed capacity."""


class DataStream:
    """A byte buffer of capacity ``length`` written and read at ``index``.

    Storage is allocated as bytes are written; positions inside the
    capacity that were never written read as zero.
    """

    def __init__(self, length):
        self.length = length
        self.data = bytearray()
        self.index = 0

    def __len__(self):
        return self.length

    def concatenate(self, data):
        """Append ``data`` after the full current capacity."""
        if len(self.data) < self.length:
            self.data.extend(bytes(self.length - len(self.data)))
        self.data.extend(data)
        self.length += len(data)

    def insert(self, value):
        """Write one byte at the cursor and advance it."""
        if self.index >= self.length:
            raise IndexError("DataStream Limit")
        value &= 0xFF
        if self.index < len(self.data):
            self.data[self.index] = value
        else:
            self.data.extend(bytes(self.index - len(self.data)))
            self.data.append(value)
        self.index += 1

    def extract(self):
        """Read one byte at the cursor and advance it."""
        if self.index >= self.length:
            raise IndexError("DataStream Limit")
        value = self.data[self.index] if self.index < len(self.data) else 0
        self.index += 1
        return value