"""Switchable destination for diagnostic output."""

import io
import sys


class _Discard(io.TextIOBase):
    """A text stream that drops everything written to it."""

    def writable(self):
        return True

    def write(self, text):
        return len(text)


_DISCARD = _Discard()
_enabled = False


def set_debug(debug):
    """Send diagnostics to standard output when ``debug`` is true."""
    global _enabled
    _enabled = bool(debug)


def debug_out():
    """Return the stream diagnostics should be written to."""
    return sys.stdout if _enabled else _DISCARD