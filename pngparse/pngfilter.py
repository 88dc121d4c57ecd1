"""Reversal of PNG scanline filters for 8-bit RGBA data."""

from enum import IntEnum

from .errors import InvalidDataError

BYTES_PER_PIXEL = 4


class _FilterType(IntEnum):
    NONE = 0
    SUB = 1
    UP = 2
    AVERAGE = 3
    PAETH = 4


def _paeth(a, b, c):
    p = a + b - c
    diff_a = abs(p - a)
    diff_b = abs(p - b)
    diff_c = abs(p - c)
    if diff_a <= diff_b and diff_a <= diff_c:
        return a
    if diff_b <= diff_c:
        return b
    return c


def _predict(filter_type, a, b, c):
    """Return the predictor value for one byte given its neighbours."""
    if filter_type is _FilterType.SUB:
        return a
    if filter_type is _FilterType.UP:
        return b
    if filter_type is _FilterType.AVERAGE:
        return (a + b) >> 1
    if filter_type is _FilterType.PAETH:
        return _paeth(a, b, c)
    return 0


def _filter_type(value):
    try:
        return _FilterType(value)
    except ValueError:
        raise InvalidDataError() from None


def unfilter(data, img):
    """Read filtered scanlines from ``data`` and write the pixels into ``img``."""
    data.index = 0
    stride = img.w * BYTES_PER_PIXEL
    out = img.data
    for y in range(img.h):
        filter_type = _filter_type(data.extract())
        row = y * stride
        for i in range(stride):
            pos = row + i
            has_left = i >= BYTES_PER_PIXEL
            a = out[pos - BYTES_PER_PIXEL] if has_left else 0
            b = out[pos - stride] if y > 0 else 0
            c = out[pos - stride - BYTES_PER_PIXEL] if y > 0 and has_left else 0
            out[pos] = (data.extract() + _predict(filter_type, a, b, c)) & 0xFF