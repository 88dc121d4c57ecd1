import pytest

from pngparse.datastream import DataStream
from pngparse.errors import InvalidDataError
from pngparse.image import PngImage
from pngparse.pngfilter import unfilter


def _stream(raw):
    data = DataStream(0)
    data.concatenate(bytes(raw))
    return data


def _run(w, h, raw):
    img = PngImage(w, h)
    unfilter(_stream(raw), img)
    return bytes(img.data)


def test_none_filter_copies():
    pixels = [1, 2, 3, 4, 5, 6, 7, 8]
    assert _run(2, 1, [0] + pixels) == bytes(pixels)


def test_sub_filter_with_zero_deltas_repeats_first_pixel():
    first = [10, 20, 30, 40]
    assert _run(3, 1, [1] + first + [0] * 8) == bytes(first * 3)


def test_sub_filter_wraps():
    result = _run(2, 1, [1, 200, 0, 0, 0, 100, 0, 0, 0])
    assert result[4] == 44


def test_up_filter_with_zero_deltas_copies_previous_row():
    row = [9, 8, 7, 6, 5, 4, 3, 2]
    result = _run(2, 2, [0] + row + [2] + [0] * 8)
    assert result == bytes(row * 2)


def test_up_on_first_row_is_identity():
    row = [9, 8, 7, 6, 5, 4, 3, 2]
    assert _run(2, 1, [2] + row) == bytes(row)


def test_paeth_first_row_matches_sub():
    row = [3, 50, 100, 250, 7, 9, 11, 13, 1, 2, 3, 4]
    assert _run(3, 1, [4] + row) == _run(3, 1, [1] + row)


def test_paeth_second_row_with_zero_left_matches_up():
    first = [4, 5, 6, 7]
    result = _run(1, 2, [0] + first + [4, 0, 0, 0, 0])
    assert result == bytes(first * 2)


def test_average_of_equal_neighbours():
    first = [20, 40, 60, 80, 20, 40, 60, 80]
    result = _run(2, 2, [0] + first + [3, 10, 20, 30, 40, 0, 0, 0, 0])
    assert result[8:12] == bytes([20, 40, 60, 80])
    assert result[12:16] == bytes([20, 40, 60, 80])


def test_invalid_filter_type():
    with pytest.raises(InvalidDataError):
        _run(1, 1, [5, 0, 0, 0, 0])


def test_short_data_raises():
    with pytest.raises(IndexError):
        _run(2, 1, [0, 1, 2, 3])