import pytest

from pngparse.datastream import DataStream


def test_insert_then_extract_round_trip():
    payload = b"PNG data"
    stream = DataStream(len(payload))
    for byte in payload:
        stream.insert(byte)
    assert stream.index == len(payload)
    stream.index = 0
    assert bytes(stream.extract() for _ in payload) == payload


def test_insert_beyond_capacity_raises():
    stream = DataStream(1)
    stream.insert(7)
    with pytest.raises(IndexError):
        stream.insert(8)


def test_extract_beyond_capacity_raises():
    stream = DataStream(0)
    with pytest.raises(IndexError):
        stream.extract()


def test_concatenate_grows_length_and_appends():
    stream = DataStream(0)
    stream.concatenate(b"abc")
    stream.concatenate(b"de")
    assert stream.length == 5
    assert bytes(stream.data) == b"abcde"


def test_concatenate_keeps_unwritten_capacity():
    stream = DataStream(2)
    stream.concatenate(b"ab")
    assert len(stream) == 4
    assert bytes(stream.data) == b"\x00\x00ab"


def test_large_capacity_is_not_preallocated():
    stream = DataStream(0xFFFFFFFF)
    stream.insert(1)
    stream.insert(2)
    assert bytes(stream.data) == b"\x01\x02"


def test_insert_masks_to_byte():
    stream = DataStream(1)
    stream.insert(0x1FF)
    stream.index = 0
    assert stream.extract() == 0xFF