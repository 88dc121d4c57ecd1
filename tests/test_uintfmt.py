import pytest

from pngparse.uintfmt import (
    bits_u32,
    bits_u8,
    chr_u32,
    chr_u8,
    hex_u32,
    hex_u64,
    hex_u8,
)


@pytest.mark.parametrize("value", [0, 1, 0x5A, 0xFF])
def test_bits_u8_round_trip(value):
    text = bits_u8(value)
    assert len(text) == 8
    assert int(text, 2) == value


def test_bits_u8_width_follows_num():
    assert len(bits_u8(0xFF, 2)) == 3
    assert set(bits_u8(0xFF, 2)) == {"1"}


def test_bits_u8_num_is_masked():
    assert bits_u8(0xA5, 15) == bits_u8(0xA5, 7)


@pytest.mark.parametrize("value", [0, 0x12345678, 0xFFFFFFFF])
def test_bits_u32_round_trip(value):
    text = bits_u32(value)
    assert len(text) == 32
    assert int(text, 2) == value


def test_bits_u32_partial():
    assert int(bits_u32(0xF0F0, 7), 2) == 0xF0F0 & 0xFF


def test_chr_u8_round_trip():
    assert chr_u8(ord("A")) == "A"


def test_chr_u32_chunk_type():
    assert chr_u32(int.from_bytes(b"IHDR", "little")) == "IHDR"


def test_hex_u8():
    assert hex_u8(0x0A) == "0A"


def test_hex_u32_memory_order():
    assert hex_u32(int.from_bytes(b"IEND", "little")) == "49 45 4E 44"


def test_hex_u64_png_signature():
    assert hex_u64(0x0A1A0A0D474E5089) == "89 50 4E 47 0D 0A 1A 0A"


def test_hex_u64_round_trip():
    value = 0x0123456789ABCDEF
    text = hex_u64(value)
    assert bytes.fromhex(text) == value.to_bytes(8, "little")