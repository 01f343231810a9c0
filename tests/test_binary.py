"""Tests for byte-level helpers."""
from midistream.core.binary import (
    high_nibble,
    is_byte,
    is_data_byte,
    is_status_byte,
    join_14bit,
    low_nibble,
)


def test_status_and_data_bytes_split_on_high_bit():
    assert is_status_byte(0x80)
    assert is_status_byte(0xFF)
    assert not is_status_byte(0x7F)
    assert is_data_byte(0x00)
    assert is_data_byte(0x7F)
    assert not is_data_byte(0x80)


def test_nibbles():
    assert high_nibble(0x9A) == 0x9
    assert low_nibble(0x9A) == 0xA
    assert high_nibble(0x3F) == 0x3
    assert low_nibble(0x3F) == 0xF


def test_join_14bit_low_byte_first():
    assert join_14bit(0x00, 0x40) == 0x2000  # pitch bend centre
    assert join_14bit(0x7F, 0x7F) == 0x3FFF
    assert join_14bit(0x01, 0x00) == 1
    assert join_14bit(0x00, 0x01) == 128


def test_is_byte():
    assert is_byte(0)
    assert is_byte(255)
    assert not is_byte(256)
    assert not is_byte(-1)
    assert not is_byte(True)
    assert not is_byte("a")
    assert not is_byte(None)
