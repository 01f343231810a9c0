from __future__ import annotations


STATUS_BIT = 0x80
MAX_DATA_BYTE = 0x7F
NIBBLE_MASK = 0x0F


def is_status_byte(byte: int) -> bool:
    return bool(byte & STATUS_BIT)


def is_data_byte(byte: int) -> bool:
    return 0 <= byte <= MAX_DATA_BYTE


def high_nibble(byte: int) -> int:
    return (byte >> 4) & NIBBLE_MASK


def low_nibble(byte: int) -> int:
    return byte & NIBBLE_MASK


def join_14bit(low: int, high: int) -> int:
    # first data byte carries the least significant 7 bits
    return (high & MAX_DATA_BYTE) << 7 | (low & MAX_DATA_BYTE)


def is_byte(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF
