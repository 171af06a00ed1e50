"""Lookup table for counting set bits."""

from __future__ import annotations

ONES_8BITS: tuple[int, ...] = tuple(bin(i).count("1") for i in range(256))


def ones_in_byte(value: int) -> int:
    """Number of set bits in a byte value (0..255)."""
    if not 0 <= value <= 255:
        raise ValueError(f"not a byte value: {value}")
    return ONES_8BITS[value]


def count_ones(data: bytes | bytearray | memoryview) -> int:
    """Total number of set bits in a byte sequence."""
    return sum(ONES_8BITS[b] for b in bytes(data))