"""Big-endian integer fields used by Standard MIDI File chunk headers.

Reads are fail-soft: asking for a field that runs past the end of the buffer
yields 0 instead of raising.  Callers check lengths before trusting a value.
"""

from __future__ import annotations


def read_u32_be(data: bytes, offset: int = 0) -> int:
    if offset < 0 or offset + 4 > len(data):
        return 0
    return int.from_bytes(data[offset : offset + 4], "big")


def read_u16_be(data: bytes, offset: int = 0) -> int:
    if offset < 0 or offset + 2 > len(data):
        return 0
    return int.from_bytes(data[offset : offset + 2], "big")


def write_u32_be(value: int) -> bytes:
    return (int(value) & 0xFFFF_FFFF).to_bytes(4, "big", signed=False)


def write_u16_be(value: int) -> bytes:
    return (int(value) & 0xFFFF).to_bytes(2, "big", signed=False)
