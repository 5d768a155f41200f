"""Byte-buffer helpers: fill, zero, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: Bytes) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def mem_set(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``value``."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    return mem_set(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_copy(dst: bytearray, src: Bytes, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def mem_move(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst < 0 or src < 0 or length < 0:
        raise ValueError("offsets and length must not be negative")
    if src + length > len(buf) or dst + length > len(buf):
        raise ValueError("move reaches past the end of the buffer")
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def mem_chr(data: Bytes, value: int, length: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` in the first ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(a: Bytes, b: Bytes, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0