"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    """Raise ValueError unless ``n`` is a valid length for every buffer."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: Buffer, c: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_length(n, buf)
    offset = bytes(buf[:n]).find(c & 0xFF)
    return None if offset < 0 else offset


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_length(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst