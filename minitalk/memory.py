"""Byte-buffer helpers working on bytes-like objects."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` and return it."""
    _check_span(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def memcpy(dst: Buffer | None, src: ReadableBuffer | None, n: int) -> Buffer | None:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both buffers are required")
    _check_span(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Buffer | None, src: ReadableBuffer | None, n: int) -> Buffer | None:
    """Copy ``n`` bytes from ``src`` to ``dst``; overlapping views are safe."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both buffers are required")
    _check_span(n, dst, src)
    # Taking a snapshot first makes overlapping regions copy correctly.
    dst[:n] = bytes(src[:n])
    return dst


def memchr(data: ReadableBuffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_span(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first differing bytes within ``n`` bytes, else 0."""
    _check_span(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0