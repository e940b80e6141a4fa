"""Byte-buffer operations over mutable bytes-like objects.

Destination buffers must be writable (``bytearray`` or a writable
``memoryview``). Counts larger than the buffers involved, or negative,
raise ``ValueError`` instead of reading or writing past the end.
"""

from __future__ import annotations

import sys
from typing import TypeVar

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

SIZE_MAX = sys.maxsize * 2 + 1

Buffer = TypeVar("Buffer", bytearray, memoryview)


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first *n* bytes of *buf* with the low byte of *c*; return *buf*."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray | memoryview, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy *n* bytes from *src* into the start of *dest*; return *dest*.

    The regions are expected not to overlap; use :func:`memmove` when they may.
    """
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy *n* bytes from *src* into *dest*, correct even if they overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(s: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to the low byte of *c*
    within the first *n* bytes of *s*, or None if there is none."""
    _check_count(n, s)
    index = bytes(s[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(
    s1: bytes | bytearray | memoryview, s2: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0 if
    the prefixes are equal.
    """
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of *nmemb* elements of *size* bytes each.

    Raises MemoryError if the total size would overflow the platform's size type.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb != 0 and SIZE_MAX // nmemb < size:
        raise MemoryError(f"{nmemb} * {size} bytes overflows the size type")
    return bytearray(nmemb * size)