"""Byte-buffer helpers: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *available: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for size in available:
        if n > size:
            raise IndexError(f"byte count {n} exceeds buffer of {size} bytes")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first *n* bytes of *buf* to the low byte of *value*."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first *n* bytes of *buf*."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy *n* bytes from *src* to the start of *dest*."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy *n* bytes inside *buf*; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest_offset, len(buf) - src_offset)
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to *value* in the first *n* bytes."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first mismatch."""
    _check_count(n, len(a), len(b))
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of *nmemb* elements of *size* bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(nmemb * size)