"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

_CALLOC_LIMIT = 4294967296


def _check_span(buffer: bytes | bytearray, n: int, start: int = 0) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if start < 0 or start + n > len(buffer):
        raise IndexError("span runs past the end of the buffer")


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buffer in place."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Raises MemoryError when the request exceeds the allocator's limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count != 0 and size > _CALLOC_LIMIT // count:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to value within the first n bytes."""
    target = value & 0xFF
    index = data.find(bytes([target]), 0, min(n, len(data)))
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if equal."""
    _check_span(first, n)
    _check_span(second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from the start of src to the start of dest."""
    _check_span(src, n)
    _check_span(dest, n)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes inside buffer, safely handling overlapping spans."""
    _check_span(buffer, n, src_offset)
    _check_span(buffer, n, dest_offset)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buffer to the low byte of value."""
    _check_span(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer