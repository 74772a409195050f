"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional


def _check_span(buffer_len: int, start: int, length: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"{what}: length must not be negative")
    if start < 0 or start + length > buffer_len:
        raise ValueError(f"{what}: range {start}..{start + length} outside buffer of {buffer_len} bytes")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value & 0xFF``."""
    _check_span(len(buffer), 0, length, "memset")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` within ``n`` bytes, or None."""
    _check_span(len(data), 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_span(len(src), 0, n, "memcpy")
    _check_span(len(dst), 0, n, "memcpy")
    dst[:n] = src[:n]
    return dst


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping ranges are handled as if through a temporary copy.
    """
    _check_span(len(buffer), src, length, "memmove")
    _check_span(len(buffer), dest, length, "memmove")
    buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer