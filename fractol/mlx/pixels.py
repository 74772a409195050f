"""Pixel helpers: RGBA packing, grayscale conversion and string hashing."""

from __future__ import annotations

import struct
from typing import Union

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
BPP = 4


def fnv_hash(data: Union[bytes, bytearray, str]) -> int:
    """64-bit FNV-1a hash of ``data``.

    Bytes from 0x80 up are mixed in sign-extended, as signed characters are.
    Strings are hashed in their UTF-8 form.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    value = _FNV_OFFSET
    for byte in raw:
        mixed = byte if byte < 0x80 else (byte - 256) & _MASK64
        value = ((value ^ mixed) * _FNV_PRIME) & _MASK64
    return value


def _f32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


def _weighted(weight: float, channel: int) -> int:
    return int(_f32(_f32(weight) * channel)) & 0xFF


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to gray, keeping its alpha channel."""
    color &= _MASK32
    r = _weighted(0.299, (color >> 24) & 0xFF)
    g = _weighted(0.587, (color >> 16) & 0xFF)
    b = _weighted(0.114, (color >> 8) & 0xFF)
    y = (r + g + b) & 0xFF
    return (y << 24 | y << 16 | y << 8 | (color & 0xFF)) & _MASK32


def draw_pixel(buffer: bytearray, offset: int, color: int) -> None:
    """Store ``color`` as R, G, B, A bytes at ``offset`` in ``buffer``."""
    if offset < 0 or offset + BPP > len(buffer):
        raise ValueError(f"pixel at offset {offset} lies outside buffer of {len(buffer)} bytes")
    buffer[offset:offset + BPP] = (color & _MASK32).to_bytes(BPP, "big")