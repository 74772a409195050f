"""Reading images in the XPM42 text format.

An XPM42 file starts with the line ``!XPM42``, followed by a header line
``<width> <height> <colour count> <chars per pixel> <mode>`` where the mode
is ``c`` for RGBA colour or ``m`` for monochrome. Then come the colour
entries (``<chars> #RRGGBBAA``), one per line, and finally one line of
pixel characters per image row.
"""

from __future__ import annotations

import os
import re
import string
from dataclasses import dataclass
from itertools import takewhile
from typing import IO, Dict, Optional, Tuple, Union

from fractol.mlx.canvas import Texture
from fractol.mlx.errors import MlxErrno, MlxError
from fractol.mlx.pixels import BPP, draw_pixel, fnv_hash, rgba_to_mono

_MAGIC = b"!XPM42\n"
_HEADER_LINE_LIMIT = 63
_INT16_MAX = 32767
_MAX_CPP = 10
_TABLE_SIZE = 65535
_WHITESPACE = " \t\n\v\f\r"

_INT = rb"[+-]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
_HEADER = re.compile(
    rb"\s*(" + _INT + rb")\s+(" + _INT + rb")\s+(" + _INT + rb")\s+(" + _INT + rb")\s*(\S)"
)


@dataclass
class Xpm:
    """A decoded XPM42 image."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str

    @property
    def width(self) -> int:
        return self.texture.width

    @property
    def height(self) -> int:
        return self.texture.height


def _invalid() -> MlxError:
    return MlxError(MlxErrno.INVXPM)


def _readline(stream: IO, limit: int = -1) -> Optional[bytes]:
    """Read one line as bytes, or None at end of input."""
    line = stream.readline(limit)
    if not line:
        return None
    if isinstance(line, str):
        try:
            return line.encode("latin-1")
        except UnicodeEncodeError:
            raise _invalid() from None
    return bytes(line)


def _to_int(token: bytes) -> int:
    """Convert an integer written in decimal, octal (leading 0) or hex (0x)."""
    text = token.decode("ascii")
    sign = -1 if text.startswith("-") else 1
    body = text.lstrip("+-")
    if body[:2].lower() == "0x":
        return sign * int(body[2:], 16)
    if len(body) > 1 and body.startswith("0"):
        return sign * int(body, 8)
    return sign * int(body)


def _hex_channel(chunk: bytes) -> int:
    """Parse up to two hex digits the lenient way: junk after the digits is ignored."""
    text = chunk.decode("latin-1").lstrip(_WHITESPACE)
    negative = text[:1] == "-"
    if text[:1] in ("-", "+"):
        text = text[1:]
    digits = "".join(takewhile(lambda ch: ch in string.hexdigits, text))
    value = int(digits, 16) if digits else 0
    return (-value if negative else value) & 0xFF


def _parse_header(line: bytes) -> Tuple[int, int, int, int, str]:
    match = _HEADER.match(line)
    if match is None:
        raise _invalid()
    width, height, color_count, cpp = (_to_int(match.group(k)) for k in range(1, 5))
    mode = match.group(5).decode("latin-1")
    if width < 0 or height < 0 or cpp < 0:
        raise _invalid()
    if width > _INT16_MAX or height > _INT16_MAX or mode not in ("c", "m") or cpp > _MAX_CPP:
        raise _invalid()
    return width, height, color_count, cpp, mode


def _parse_entry(line: bytes, cpp: int, mode: str) -> Tuple[int, int]:
    """Return the table slot and colour of one colour entry."""
    if line.rfind(b" ") != cpp:
        raise _invalid()
    marker = line[cpp + 1:cpp + 3]
    if len(marker) < 2 or marker[:1] != b"#" or not marker[1:2].isalnum():
        raise _invalid()
    start = cpp + 2
    red, green, blue, alpha = (_hex_channel(line[start + k:start + k + 2]) for k in (0, 2, 4, 6))
    color = red << 24 | green << 16 | blue << 8 | alpha
    if mode == "m":
        color = rgba_to_mono(color)
    return fnv_hash(line[:cpp]) % _TABLE_SIZE, color


def read_xpm42(stream: IO) -> Xpm:
    """Decode an XPM42 image from a binary or text stream.

    Colours are looked up through a hash table of fixed size, so pixel
    characters with no entry of their own come out fully transparent black.
    """
    if _readline(stream, _HEADER_LINE_LIMIT) != _MAGIC:
        raise _invalid()
    header = _readline(stream, _HEADER_LINE_LIMIT)
    if header is None:
        raise _invalid()
    width, height, color_count, cpp, mode = _parse_header(header)

    table: Dict[int, int] = {}
    for _ in range(color_count):
        line = _readline(stream)
        if line is None:
            raise _invalid()
        slot, color = _parse_entry(line, cpp, mode)
        table[slot] = color

    pixels = bytearray(width * height * BPP)
    for y in range(height):
        line = _readline(stream)
        if line is None:
            raise _invalid()
        if line.endswith(b"\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid()
        chunks = [line[k * cpp:(k + 1) * cpp] for k in range(width)]
        for x, chunk in enumerate(chunks):
            color = table.get(fnv_hash(chunk) % _TABLE_SIZE, 0)
            draw_pixel(pixels, (y * width + x) * BPP, color)

    return Xpm(Texture(width, height, pixels, BPP), color_count, cpp, mode)


def load_xpm42(path: Union[str, "os.PathLike[str]"]) -> Xpm:
    """Load an XPM42 image from a file whose name contains ``.xpm42``."""
    if ".xpm42" not in os.fsdecode(path):
        raise MlxError(MlxErrno.INVEXT)
    try:
        handle = open(path, "rb")
    except OSError as err:
        raise MlxError(MlxErrno.INVFILE) from err
    with handle:
        return read_xpm42(handle)