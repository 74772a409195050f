"""Writing characters, strings and numbers to file descriptors.

A descriptor of 0 is treated as "no output": nothing is written. Each
function returns the number of bytes it wrote.
"""

from __future__ import annotations

import os
from typing import Optional, Union

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _write(fd: int, data: bytes) -> int:
    if not fd:
        return 0
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: Union[str, int], fd: int) -> int:
    """Write one character, or one byte when given an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return _write(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> int:
    """Write ``s``; a missing string writes nothing."""
    if s is None:
        return 0
    return _write(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> int:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None or not fd:
        return 0
    return _write(fd, s.encode("utf-8") + b"\n")


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return _write(fd, str(n).encode("ascii"))