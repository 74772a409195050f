"""C-style string helpers working on Python strings.

A NUL character inside a string ends it, as it would in a C string, so
everything after the first ``"\\0"`` is ignored. Positions are returned as
indexes; where nothing is found the result is ``None``.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]

_WHITESPACE = " \t\n\f\v\r"
_INT_BITS = 32


def _cstr(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: size must not be negative")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    ch = _char(c)
    text = _cstr(s)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    ch = _char(c)
    text = _cstr(s)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first pair of codes that differ, or 0.
    """
    _check_size(n, "strncmp")
    a, b = _cstr(s1), _cstr(s2)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    _check_size(n, "strnstr")
    pattern = _cstr(needle)
    if not pattern:
        return 0
    index = _cstr(haystack).find(pattern, 0, n)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters; nothing
    when ``size`` is 0) and the full length of ``src``, so truncation shows
    as a length not smaller than ``size``.
    """
    _check_size(size, "strlcpy")
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` is not larger than ``dst``, ``dst`` is left
    unchanged and the length reported is ``size + len(src)``.
    """
    _check_size(size, "strlcat")
    head, tail = _cstr(dst), _cstr(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """Return a copy of the C string in ``s``."""
    return str(_cstr(s))


def atoi(s: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; a string with no digits gives 0.
    The result wraps like a 32-bit signed integer.
    """
    text = _cstr(s)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    half = 1 << (_INT_BITS - 1)
    return (value * sign + half) % (1 << _INT_BITS) - half