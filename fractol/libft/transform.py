"""String building helpers: slicing, joining, trimming, splitting and mapping.

Like the other string helpers, these treat a NUL character as the end of
the string.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from fractol.libft.strings import strdup

CharLike = Union[str, int]

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integers are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _single(value: object, index: int) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"mapping function returned {value!r} at index {index}, expected one character")
    return value


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must not be negative")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``s``.

    When the last character that would be kept is the very first character
    of ``s``, the result is empty.
    """
    text = strdup(s)
    chars = strdup(charset)
    start = len(text) - len(text.lstrip(chars))
    end = len(text.rstrip(chars))
    if end <= 1:
        return ""
    return text[start:end]


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    text = strdup(s)
    ch = _char(sep)
    if ch == "\0":
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def itoa(n: int) -> str:
    """Decimal form of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    return "".join(_single(f(i, ch), i) for i, ch in enumerate(strdup(s)))


def striteri(s: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each character of ``s`` up to the first NUL.

    When ``f`` returns a character it replaces the one at that index;
    returning None leaves it as it was.
    """
    for i, ch in enumerate(s):
        if ch == "\0":
            break
        replacement = f(i, ch)
        if replacement is not None:
            s[i] = _single(replacement, i)