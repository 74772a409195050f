"""Character classification and case conversion over the ASCII range.

Every function accepts either a one-character string or an integer code
point. Predicates return a bool; the case converters return a value of
the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_LOWER_TO_UPPER = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code for ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Convert an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + _LOWER_TO_UPPER)
    return c


def toupper(c: CharLike) -> CharLike:
    """Convert an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - _LOWER_TO_UPPER)
    return c