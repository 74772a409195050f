"""Lenient decimal parsing for fractal coordinates."""

from __future__ import annotations


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atod(s: str) -> float:
    """Parse an optionally signed decimal number such as ``-0.8``.

    Reads the integer digits, skips exactly one character whatever it is,
    then reads fraction digits. Anything else is ignored, so text without
    digits gives 0.0.
    """
    pos = 0
    negative = False
    if s[:1] == "-":
        negative = True
        pos = 1
    elif s[:1] == "+":
        pos = 1

    result = 0.0
    while pos < len(s) and _is_digit(s[pos]):
        result = result * 10 + (ord(s[pos]) - ord("0"))
        pos += 1
    pos += 1

    fraction = 1.0
    while pos < len(s) and _is_digit(s[pos]):
        fraction /= 10.0
        result += (ord(s[pos]) - ord("0")) * fraction
        pos += 1

    return result * -1 if negative else result