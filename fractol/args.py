"""Validation of the command-line arguments that choose a fractal."""

from __future__ import annotations

from typing import Sequence

MANDELBROT = "mandelbrot"
JULIA = "julia"


class ArgumentError(ValueError):
    """Raised when the command-line arguments do not describe a fractal."""


def check_coordinate(x: str) -> bool:
    """True when ``x`` is an optional sign followed by digits and at most one dot."""
    body = x[1:] if x[:1] in ("-", "+") else x
    return all(ch == "." or "0" <= ch <= "9" for ch in body) and body.count(".") <= 1


def check_args(argv: Sequence[str]) -> str:
    """Validate ``argv`` (program name first) and return the chosen set's full name.

    The set may be given by any prefix of its name. The Mandelbrot set takes
    no further arguments; the Julia set needs two coordinates.
    """
    if len(argv) < 2:
        raise ArgumentError("fractol invalid")
    name = argv[1]
    count = len(argv)
    is_mandelbrot = MANDELBROT.startswith(name)
    is_julia = JULIA.startswith(name)
    if not (is_mandelbrot or is_julia):
        raise ArgumentError("fractol invalid")
    if is_mandelbrot and count > 2:
        raise ArgumentError("The Mandelbrot set does not require parameters")
    if is_julia and count < 4:
        raise ArgumentError("The Julia set requires parameters x and y")
    if is_julia and not (check_coordinate(argv[2]) and check_coordinate(argv[3])):
        raise ArgumentError("The coordinates are not valid")
    return MANDELBROT if is_mandelbrot else JULIA