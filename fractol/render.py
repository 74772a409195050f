"""Escape-time rendering of the Mandelbrot and Julia sets into an image."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fractol.mlx.canvas import Image

MAX_ITER = 255
_ACCENT = 0x3C


@dataclass
class FractalView:
    """The fractal being drawn and the part of the plane that is shown.

    ``mag`` is the height of the visible area in plane units; ``x`` and
    ``y`` are the Julia constant; ``color`` picks the accented channel.
    The remaining fields are filled in by :func:`calc_coordinates`.
    """

    name: str
    image: Image
    mag: float
    x: float = 0.0
    y: float = 0.0
    color: int = 0
    xmag: float = 0.0
    px_rate: float = 0.0
    r: float = 0.0
    i: float = 0.0


PixelFunc = Callable[[FractalView, float, float], bytes]


def color_pixel(iterations: int, channel: int) -> bytes:
    """RGBA bytes for a point that escaped after ``iterations`` steps.

    Points that never escape are black and transparent. Otherwise the
    channel numbered ``channel`` is fixed and the others shade with the
    iteration count.
    """
    n = iterations & 0xFF
    if n == MAX_ITER:
        return bytes(4)
    shade = (n * n + 115) & 0xFF
    accent = channel & 0xFF
    rgb = bytes(_ACCENT if k == accent else shade for k in range(3))
    return rgb + bytes([(n * n + 5) & 0xFF])


def mandelbrot(view: FractalView, r: float, i: float) -> bytes:
    """Colour of the point ``r + i·j`` in the Mandelbrot set."""
    x = y = 0.0
    n = 0
    while x * x + y * y < 4 and n < MAX_ITER:
        x, y = x * x - y * y + r, 2 * x * y + i
        n += 1
    return color_pixel(n, view.color)


def julia(view: FractalView, r: float, i: float) -> bytes:
    """Colour of the point ``r + i·j`` in the Julia set of ``view.x + view.y·j``."""
    n = 0
    while r * r + i * i < 4 and n < MAX_ITER:
        r, i = r * r - i * i + view.x, 2 * r * i + view.y
        n += 1
    return color_pixel(n, view.color)


def draw_fractal(view: FractalView, func: PixelFunc) -> None:
    """Fill ``view.image`` row by row, stepping ``1 / px_rate`` per pixel from ``(r, i)``."""
    step = 1.0 / view.px_rate
    image = view.image
    rows = []
    i = view.i
    for _ in range(image.height):
        r = view.r
        row = bytearray()
        for _ in range(image.width):
            row += func(view, r, i)
            r += step
        rows.append(bytes(row))
        i += step
    image.pixels[:] = b"".join(rows)


def calc_coordinates(view: FractalView) -> None:
    """Centre the view on the origin and draw the fractal named by ``view.name``."""
    if view.mag == 0:
        raise ValueError("mag must not be zero")
    view.px_rate = view.image.height / view.mag
    view.i = (view.mag / 2.0) * -1
    view.xmag = view.image.width / view.px_rate
    view.r = (view.xmag / 2.0) * -1
    func = mandelbrot if view.name[:1] == "m" else julia
    draw_fractal(view, func)