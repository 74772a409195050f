"""Mandelbrot and Julia set rendering into an in-memory RGBA image."""

__version__ = "0.1.0"