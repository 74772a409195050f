# fractol

Render the Mandelbrot set and Julia sets into an RGBA pixel buffer, entirely
in Python and with no dependencies beyond the standard library.

## What is in the package

### The fractal itself

- `fractol.args`: `check_args(argv)` takes a command line with the program
  name first, such as `["fractol", "julia", "-0.8", "0.156"]`. The set may be
  named by any prefix of `mandelbrot` or `julia`; the full name is returned.
  The Mandelbrot set takes no further arguments, a Julia set needs two
  coordinates. Anything else raises `ArgumentError` with the reason.
  `check_coordinate(x)` accepts an optional sign followed by digits and at
  most one dot.
- `fractol.atod`: `atod(s)` turns a coordinate string into a float. It is
  lenient: it reads the integer digits, skips one character, then reads the
  fraction digits, and ignores everything else.
- `fractol.render`: `FractalView` holds the set's name, the target `Image`,
  the visible height `mag` in plane units, the Julia constant `x`, `y` and the
  accented colour channel `color`. `calc_coordinates(view)` centres the plane
  on the origin and fills the image using `mandelbrot` or `julia` (chosen by
  the first letter of the name). `draw_fractal` walks the image row by row,
  and `color_pixel(iterations, channel)` maps an escape count to RGBA bytes;
  points that do not escape within `MAX_ITER` (255) steps are transparent
  black.

### `fractol.mlx`: a headless canvas

- `canvas`: `Mlx(width, height, title)` keeps images, their placed
  `Instance`s and a depth-sorted render queue of `DrawCall`s. It is also a
  context manager that calls `terminate()` on exit. `new_image`,
  `image_to_window`, `delete_image`, `set_instance_depth` and
  `texture_to_image` manage images; `loop_hook(func, param)` registers a
  per-frame callback and `loop()` runs frames until `close_window()` is
  called, leaving the visible `(image, instance)` pairs, in depth order, in
  `Mlx.frame`. `Image.put_pixel` and `Image.resize` (nearest neighbour) work
  on raw RGBA bytes. `set_setting` / `get_setting` change the global
  `Setting`s that new windows copy.
- `xpm42`: `read_xpm42(stream)` and `load_xpm42(path)` decode XPM42 images
  into an `Xpm` whose `texture` is a `Texture`.
- `pixels`: `draw_pixel`, `rgba_to_mono` and the 64-bit FNV-1a `fnv_hash`.
- `dlist`: `DoublyLinkedList` with removal by predicate and sorting by key.
- `errors`: failures raise `MlxError`, which carries an `MlxErrno`;
  `strerror(val)` gives the message for an error number.

### `fractol.libft`: small helpers

`chars` (ASCII classification and case conversion), `memory` (byte-buffer
fill, copy, search and compare), `strings` (C-style string functions that
return indexes, and `atoi` with 32-bit wrap-around), `transform` (`substr`,
`strjoin`, `strtrim`, `split`, `itoa`, `strmapi`, `striteri`), `output`
(writing to file descriptors) and `lists` (a singly linked `LinkedList`).

## Installing

Install the package with pip. To run the tests, install the `test` extra,
which brings in pytest.

## Example

```python
from fractol.args import ArgumentError, check_args
from fractol.atod import atod
from fractol.mlx.canvas import Mlx
from fractol.render import FractalView, calc_coordinates

argv = ["fractol", "julia", "-0.8", "0.156"]
try:
    name = check_args(argv)
except ArgumentError as exc:
    raise SystemExit(str(exc))

with Mlx(400, 300, "fractol") as mlx:
    image = mlx.new_image(400, 300)
    view = FractalView(name, image, mag=3.0, x=atod(argv[2]), y=atod(argv[3]))
    calc_coordinates(view)
    rgba = bytes(image.pixels)  # copy before the window is terminated
```

`rgba` then holds 400 × 300 pixels of raw RGBA data, ready for any tool that
accepts it.

## What the package does not do

There is no installed command and nothing opens a window on screen: `Mlx`
only keeps its state in memory, and `Mlx.loop` works out what would be drawn
without displaying it. There is no keyboard, mouse or scroll handling, so no
interactive zooming, and no PNG loading or text drawing. Saving or showing
the rendered pixels is left to the caller.