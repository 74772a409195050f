"""An off-screen canvas: window state, images, their instances and the render loop.

Images hold RGBA pixel buffers and may be shown several times as instances
at different positions and depths. Each pass of the loop runs the loop
hooks and then works out which instances are drawn, in depth order. The
result is kept in ``Mlx.frame``.
"""

from __future__ import annotations

import math
import struct
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from fractol.mlx.dlist import DoublyLinkedList, equal_image, equal_instance
from fractol.mlx.errors import MlxErrno, MlxError
from fractol.mlx.pixels import BPP, draw_pixel

_INT16_MAX = 32767


class Setting(IntEnum):
    """Global settings that apply to windows created afterwards."""

    STRETCH_IMAGE = 0
    FULLSCREEN = 1
    MAXIMIZED = 2
    DECORATED = 3
    HEADLESS = 4


_settings: Dict[Setting, int] = {
    Setting.STRETCH_IMAGE: 0,
    Setting.FULLSCREEN: 0,
    Setting.MAXIMIZED: 0,
    Setting.DECORATED: 1,
    Setting.HEADLESS: 0,
}


def _setting(setting: Union[Setting, int]) -> Setting:
    try:
        return Setting(setting)
    except ValueError:
        raise ValueError(f"invalid setting {setting!r}") from None


def set_setting(setting: Union[Setting, int], value: int) -> None:
    """Change a global setting."""
    _settings[_setting(setting)] = int(value)


def get_setting(setting: Union[Setting, int]) -> int:
    """Return the current value of a global setting."""
    return _settings[_setting(setting)]


def _f32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


def _check_dimensions(width: int, height: int) -> None:
    if not width or not height or width < 0 or height < 0 or width > _INT16_MAX or height > _INT16_MAX:
        raise MlxError(MlxErrno.INVDIM)


@dataclass
class Instance:
    """One placement of an image in the window."""

    x: int
    y: int
    z: int
    enabled: bool = True


@dataclass
class Texture:
    """A pixel buffer not bound to any window."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BPP


@dataclass(eq=False)
class Image:
    """An RGBA pixel buffer together with the places it is shown."""

    width: int
    height: int
    pixels: bytearray = field(default_factory=bytearray, repr=False)
    instances: List[Instance] = field(default_factory=list, repr=False)
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = bytearray(self.width * self.height * BPP)

    @property
    def count(self) -> int:
        """Number of instances of this image."""
        return len(self.instances)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)`` to the RGBA colour ``color``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MlxError(MlxErrno.INVPOS)
        draw_pixel(self.pixels, (y * self.width + x) * BPP, color)

    def resize(self, width: int, height: int) -> None:
        """Scale the pixel buffer to a new size by nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self.width and height == self.height:
            return
        wstep = _f32(_f32(self.width) / _f32(width))
        hstep = _f32(_f32(self.height) / _f32(height))
        source = bytes(self.pixels)
        columns = [int(_f32(_f32(i) * wstep)) for i in range(width)]
        resized = bytearray()
        for j in range(height):
            row = int(_f32(_f32(j) * hstep)) * self.width
            for col in columns:
                start = (row + col) * BPP
                resized += source[start:start + BPP]
        self.pixels = resized
        self.width = width
        self.height = height


@dataclass(eq=False)
class DrawCall:
    """An entry of the render queue: one instance of one image."""

    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        """The instance this draw call shows."""
        return self.image.instances[self.instance_id]


class Mlx:
    """A window holding images and the hooks run on every frame."""

    def __init__(self, width: int, height: int, title: str, resize: bool = False) -> None:
        if title is None:
            raise TypeError("title must be given")
        if width <= 0:
            raise ValueError("Window width must be positive")
        if height <= 0:
            raise ValueError("Window height must be positive")
        self.title = title
        self.width = width
        self.height = height
        self.initial_width = width
        self.initial_height = height
        self.resizable = bool(resize)
        self.settings: Dict[Setting, int] = dict(_settings)
        self.images = DoublyLinkedList()
        self.render_queue = DoublyLinkedList()
        self.hooks: List[Tuple[Callable[[Any], None], Any]] = []
        self.zdepth = 0
        self.delta_time = 0.0
        self.frame: List[Tuple[Image, Instance]] = []
        self.frame_count = 0
        self.projection: Tuple[float, ...] = ()
        self.terminated = False
        self._should_close = False
        self._sort_queue = False
        self._clock_start = time.monotonic()

    def __enter__(self) -> "Mlx":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        if not self.terminated:
            self.terminate()

    @property
    def should_close(self) -> bool:
        """True once the window has been asked to close."""
        return self._should_close

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this window."""
        _check_dimensions(width, height)
        image = Image(width, height)
        self.images.prepend(image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Show ``image`` at ``(x, y)`` and return the new instance's index."""
        if image is None:
            raise TypeError("image must be given")
        image.instances.append(Instance(x, y, self.zdepth))
        self.zdepth += 1
        index = image.count - 1
        self.render_queue.prepend(DrawCall(image, index))
        self._sort_queue = True
        return index

    def delete_image(self, image: Image) -> None:
        """Remove ``image`` and all of its instances from this window."""
        if image is None:
            raise TypeError("image must be given")
        while self.render_queue.remove(lambda call: equal_instance(call, image)) is not None:
            pass
        if self.images.remove(lambda content: equal_image(content, image)) is not None:
            image.pixels = bytearray()
            image.instances = []

    def set_instance_depth(self, instance: Instance, depth: int) -> None:
        """Move ``instance`` to depth ``depth``; the queue is re-sorted before the next draw."""
        if instance is None:
            raise TypeError("instance must be given")
        if instance.z == depth:
            return
        instance.z = depth
        self._sort_queue = True

    def loop_hook(self, func: Callable[[Any], None], param: Any = None) -> bool:
        """Register ``func(param)`` to run once per frame."""
        if func is None:
            raise TypeError("func must be given")
        self.hooks.append((func, param))
        return True

    def _update_projection(self) -> None:
        stretch = get_setting(Setting.STRETCH_IMAGE)
        width = float(self.initial_width if stretch else self.width)
        height = float(self.initial_height if stretch else self.height)
        depth = float(self.zdepth)
        span = depth - -depth
        z_scale = -2.0 / span if span else -math.inf
        z_offset = -((depth + -depth) / span) if span else math.nan
        self.projection = (
            2.0 / width, 0.0, 0.0, 0.0,
            0.0, 2.0 / -height, 0.0, 0.0,
            0.0, 0.0, z_scale, 0.0,
            -1.0, -(height / -height), z_offset, 1.0,
        )

    def _run_hooks(self) -> None:
        for func, param in list(self.hooks):
            if self._should_close:
                break
            func(param)

    def _render(self) -> None:
        if self._sort_queue:
            self._sort_queue = False
            self.render_queue.sort_by(lambda call: call.instance.z)
        self.frame = [
            (call.image, call.instance)
            for call in self.render_queue
            if call.image.enabled and call.instance.enabled
        ]

    def loop(self) -> None:
        """Run frames until the window is closed, normally from a loop hook."""
        previous = 0.0
        while not self._should_close:
            start = time.monotonic() - self._clock_start
            self.delta_time = start - previous
            previous = start
            if self.width > 1 or self.height > 1:
                self._update_projection()
            self._run_hooks()
            self._render()
            self.frame_count += 1

    def close_window(self) -> None:
        """Ask the loop to stop after the current frame."""
        self._should_close = True

    def terminate(self) -> None:
        """Release every hook, draw call and image of this window."""
        self.hooks.clear()
        self.render_queue.clear()

        def release(image: Image) -> None:
            image.pixels = bytearray()
            image.instances = []

        self.images.clear(release)
        self.frame = []
        self.terminated = True

    def texture_to_image(self, texture: Texture) -> Image:
        """Create an image holding a copy of ``texture``'s pixels."""
        if texture is None:
            raise TypeError("texture must be given")
        if texture.bytes_per_pixel > BPP:
            raise ValueError(f"textures of more than {BPP} bytes per pixel are not supported")
        image = self.new_image(texture.width, texture.height)
        row = texture.width * texture.bytes_per_pixel
        for y in range(texture.height):
            start = y * row
            image.pixels[start:start + row] = texture.pixels[start:start + row]
        return image