"""Error numbers of the graphics layer and their descriptions."""

from __future__ import annotations

from enum import IntEnum
from typing import Union


class MlxErrno(IntEnum):
    """Error numbers, each carrying its English description."""

    def __new__(cls, value: int, message: str) -> "MlxErrno":
        member = int.__new__(cls, value)
        member._value_ = value
        member._message = message
        return member

    SUCCESS = 0, "No Errors"
    INVEXT = 1, "File has invalid extension"
    INVFILE = 2, "Failed to open the file"
    INVPNG = 3, "PNG file is invalid or corrupted"
    INVXPM = 4, "XPM42 file is invalid or corrupted"
    INVPOS = 5, "The specified X or Y positions are out of bounds"
    INVDIM = 6, "The specified Width or Height dimensions are out of bounds"
    INVIMG = 7, (
        "The provided image is invalid, might indicate mismanagement of images"
    )
    VERTFAIL = 8, "Failed to compile the vertex shader."
    FRAGFAIL = 9, "Failed to compile the fragment shader."
    SHDRFAIL = 10, "Failed to compile the shaders."
    MEMFAIL = 11, "Failed to allocate memory"
    GLADFAIL = 12, "Failed to initialize GLAD"
    GLFWFAIL = 13, "Failed to initialize GLFW"
    WINFAIL = 14, "Failed to create window"
    STRTOOBIG = 15, "String is too big to be drawn"

    @property
    def message(self) -> str:
        """English description of this error number."""
        return self._message


def strerror(val: Union[MlxErrno, int]) -> str:
    """Return the English description of an error number."""
    if isinstance(val, bool) or not isinstance(val, int):
        raise TypeError(f"expected an error number, got {type(val).__name__}")
    try:
        errno = MlxErrno(val)
    except ValueError:
        raise ValueError(f"unknown error number {val!r}") from None
    return errno.message


class MlxError(Exception):
    """Raised when a graphics operation fails; carries its error number."""

    def __init__(self, errno: Union[MlxErrno, int]) -> None:
        self.errno = MlxErrno(errno)
        super().__init__(self.errno.message)