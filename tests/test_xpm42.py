import io

import pytest

from fractol.mlx.errors import MlxErrno, MlxError
from fractol.mlx.pixels import rgba_to_mono
from fractol.mlx.xpm42 import Xpm, load_xpm42, read_xpm42

SAMPLE = (
    "!XPM42\n"
    "2 2 2 1 c\n"
    ". #FF0000FF\n"
    "x #00FF00FF\n"
    ".x\n"
    "x.\n"
)

RED = bytes.fromhex("FF0000FF")
GREEN = bytes.fromhex("00FF00FF")


def _stream(text):
    return io.BytesIO(text.encode("latin-1"))


def _expect_invalid(text):
    with pytest.raises(MlxError) as exc:
        read_xpm42(_stream(text))
    assert exc.value.errno is MlxErrno.INVXPM


def test_reads_header_fields():
    xpm = read_xpm42(_stream(SAMPLE))
    assert isinstance(xpm, Xpm)
    assert (xpm.width, xpm.height, xpm.color_count, xpm.cpp, xpm.mode) == (2, 2, 2, 1, "c")


def test_reads_pixels_row_by_row():
    xpm = read_xpm42(_stream(SAMPLE))
    assert bytes(xpm.texture.pixels) == RED + GREEN + GREEN + RED


def test_reads_from_text_stream():
    xpm = read_xpm42(io.StringIO(SAMPLE))
    assert bytes(xpm.texture.pixels) == RED + GREEN + GREEN + RED


def test_two_chars_per_pixel():
    text = "!XPM42\n2 1 2 2 c\nab #FF0000FF\ncd #00FF00FF\ncdab\n"
    xpm = read_xpm42(_stream(text))
    assert bytes(xpm.texture.pixels) == GREEN + RED


def test_monochrome_mode_converts_colours():
    text = "!XPM42\n1 1 1 1 m\n. #336699FF\n.\n"
    xpm = read_xpm42(_stream(text))
    assert bytes(xpm.texture.pixels) == rgba_to_mono(0x336699FF).to_bytes(4, "big")


def test_unknown_pixel_character_is_transparent():
    text = "!XPM42\n2 1 1 1 c\n. #FF0000FF\n.?\n"
    xpm = read_xpm42(_stream(text))
    assert bytes(xpm.texture.pixels) == RED + bytes(4)


def test_hex_header_numbers():
    text = "!XPM42\n0x2 0x1 1 1 c\n. #FF0000FF\n..\n"
    xpm = read_xpm42(_stream(text))
    assert (xpm.width, xpm.height) == (2, 1)


def test_last_row_without_newline():
    xpm = read_xpm42(_stream(SAMPLE.rstrip("\n")))
    assert bytes(xpm.texture.pixels) == RED + GREEN + GREEN + RED


@pytest.mark.parametrize(
    "text",
    [
        "",
        "!XPM41\n2 2 2 1 c\n",
        "!XPM42\n",
        "!XPM42\n2 2 2 1 x\n. #FF0000FF\nx #00FF00FF\n.x\nx.\n",
        "!XPM42\n2 2 2 1\n. #FF0000FF\nx #00FF00FF\n.x\nx.\n",
        "!XPM42\n1 1 1 11 c\n",
        "!XPM42\n32768 1 0 1 c\n",
        "!XPM42\n2 2 2 1 c\n. #FF0000FF\n",
        "!XPM42\n2 2 2 1 c\n. #FF0000FF\nx #00FF00FF\n.x\n",
        "!XPM42\n2 2 2 1 c\n. #FF0000FF\nx #00FF00FF\n.x.\nx.\n",
        "!XPM42\n1 1 1 1 c\n. FF0000FF\n.\n",
        "!XPM42\n1 1 1 1 c\n.  #FF0000FF\n.\n",
        "!XPM42\n1 1 1 1 c\n. #FF0000FF \n.\n",
        "!XPM42\n1 1 1 1 c\n. #-F0000FF\n.\n",
    ],
)
def test_invalid_documents(text):
    _expect_invalid(text)


def test_load_from_file(tmp_path):
    path = tmp_path / "image.xpm42"
    path.write_text(SAMPLE)
    xpm = load_xpm42(path)
    assert bytes(xpm.texture.pixels) == RED + GREEN + GREEN + RED


def test_load_requires_extension(tmp_path):
    path = tmp_path / "image.png"
    path.write_text(SAMPLE)
    with pytest.raises(MlxError) as exc:
        load_xpm42(path)
    assert exc.value.errno is MlxErrno.INVEXT


def test_load_missing_file(tmp_path):
    with pytest.raises(MlxError) as exc:
        load_xpm42(tmp_path / "missing.xpm42")
    assert exc.value.errno is MlxErrno.INVFILE


def test_load_invalid_file(tmp_path):
    path = tmp_path / "broken.xpm42"
    path.write_text("not an image\n")
    with pytest.raises(MlxError) as exc:
        load_xpm42(path)
    assert exc.value.errno is MlxErrno.INVXPM