import pytest

from fractol.args import ArgumentError, check_args, check_coordinate


@pytest.mark.parametrize("text", ["0", "-0.8", "+0.156", "12.", ".5", "", "-", "123456"])
def test_valid_coordinates(text):
    assert check_coordinate(text) is True


@pytest.mark.parametrize("text", ["1.2.3", "abc", "1e5", "--1", "1-", " 1", "0,5", "+-1"])
def test_invalid_coordinates(text):
    assert check_coordinate(text) is False


def test_mandelbrot():
    assert check_args(["fractol", "mandelbrot"]) == "mandelbrot"


def test_mandelbrot_prefix():
    assert check_args(["fractol", "mandel"]) == "mandelbrot"


def test_julia():
    assert check_args(["fractol", "julia", "-0.8", "0.156"]) == "julia"


def test_julia_prefix_and_extra_arguments():
    assert check_args(["fractol", "jul", "0.285", "0.01", "extra"]) == "julia"


def _message(argv):
    with pytest.raises(ArgumentError) as exc:
        check_args(argv)
    return str(exc.value)


@pytest.mark.parametrize(
    "argv",
    [["fractol", "burningship"], ["fractol", "mandelbrotX"], ["fractol", "julias", "1", "2"], ["fractol"]],
)
def test_unknown_set(argv):
    assert _message(argv) == "fractol invalid"


def test_mandelbrot_with_parameters():
    assert _message(["fractol", "mandelbrot", "1"]) == "The Mandelbrot set does not require parameters"


def test_julia_without_parameters():
    assert _message(["fractol", "julia", "1"]) == "The Julia set requires parameters x and y"


def test_julia_with_bad_coordinates():
    assert _message(["fractol", "julia", "1.2.3", "0"]) == "The coordinates are not valid"
    assert _message(["fractol", "julia", "0", "x"]) == "The coordinates are not valid"


def test_empty_name_is_rejected():
    assert _message(["fractol", ""]) == "The Julia set requires parameters x and y"
    assert _message(["fractol", "", "1", "2"]) == "The Mandelbrot set does not require parameters"


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        check_args(["fractol", "nothing"])