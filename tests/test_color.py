import io

import pytest

from weekendtracer.color import Color, linear_to_gamma, to_bytes, write_color


def test_linear_to_gamma_is_square_root():
    assert linear_to_gamma(0.25) == pytest.approx(0.5)
    assert linear_to_gamma(1.0) == 1.0


def test_linear_to_gamma_non_positive_is_zero():
    assert linear_to_gamma(0.0) == 0.0
    assert linear_to_gamma(-3.0) == 0.0


def test_black_and_white_bytes():
    assert to_bytes(Color(0, 0, 0)) == (0, 0, 0)
    assert to_bytes(Color(1, 1, 1)) == (255, 255, 255)


def test_bright_values_clamp():
    assert to_bytes(Color(5, 2, 1.5)) == to_bytes(Color(1, 1, 1))


def test_negative_values_are_black():
    assert to_bytes(Color(-1, -0.5, 0)) == to_bytes(Color(0, 0, 0))


def test_bytes_are_monotonic():
    levels = [to_bytes(Color(v, v, v))[0] for v in (0.0, 0.1, 0.3, 0.6, 0.9)]
    assert levels == sorted(levels)
    assert all(0 <= x <= 255 for x in levels)


def test_write_color_line_format():
    out = io.StringIO()
    write_color(out, Color(0, 0, 0))
    write_color(out, Color(1, 1, 1))
    assert out.getvalue() == "0 0 0\n255 255 255\n"


def test_write_color_matches_to_bytes():
    out = io.StringIO()
    c = Color(0.2, 0.5, 0.8)
    write_color(out, c)
    assert tuple(int(x) for x in out.getvalue().split()) == to_bytes(c)