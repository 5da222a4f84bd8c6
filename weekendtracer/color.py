"""Colour values and their output as text pixels."""

from __future__ import annotations

import math
from typing import TextIO

from weekendtracer.interval import Interval
from weekendtracer.vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Apply the gamma-2 transform; non-positive values map to zero."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """The gamma-corrected colour as three bytes in [0, 255]."""
    r, g, b = (
        int(256 * _INTENSITY.clamp(linear_to_gamma(c))) for c in pixel_color
    )
    return r, g, b


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as ``"r g b"`` followed by a newline."""
    r, g, b = to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")