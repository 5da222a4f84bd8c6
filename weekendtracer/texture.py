"""Textures: colours as a function of surface coordinates and position."""

from __future__ import annotations

import math
import os
from abc import ABC, abstractmethod

from weekendtracer.color import Color
from weekendtracer.interval import Interval
from weekendtracer.rtw_image import RtwImage
from weekendtracer.vec3 import Point3, Vec3

_UNIT = Interval(0, 1)
_COLOR_SCALE = 1.0 / 255.0


class Texture(ABC):
    """A colour lookup by texture coordinates (u, v) and point p."""

    @abstractmethod
    def value(self, u: float, v: float, p: Point3) -> Color:
        """The colour at the given coordinates."""


class SolidColor(Texture):
    """A texture of one constant colour."""

    def __init__(self, albedo: Color) -> None:
        self.albedo = albedo

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.albedo


def _as_texture(source: Texture | Color) -> Texture:
    return source if isinstance(source, Texture) else SolidColor(source)


class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures."""

    def __init__(self, scale: float, even: Texture | Color, odd: Texture | Color) -> None:
        self.inv_scale = 1.0 / scale
        self.even = _as_texture(even)
        self.odd = _as_texture(odd)

    def value(self, u: float, v: float, p: Point3) -> Color:
        cells = sum(math.floor(self.inv_scale * c) for c in p)
        texture = self.even if cells % 2 == 0 else self.odd
        return texture.value(u, v, p)


class ImageTexture(Texture):
    """A texture read from an image file; solid cyan if the image is missing."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self.image = RtwImage(filename)

    def value(self, u: float, v: float, p: Point3) -> Color:
        if self.image.height() <= 0:
            return Vec3(0, 1, 1)

        u = _UNIT.clamp(u)
        v = 1.0 - _UNIT.clamp(v)

        i = int(u * self.image.width())
        j = int(v * self.image.height())
        r, g, b = self.image.pixel_data(i, j)
        return Vec3(_COLOR_SCALE * r, _COLOR_SCALE * g, _COLOR_SCALE * b)