"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from typing import ClassVar

from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Point3, Vec3

_MIN_SIDE = 0.0001


def _pad(iv: Interval) -> Interval:
    return iv.expand(_MIN_SIDE) if iv.size() < _MIN_SIDE else iv


def _reciprocal(d: float) -> float:
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


class AABB:
    """A box given by one interval per axis; no side is narrower than a small delta."""

    __slots__ = ("x", "y", "z")

    EMPTY: ClassVar[AABB]
    UNIVERSE: ClassVar[AABB]

    def __init__(
        self,
        x: Interval = Interval.EMPTY,
        y: Interval = Interval.EMPTY,
        z: Interval = Interval.EMPTY,
    ) -> None:
        self.x = _pad(x)
        self.y = _pad(y)
        self.z = _pad(z)

    @classmethod
    def from_points(cls, a: Point3, b: Point3) -> AABB:
        """The box with ``a`` and ``b`` as opposite corners, in either order."""
        x, y, z = (
            Interval(p, q) if p <= q else Interval(q, p) for p, q in zip(a, b)
        )
        return cls(x, y, z)

    @classmethod
    def enclosing(cls, box0: AABB, box1: AABB) -> AABB:
        """The smallest box containing both boxes."""
        box = cls.__new__(cls)
        box.x = Interval.hull(box0.x, box1.x)
        box.y = Interval.hull(box0.y, box1.y)
        box.z = Interval.hull(box0.z, box1.z)
        return box

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    __hash__ = None  # type: ignore[assignment]

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def hit(self, r: Ray, ray_t: Interval) -> bool:
        """True if the ray passes through the box within ``ray_t``."""
        t_min, t_max = ray_t.min, ray_t.max
        for ax, orig, direction in zip((self.x, self.y, self.z), r.origin, r.direction):
            adinv = _reciprocal(direction)
            t0 = (ax.min - orig) * adinv
            t1 = (ax.max - orig) * adinv

            if t0 < t1:
                if t0 > t_min:
                    t_min = t0
                if t1 < t_max:
                    t_max = t1
            else:
                if t1 > t_min:
                    t_min = t1
                if t0 < t_max:
                    t_max = t0

            if t_max <= t_min:
                return False
        return True

    def longest_axis(self) -> int:
        """Index of the longest axis: 0, 1 or 2."""
        if self.x.size() > self.y.size():
            return 0 if self.x.size() > self.z.size() else 2
        return 1 if self.y.size() > self.z.size() else 2

    def __add__(self, offset: Vec3) -> AABB:
        if not isinstance(offset, Vec3):
            return NotImplemented
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    __radd__ = __add__


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)