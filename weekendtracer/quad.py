"""Planar parallelograms and boxes built from them."""

from __future__ import annotations

from typing import Any

from weekendtracer.aabb import AABB
from weekendtracer.hittable_list import HitRecord, Hittable, HittableList
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import (
    INFINITY,
    Point3,
    Vec3,
    cross,
    dot,
    random_double,
    unit_vector,
)

_UNIT = Interval(0, 1)


class Quad(Hittable):
    """The parallelogram with corner ``q`` and edges ``u`` and ``v``."""

    def __init__(self, q: Point3, u: Vec3, v: Vec3, material: Any) -> None:
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = cross(u, v)
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / dot(n, n)
        self.area = n.length()

        self._bbox = self._compute_bounding_box()

    def _compute_bounding_box(self) -> AABB:
        diagonal1 = AABB.from_points(self.q, self.q + self.u + self.v)
        diagonal2 = AABB.from_points(self.q + self.u, self.q + self.v)
        return AABB.enclosing(diagonal1, diagonal2)

    def bounding_box(self) -> AABB:
        return self._bbox

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        denom = dot(self.normal, r.direction)
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar = intersection - self.q
        alpha = dot(self.w, cross(planar, self.v))
        beta = dot(self.w, cross(self.u, planar))

        uv = self.is_interior(alpha, beta)
        if uv is None:
            return None

        rec = HitRecord(p=intersection, t=t, material=self.material, u=uv[0], v=uv[1])
        rec.set_face_normal(r, self.normal)
        return rec

    def is_interior(self, a: float, b: float) -> tuple[float, float] | None:
        """Texture coordinates of plane coordinates (a, b), or None if outside."""
        if not _UNIT.contains(a) or not _UNIT.contains(b):
            return None
        return a, b

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        rec = self.hit(Ray(origin, direction), Interval(0.001, INFINITY))
        if rec is None:
            return 0.0

        distance_squared = rec.t * rec.t * direction.length_squared()
        cosine = abs(dot(direction, rec.normal) / direction.length())
        return distance_squared / (cosine * self.area)

    def random(self, origin: Point3) -> Vec3:
        p = self.q + (random_double() * self.u) + (random_double() * self.v)
        return p - origin


def box(a: Point3, b: Point3, material: Any) -> HittableList:
    """The six-sided box with opposite corners ``a`` and ``b``."""
    low = Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    high = Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(high.x - low.x, 0, 0)
    dy = Vec3(0, high.y - low.y, 0)
    dz = Vec3(0, 0, high.z - low.z)

    return HittableList(
        Quad(Vec3(low.x, low.y, high.z), dx, dy, material),   # front
        Quad(Vec3(high.x, low.y, high.z), -dz, dy, material),  # right
        Quad(Vec3(high.x, low.y, low.z), -dx, dy, material),  # back
        Quad(Vec3(low.x, low.y, low.z), dz, dy, material),    # left
        Quad(Vec3(low.x, high.y, high.z), dx, -dz, material),  # top
        Quad(Vec3(low.x, low.y, low.z), dx, dz, material),    # bottom
    )