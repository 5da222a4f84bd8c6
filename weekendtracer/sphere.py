"""Spheres, stationary or moving linearly over time."""

from __future__ import annotations

import math
from typing import Any

from weekendtracer.aabb import AABB
from weekendtracer.hittable_list import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import INFINITY, PI, Point3, Vec3, dot, random_double


def _sqrt_or_nan(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def get_sphere_uv(p: Point3) -> tuple[float, float]:
    """Texture coordinates (u, v) in [0, 1] of a point on the unit sphere."""
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + PI
    return phi / (2 * PI), theta / PI


def random_to_sphere(radius: float, distance_squared: float) -> Vec3:
    """A random unit direction about +z inside the cone subtended by a sphere."""
    r1 = random_double()
    r2 = random_double()
    z = 1 + r2 * (_sqrt_or_nan(1 - radius * radius / distance_squared) - 1)

    phi = 2 * PI * r1
    s = _sqrt_or_nan(1 - z * z)
    return Vec3(math.cos(phi) * s, math.sin(phi) * s, z)


class Sphere(Hittable):
    """A sphere whose centre moves along a ray parameterised by time."""

    def __init__(self, center: Point3, radius: float, material: Any) -> None:
        self.center = Ray(center, Vec3(0, 0, 0))
        self.radius = max(0.0, radius)
        self.material = material
        rvec = Vec3(radius, radius, radius)
        self._bbox = AABB.from_points(center - rvec, center + rvec)

    @classmethod
    def moving(
        cls, center1: Point3, center2: Point3, radius: float, material: Any
    ) -> Sphere:
        """A sphere at ``center1`` at time 0 and ``center2`` at time 1."""
        sphere = cls.__new__(cls)
        sphere.center = Ray(center1, center2 - center1)
        sphere.radius = max(0.0, radius)
        sphere.material = material
        rvec = Vec3(radius, radius, radius)
        box1 = AABB.from_points(sphere.center.at(0) - rvec, sphere.center.at(0) + rvec)
        box2 = AABB.from_points(sphere.center.at(1) - rvec, sphere.center.at(1) + rvec)
        sphere._bbox = AABB.enclosing(box1, box2)
        return sphere

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        current_center = self.center.at(r.time)
        oc = current_center - r.origin
        a = r.direction.length_squared()
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = r.at(root)
        outward_normal = (p - current_center) / self.radius
        rec = HitRecord(p=p, t=root, material=self.material)
        rec.set_face_normal(r, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        return rec

    def bounding_box(self) -> AABB:
        return self._bbox

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Uniform density over the solid angle of the sphere; stationary spheres only."""
        if self.hit(Ray(origin, direction), Interval(0.001, INFINITY)) is None:
            return 0.0

        dist_squared = (self.center.at(0) - origin).length_squared()
        cos_theta_max = _sqrt_or_nan(1 - self.radius * self.radius / dist_squared)
        solid_angle = 2 * PI * (1 - cos_theta_max)
        return 1 / solid_angle