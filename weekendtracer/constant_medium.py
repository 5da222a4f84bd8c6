"""Volumes of constant density such as smoke or fog."""

from __future__ import annotations

import math

from weekendtracer.aabb import AABB
from weekendtracer.color import Color
from weekendtracer.hittable_list import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.material import Isotropic
from weekendtracer.ray import Ray
from weekendtracer.texture import Texture
from weekendtracer.vec3 import INFINITY, Vec3, random_double


class ConstantMedium(Hittable):
    """A participating medium filling a convex boundary with uniform density."""

    def __init__(self, boundary: Hittable, density: float, albedo: Texture | Color) -> None:
        self.boundary = boundary
        if density:
            self.neg_inv_density = -1 / density
        else:
            self.neg_inv_density = -math.copysign(math.inf, density)
        self.phase_function = Isotropic(albedo)

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        rec1 = self.boundary.hit(r, Interval.UNIVERSE)
        if rec1 is None:
            return None

        rec2 = self.boundary.hit(r, Interval(rec1.t + 0.0001, INFINITY))
        if rec2 is None:
            return None

        t1 = max(rec1.t, ray_t.min) if rec1.t < ray_t.min else rec1.t
        t2 = ray_t.max if rec2.t > ray_t.max else rec2.t

        if t1 >= t2:
            return None

        if t1 < 0:
            t1 = 0.0

        ray_length = r.direction.length()
        distance_inside_boundary = (t2 - t1) * ray_length

        sample = random_double()
        if sample == 0.0:
            return None
        hit_distance = self.neg_inv_density * math.log(sample)

        if hit_distance > distance_inside_boundary:
            return None

        t = t1 + hit_distance / ray_length
        return HitRecord(
            p=r.at(t),
            normal=Vec3(1, 0, 0),
            material=self.phase_function,
            t=t,
            front_face=True,
        )

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()