"""A positionable thin-lens camera that renders a scene as a plain-text PPM image."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import TextIO

from weekendtracer.color import Color, write_color
from weekendtracer.hittable_list import Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import (
    INFINITY,
    Point3,
    Vec3,
    cross,
    degrees_to_radians,
    random_double,
    random_in_unit_disk,
    unit_vector,
)

_WHITE = Vec3(1.0, 1.0, 1.0)
_SKY_BLUE = Vec3(0.5, 0.7, 1.0)
_BLACK = Vec3(0.0, 0.0, 0.0)


@dataclass(eq=False)
class Camera:
    """Camera settings; call ``initialize`` (or ``render``) before casting rays."""

    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10

    vfov: float = 90.0
    lookfrom: Point3 = field(default_factory=lambda: Vec3(0, 0, 0))
    lookat: Point3 = field(default_factory=lambda: Vec3(0, 0, -1))
    vup: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))

    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    image_height: int = field(default=0, init=False)
    pixel_samples_scale: float = field(default=0.0, init=False)
    center: Point3 = field(default_factory=Vec3, init=False)
    pixel00_loc: Point3 = field(default_factory=Vec3, init=False)
    pixel_delta_u: Vec3 = field(default_factory=Vec3, init=False)
    pixel_delta_v: Vec3 = field(default_factory=Vec3, init=False)
    u: Vec3 = field(default_factory=Vec3, init=False)
    v: Vec3 = field(default_factory=Vec3, init=False)
    w: Vec3 = field(default_factory=Vec3, init=False)
    defocus_disk_u: Vec3 = field(default_factory=Vec3, init=False)
    defocus_disk_v: Vec3 = field(default_factory=Vec3, init=False)

    def initialize(self) -> None:
        """Derive the image height, viewport and lens geometry from the settings."""
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (float(self.image_width) / self.image_height)

        self.w = unit_vector(self.lookfrom - self.lookat)
        self.u = unit_vector(cross(self.vup, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (
            self.center - (self.focus_dist * self.w) - viewport_u / 2 - viewport_v / 2
        )
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int) -> Ray:
        """A ray from the lens towards a random point inside pixel (i, j)."""
        offset = self._sample_square()
        pixel_sample = (
            self.pixel00_loc
            + ((i + offset.x) * self.pixel_delta_u)
            + ((j + offset.y) * self.pixel_delta_v)
        )
        origin = self.center if self.defocus_angle <= 0 else self._defocus_disk_sample()
        return Ray(origin, pixel_sample - origin)

    def ray_color(self, r: Ray, depth: int, world: Hittable) -> Color:
        """The colour gathered along ``r`` with at most ``depth`` bounces."""
        throughput = Vec3(1.0, 1.0, 1.0)
        for _ in range(depth):
            rec = world.hit(r, Interval(0.001, INFINITY))
            if rec is None:
                unit_direction = unit_vector(r.direction)
                a = 0.5 * (unit_direction.y + 1.0)
                return throughput * ((1.0 - a) * _WHITE + a * _SKY_BLUE)
            result = rec.material.scatter(r, rec)
            if result is None:
                return Vec3(0.0, 0.0, 0.0)
            throughput = throughput * result.attenuation
            r = result.scattered
        return Vec3(0.0, 0.0, 0.0)

    def render(self, world: Hittable, out: TextIO | None = None) -> None:
        """Render ``world`` as a P3 PPM image to ``out`` (standard output by default)."""
        if out is None:
            out = sys.stdout
        self.initialize()

        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")

        for j in range(self.image_height):
            sys.stderr.write(f"\rScanlines remaining: {self.image_height - j} ")
            sys.stderr.flush()
            for i in range(self.image_width):
                pixel_color = Vec3(0.0, 0.0, 0.0)
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self.ray_color(
                        self.get_ray(i, j), self.max_depth, world
                    )
                write_color(out, self.pixel_samples_scale * pixel_color)

        sys.stderr.write("\rDone.                 \n")

    def _sample_square(self) -> Vec3:
        return Vec3(random_double() - 0.5, random_double() - 0.5, 0)

    def _defocus_disk_sample(self) -> Point3:
        p = random_in_unit_disk()
        return self.center + (p.x * self.defocus_disk_u) + (p.y * self.defocus_disk_v)