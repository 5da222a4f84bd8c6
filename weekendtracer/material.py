"""Surface materials: how rays scatter from and light is emitted by surfaces."""

from __future__ import annotations

import math
from typing import NamedTuple

from weekendtracer.color import Color
from weekendtracer.hittable_list import HitRecord
from weekendtracer.ray import Ray
from weekendtracer.texture import SolidColor, Texture
from weekendtracer.vec3 import (
    Point3,
    Vec3,
    dot,
    random_double,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


class ScatterResult(NamedTuple):
    """The colour attenuation and the outgoing ray of a scattering event."""

    attenuation: Color
    scattered: Ray


def _as_texture(source: Texture | Color) -> Texture:
    return source if isinstance(source, Texture) else SolidColor(source)


class Material:
    """A material that neither scatters nor emits."""

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """Light emitted at the surface point."""
        return Vec3(0, 0, 0)

    def scatter(self, r_in: Ray, rec: HitRecord) -> ScatterResult | None:
        """The scattered ray and attenuation, or None if the ray is absorbed."""
        return None


class Lambertian(Material):
    """An ideal diffuse surface."""

    def __init__(self, albedo: Texture | Color) -> None:
        self.texture = _as_texture(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> ScatterResult | None:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterResult(attenuation, Ray(rec.p, direction, r_in.time))


class Metal(Material):
    """A reflective surface; ``fuzz`` (at most 1) blurs the reflection."""

    def __init__(self, albedo: Color, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz if fuzz < 1 else 1

    def scatter(self, r_in: Ray, rec: HitRecord) -> ScatterResult | None:
        reflected = reflect(r_in.direction, rec.normal)
        reflected = unit_vector(reflected) + (self.fuzz * random_unit_vector())
        scattered = Ray(rec.p, reflected, r_in.time)
        if dot(scattered.direction, rec.normal) > 0:
            return ScatterResult(self.albedo, scattered)
        return None


class Dielectric(Material):
    """A clear refracting material such as glass or water."""

    def __init__(self, refraction_index: float) -> None:
        # Index in vacuum or air, or the ratio over the enclosing medium's index.
        self.refraction_index = refraction_index

    def scatter(self, r_in: Ray, rec: HitRecord) -> ScatterResult | None:
        attenuation = Vec3(1.0, 1.0, 1.0)
        ri = (1.0 / self.refraction_index) if rec.front_face else self.refraction_index

        unit_direction = unit_vector(r_in.direction)
        cos_theta = min(dot(-unit_direction, rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or self.reflectance(cos_theta, ri) > random_double():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return ScatterResult(attenuation, Ray(rec.p, direction, r_in.time))

    @staticmethod
    def reflectance(cosine: float, refraction_index: float) -> float:
        """Schlick's approximation of the reflectance."""
        r0 = (1 - refraction_index) / (1 + refraction_index)
        r0 = r0 * r0
        return r0 + (1 - r0) * (1 - cosine) ** 5


class DiffuseLight(Material):
    """A surface that emits light and does not scatter."""

    def __init__(self, emit: Texture | Color) -> None:
        self.texture = _as_texture(emit)

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        return self.texture.value(u, v, p)


class Isotropic(Material):
    """A volume phase function scattering uniformly in all directions."""

    def __init__(self, albedo: Texture | Color) -> None:
        self.texture = _as_texture(albedo)

    def scatter(self, r_in: Ray, rec: HitRecord) -> ScatterResult | None:
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterResult(attenuation, Ray(rec.p, random_unit_vector(), r_in.time))