"""Hit records, the hittable interface and collections of hittable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from weekendtracer.aabb import AABB
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray
from weekendtracer.vec3 import Point3, Vec3, dot, random_int


@dataclass(slots=True)
class HitRecord:
    """Where and how a ray met a surface."""

    p: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    material: Any = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r: Ray, outward_normal: Vec3) -> None:
        """Store the normal so that it always points against the incoming ray."""
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        """The nearest hit of ``r`` within ``ray_t``, or None."""

    @abstractmethod
    def bounding_box(self) -> AABB:
        """A box enclosing the object."""

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """Density of sampling ``direction`` from ``origin`` towards this object."""
        return 0.0

    def random(self, origin: Point3) -> Vec3:
        """A random direction from ``origin`` towards this object."""
        return Vec3(1, 0, 0)


class HittableList(Hittable):
    """An ordered collection of hittable objects, itself hittable."""

    def __init__(self, *objects: Hittable) -> None:
        self.objects: list[Hittable] = []
        self._bbox = AABB()
        for obj in objects:
            self.add(obj)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)
        self._bbox = AABB.enclosing(self._bbox, obj.bounding_box())

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        closest: HitRecord | None = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(r, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                closest = rec
        return closest

    def bounding_box(self) -> AABB:
        return self._bbox

    def pdf_value(self, origin: Point3, direction: Vec3) -> float:
        """The average of the members' densities."""
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction) for obj in self.objects)

    def random(self, origin: Point3) -> Vec3:
        """A direction towards a randomly chosen member."""
        index = random_int(0, len(self.objects) - 1)
        return self.objects[index].random(origin)