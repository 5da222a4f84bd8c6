"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass, field

from weekendtracer.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line P(t) = origin + t * direction, tagged with a time."""

    origin: Point3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    time: float = 0.0

    def at(self, t: float) -> Point3:
        """The point reached after parameter ``t``."""
        return self.origin + t * self.direction