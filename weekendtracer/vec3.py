"""Three-component vectors, shared constants and random sampling helpers."""

from __future__ import annotations

import math
import random as _random
from collections.abc import Iterator

INFINITY = math.inf
PI = 3.1415926535897932385


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random real in [low, high)."""
    return low + (high - low) * _random.random()


def random_int(low: int, high: int) -> int:
    """Return a random integer in [low, high]."""
    return int(random_double(low, high + 1))


class Vec3:
    """A vector, point or colour with three double-precision components."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = x
        self.y = y
        self.z = z

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None  # type: ignore[assignment]

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, t: float) -> Vec3:
        if isinstance(t, (int, float)):
            return Vec3(t * self.x, t * self.y, t * self.z)
        return NotImplemented

    def __truediv__(self, t: float) -> Vec3:
        if not isinstance(t, (int, float)):
            return NotImplemented
        return (1 / t) * self

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def near_zero(self) -> bool:
        """True if the vector is close to zero in all dimensions."""
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    @classmethod
    def random(cls, low: float = 0.0, high: float = 1.0) -> Vec3:
        """A vector whose components are each random in [low, high)."""
        return cls(random_double(low, high), random_double(low, high), random_double(low, high))


Point3 = Vec3


def dot(u: Vec3, v: Vec3) -> float:
    """Dot product."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def cross(u: Vec3, v: Vec3) -> Vec3:
    """Cross product."""
    return Vec3(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def unit_vector(v: Vec3) -> Vec3:
    """The vector scaled to unit length."""
    return v / v.length()


def random_in_unit_disk() -> Vec3:
    """A random point inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(random_double(-1, 1), random_double(-1, 1), 0)
        if p.length_squared() < 1:
            return p


def random_unit_vector() -> Vec3:
    """A uniformly distributed random direction."""
    while True:
        p = Vec3.random(-1, 1)
        lensq = p.length_squared()
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit vector in the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if dot(on_unit_sphere, normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Mirror ``v`` about the surface with unit normal ``n``."""
    return v - 2 * dot(v, n) * n


def refract(uv: Vec3, n: Vec3, etai_over_etat: float) -> Vec3:
    """Refract the unit vector ``uv`` through a surface with unit normal ``n``."""
    cos_theta = min(dot(-uv, n), 1.0)
    r_out_perp = etai_over_etat * (uv + cos_theta * n)
    r_out_parallel = -math.sqrt(abs(1.0 - r_out_perp.length_squared())) * n
    return r_out_perp + r_out_parallel


def random_cosine_direction() -> Vec3:
    """A random direction about +z, distributed by the cosine of its angle to z."""
    r1 = random_double()
    r2 = random_double()

    phi = 2 * PI * r1
    x = math.cos(phi) * math.sqrt(r2)
    y = math.sin(phi) * math.sqrt(r2)
    z = math.sqrt(1 - r2)

    return Vec3(x, y, z)