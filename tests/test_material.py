import random

import pytest

from weekendtracer.hittable_list import HitRecord
from weekendtracer.material import (
    Dielectric,
    DiffuseLight,
    Isotropic,
    Lambertian,
    Material,
    Metal,
)
from weekendtracer.ray import Ray
from weekendtracer.texture import CheckerTexture
from weekendtracer.vec3 import Vec3, reflect, unit_vector

ALBEDO = Vec3(0.8, 0.3, 0.2)


def _record(p=Vec3(0, 0, 0), normal=Vec3(0, 1, 0), front_face=True, u=0.0, v=0.0):
    return HitRecord(p=p, normal=normal, front_face=front_face, t=1.0, u=u, v=v)


def test_base_material_absorbs_and_emits_nothing():
    mat = Material()
    assert mat.scatter(Ray(Vec3(), Vec3(0, -1, 0)), _record()) is None
    assert mat.emitted(0.5, 0.5, Vec3(1, 2, 3)) == Vec3(0, 0, 0)


def test_lambertian_scatter_about_normal():
    random.seed(7)
    mat = Lambertian(ALBEDO)
    rec = _record(p=Vec3(1, 2, 3))
    r_in = Ray(Vec3(0, 5, 0), Vec3(0, -1, 0), 0.25)
    for _ in range(50):
        result = mat.scatter(r_in, rec)
        assert result.attenuation == ALBEDO
        assert result.scattered.origin == rec.p
        assert result.scattered.time == 0.25
        offset = result.scattered.direction - rec.normal
        assert offset.length() == pytest.approx(1.0)


def test_lambertian_uses_texture():
    tex = CheckerTexture(1.0, Vec3(1, 0, 0), Vec3(0, 0, 1))
    mat = Lambertian(tex)
    rec = _record(p=Vec3(1.5, 0.5, 0.5))
    result = mat.scatter(Ray(Vec3(), Vec3(0, -1, 0)), rec)
    assert result.attenuation == tex.value(rec.u, rec.v, rec.p)


def test_metal_fuzz_is_capped():
    assert Metal(ALBEDO, 5.0).fuzz == 1
    assert Metal(ALBEDO, 0.3).fuzz == 0.3


def test_metal_perfect_reflection():
    mat = Metal(ALBEDO, 0.0)
    rec = _record()
    r_in = Ray(Vec3(-1, 1, 0), Vec3(1, -1, 0), 0.5)
    result = mat.scatter(r_in, rec)
    expected = unit_vector(reflect(r_in.direction, rec.normal))
    assert tuple(result.scattered.direction) == pytest.approx(tuple(expected))
    assert result.attenuation == ALBEDO
    assert result.scattered.time == 0.5


def test_metal_absorbs_reflection_below_surface():
    mat = Metal(ALBEDO, 0.0)
    r_in = Ray(Vec3(0, 0, 0), Vec3(1, 1, 0))
    assert mat.scatter(r_in, _record()) is None


def test_dielectric_reflectance_limits():
    assert Dielectric.reflectance(1.0, 1.0) == pytest.approx(0.0)
    assert Dielectric.reflectance(0.0, 1.5) == pytest.approx(1.0)
    assert Dielectric.reflectance(0.2, 1.5) > Dielectric.reflectance(0.9, 1.5)


def test_dielectric_matched_index_passes_straight_through():
    random.seed(3)
    mat = Dielectric(1.0)
    rec = _record(normal=Vec3(0, 0, 1), front_face=True)
    r_in = Ray(Vec3(0, 0, 5), Vec3(0, 0, -1))
    result = mat.scatter(r_in, rec)
    assert result.attenuation == Vec3(1.0, 1.0, 1.0)
    assert tuple(result.scattered.direction) == pytest.approx(tuple(r_in.direction))


def test_dielectric_total_internal_reflection():
    mat = Dielectric(1.5)
    rec = _record(normal=Vec3(0, 1, 0), front_face=False)
    r_in = Ray(Vec3(0, 1, 0), Vec3(1, -0.1, 0))
    for _ in range(20):
        result = mat.scatter(r_in, rec)
        expected = reflect(unit_vector(r_in.direction), rec.normal)
        assert tuple(result.scattered.direction) == pytest.approx(tuple(expected))


def test_dielectric_scatter_direction_is_unit():
    random.seed(11)
    mat = Dielectric(1.5)
    rec = _record(normal=Vec3(0, 1, 0), front_face=True)
    r_in = Ray(Vec3(-1, 1, 0), Vec3(1, -2, 0))
    for _ in range(30):
        result = mat.scatter(r_in, rec)
        assert result.scattered.direction.length() == pytest.approx(1.0)


def test_diffuse_light_emits_and_does_not_scatter():
    light = Vec3(4, 4, 4)
    mat = DiffuseLight(light)
    assert mat.emitted(0.1, 0.2, Vec3(1, 1, 1)) == light
    assert mat.scatter(Ray(Vec3(), Vec3(0, -1, 0)), _record()) is None


def test_isotropic_scatters_in_unit_direction():
    random.seed(5)
    mat = Isotropic(ALBEDO)
    rec = _record(p=Vec3(2, 2, 2))
    for _ in range(30):
        result = mat.scatter(Ray(Vec3(), Vec3(1, 0, 0), 0.75), rec)
        assert result.attenuation == ALBEDO
        assert result.scattered.origin == rec.p
        assert result.scattered.time == 0.75
        assert result.scattered.direction.length() == pytest.approx(1.0)