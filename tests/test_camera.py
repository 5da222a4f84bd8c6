import io
import math
import random

import pytest

from weekendtracer.camera import Camera
from weekendtracer.hittable_list import HittableList
from weekendtracer.material import Material, Metal
from weekendtracer.ray import Ray
from weekendtracer.sphere import Sphere
from weekendtracer.vec3 import Vec3


def test_image_height_follows_aspect_ratio():
    cam = Camera(aspect_ratio=2.0, image_width=4)
    cam.initialize()
    assert cam.image_height == 2
    assert cam.pixel_samples_scale == pytest.approx(1.0 / cam.samples_per_pixel)


def test_image_height_is_at_least_one():
    cam = Camera(aspect_ratio=10.0, image_width=1)
    cam.initialize()
    assert cam.image_height == 1


def test_basis_is_orthonormal():
    cam = Camera(lookfrom=Vec3(3, 2, 1), lookat=Vec3(0, 0, 0))
    cam.initialize()
    for vec in (cam.u, cam.v, cam.w):
        assert vec.length() == pytest.approx(1.0)
    assert sum(a * b for a, b in zip(cam.u, cam.v)) == pytest.approx(0.0, abs=1e-12)
    assert sum(a * b for a, b in zip(cam.u, cam.w)) == pytest.approx(0.0, abs=1e-12)


def test_get_ray_without_defocus_starts_at_lookfrom():
    random.seed(1)
    cam = Camera(image_width=1, lookfrom=Vec3(0, 0, 0), lookat=Vec3(0, 0, -1))
    cam.initialize()
    r = cam.get_ray(0, 0)
    assert r.origin == Vec3(0, 0, 0)
    assert r.direction.z == pytest.approx(-cam.focus_dist)


def test_get_ray_with_defocus_starts_inside_lens_disk():
    random.seed(2)
    cam = Camera(image_width=4, defocus_angle=10.0, focus_dist=10.0)
    cam.initialize()
    radius = cam.defocus_disk_u.length()
    for _ in range(50):
        r = cam.get_ray(1, 2)
        assert (r.origin - cam.lookfrom).length() <= radius + 1e-12


def test_ray_color_depth_zero_is_black():
    cam = Camera()
    cam.initialize()
    result = cam.ray_color(Ray(Vec3(0, 0, 0), Vec3(0, 1, 0)), 0, HittableList())
    assert result == Vec3(0, 0, 0)


def test_ray_color_sky_gradient():
    cam = Camera()
    cam.initialize()
    world = HittableList()
    up = cam.ray_color(Ray(Vec3(0, 0, 0), Vec3(0, 1, 0)), 5, world)
    down = cam.ray_color(Ray(Vec3(0, 0, 0), Vec3(0, -1, 0)), 5, world)
    assert tuple(up) == pytest.approx((0.5, 0.7, 1.0), abs=1e-9)
    assert tuple(down) == pytest.approx((1.0, 1.0, 1.0), abs=1e-9)


def test_absorbing_surface_is_black():
    cam = Camera()
    cam.initialize()
    world = HittableList(Sphere(Vec3(0, 0, -2), 0.5, Material()))
    result = cam.ray_color(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 5, world)
    assert result == Vec3(0, 0, 0)


def test_perfect_mirror_reflects_sky_behind():
    cam = Camera()
    cam.initialize()
    world = HittableList(Sphere(Vec3(0, 0, -2), 0.5, Metal(Vec3(1, 1, 1), 0.0)))
    reflected = cam.ray_color(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 5, world)
    sky_behind = cam.ray_color(Ray(Vec3(0, 0, 0), Vec3(0, 0, 1)), 5, HittableList())
    assert tuple(reflected) == pytest.approx(tuple(sky_behind), abs=1e-9)
    assert tuple(reflected) == pytest.approx((0.75, 0.85, 1.0), abs=1e-9)


def test_mirror_bounce_runs_out_of_depth():
    cam = Camera()
    cam.initialize()
    world = HittableList(Sphere(Vec3(0, 0, -2), 0.5, Metal(Vec3(1, 1, 1), 0.0)))
    assert cam.ray_color(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)), 1, world) == Vec3(0, 0, 0)


def test_render_writes_ppm():
    random.seed(3)
    cam = Camera(aspect_ratio=2.0, image_width=4, samples_per_pixel=2, max_depth=3)
    out = io.StringIO()
    cam.render(HittableList(), out)
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["P3", "4 2", "255"]
    pixels = lines[3:]
    assert len(pixels) == 8
    for line in pixels:
        r, g, b = (int(part) for part in line.split())
        assert 0 <= r <= 255 and 0 <= g <= 255
        assert b == 255


def test_render_sky_gets_bluer_towards_top():
    random.seed(4)
    cam = Camera(aspect_ratio=1.0, image_width=3, samples_per_pixel=1)
    out = io.StringIO()
    cam.render(HittableList(), out)
    pixels = [tuple(map(int, line.split())) for line in out.getvalue().splitlines()[3:]]
    top_red = pixels[1][0]
    bottom_red = pixels[7][0]
    assert top_red < bottom_red
    assert not math.isnan(top_red)