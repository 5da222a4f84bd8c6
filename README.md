# weekendtracer

A compact path tracer in plain Python. Scenes are built from spheres
(stationary or moving), quadrilaterals and boxes, optionally grouped in a
bounding volume hierarchy, and shaded with diffuse, metal, glass and
volumetric materials. Textures include solid colours, 3D checkers and image
maps. The camera writes a plain-text PPM (P3) image.

The package also holds a set of small Monte Carlo experiments: estimating
pi with and without stratification, integrating cosine-weighted functions
over the hemisphere and the sphere, importance sampling of `x²`, and
finding the halfway point of a sampled density.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Rendering a scene

Build a world out of hittable objects, configure a `Camera`, and render to
any text stream (standard output if none is given):

```python
from weekendtracer.vec3 import Vec3
from weekendtracer.hittable_list import HittableList
from weekendtracer.sphere import Sphere
from weekendtracer.material import Lambertian, Metal, Dielectric
from weekendtracer.camera import Camera

world = HittableList()
world.add(Sphere(Vec3(0, -100.5, -1), 100, Lambertian(Vec3(0.8, 0.8, 0.0))))
world.add(Sphere(Vec3(0, 0, -1.2), 0.5, Lambertian(Vec3(0.1, 0.2, 0.5))))
world.add(Sphere(Vec3(-1, 0, -1), 0.5, Dielectric(1.5)))
world.add(Sphere(Vec3(1, 0, -1), 0.5, Metal(Vec3(0.8, 0.6, 0.2), 1.0)))

cam = Camera(aspect_ratio=16 / 9, image_width=200, samples_per_pixel=20, max_depth=10)

with open("image.ppm", "w") as out:
    cam.render(world, out)
```

The camera settings are `aspect_ratio`, `image_width`, `samples_per_pixel`,
`max_depth`, `vfov`, `lookfrom`, `lookat`, `vup`, `defocus_angle` and
`focus_dist`. Progress is reported on standard error while scanlines are
rendered. Rays that miss everything take a white-to-blue sky gradient.

### Building blocks

- `weekendtracer.vec3` – `Vec3` with arithmetic operators, `dot`, `cross`,
  `unit_vector`, `reflect`, `refract` and random sampling helpers such as
  `random_unit_vector` and `random_cosine_direction`.
- `weekendtracer.interval` – `Interval` with `contains`, `surrounds`,
  `clamp`, `expand`, `Interval.hull`, `Interval.EMPTY` and
  `Interval.UNIVERSE`.
- `weekendtracer.ray` – `Ray` with an origin, a direction and a time.
- `weekendtracer.aabb` – axis-aligned bounding boxes (`AABB`,
  `AABB.from_points`, `AABB.enclosing`).
- `weekendtracer.hittable_list` – `Hittable`, `HitRecord`, `HittableList`.
- `weekendtracer.sphere` – `Sphere` and `Sphere.moving`.
- `weekendtracer.quad` – `Quad` and the six-sided `box` helper.
- `weekendtracer.bvh` – `BVHNode`, a bounding volume hierarchy; building
  one from no objects raises `ValueError`.
- `weekendtracer.texture` – `SolidColor`, `CheckerTexture`, `ImageTexture`.
- `weekendtracer.rtw_image` – `RtwImage`, image loading for textures.
- `weekendtracer.material` – `Lambertian`, `Metal`, `Dielectric`,
  `DiffuseLight`, `Isotropic`.
- `weekendtracer.constant_medium` – `ConstantMedium` for smoke and fog.
- `weekendtracer.color` – gamma correction (`linear_to_gamma`), `to_bytes`
  and `write_color` for PPM pixel output.

### Image textures

`ImageTexture` looks for its file in the directory named by the
`RTW_IMAGES` environment variable first, then as given, then in `images/`
and in the `images/` directories up to six levels above. If the image
cannot be loaded, an error line is printed on standard error and the
texture renders as solid cyan.

## Monte Carlo experiments

The experiments are functions in `weekendtracer.montecarlo`
(`estimate_pi`, `cos_cubed_estimate`, `cos_density_estimate`,
`estimate_halfway`, `integrate_x_sq`, `sphere_importance`,
`sphere_plot_points`) and can be run from the command line by name:

```
weekendtracer-montecarlo pi
weekendtracer-montecarlo cos_cubed
weekendtracer-montecarlo cos_density
weekendtracer-montecarlo estimate_halfway
weekendtracer-montecarlo integrate_x_sq
weekendtracer-montecarlo sphere_importance
weekendtracer-montecarlo sphere_plot
```

`-n`/`--samples` sets the sample count (for `pi`, the square root of the
sample count); a count that is not positive is rejected.

## What the package does not do

- There is no command that renders a scene; scenes are built and rendered
  from Python code.
- The camera does not add emitted light: surfaces with `DiffuseLight`
  render black, and there is no background colour other than the sky
  gradient.
- The camera samples scattered rays directly from the materials. The
  `pdf_value` and `random` methods of hittables are not used to aim rays at
  light sources, and `Sphere` does not provide its own `random`.
- There are no instance transforms such as translation or rotation.