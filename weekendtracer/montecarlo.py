"""Small Monte Carlo experiments: estimating pi and integrals by random sampling."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from weekendtracer.vec3 import (
    PI,
    Vec3,
    random_cosine_direction,
    random_double,
    random_unit_vector,
)


def _check_count(n: int) -> None:
    if n <= 0:
        raise ValueError(f"sample count must be positive, got {n}")


def estimate_pi(sqrt_n: int = 1000) -> tuple[float, float]:
    """Plain and stratified estimates of pi from ``sqrt_n`` squared points."""
    _check_count(sqrt_n)
    inside_circle = 0
    inside_circle_stratified = 0

    for i in range(sqrt_n):
        for j in range(sqrt_n):
            x = random_double(-1, 1)
            y = random_double(-1, 1)
            if x * x + y * y < 1:
                inside_circle += 1

            x = 2 * ((i + random_double()) / sqrt_n) - 1
            y = 2 * ((j + random_double()) / sqrt_n) - 1
            if x * x + y * y < 1:
                inside_circle_stratified += 1

    total = sqrt_n * sqrt_n
    return 4.0 * inside_circle / total, 4.0 * inside_circle_stratified / total


def cos_cubed_estimate(n: int = 1_000_000) -> float:
    """Estimate the integral of cos^3 over the hemisphere with uniform sampling."""
    _check_count(n)
    pdf = 1.0 / (2.0 * PI)
    total = 0.0
    for _ in range(n):
        cos_theta = 1 - random_double()
        total += cos_theta ** 3 / pdf
    return total / n


def cos_density_estimate(n: int = 1_000_000) -> float:
    """Estimate the integral of cos^3 over the hemisphere with cosine sampling."""
    _check_count(n)
    total = 0.0
    for _ in range(n):
        d = random_cosine_direction()
        cos_theta = d.z
        total += cos_theta ** 3 / (cos_theta / PI)
    return total / n


@dataclass(frozen=True)
class HalfwayEstimate:
    """The mean of the sampled function, the area under it, and where half the area lies."""

    average: float
    area: float
    halfway: float


def estimate_halfway(n: int = 10_000) -> HalfwayEstimate:
    """Sample exp(-x / 2pi) sin^2 x over [0, 2pi) and find the halfway point of its area."""
    _check_count(n)
    samples = []
    total = 0.0
    for _ in range(n):
        x = random_double(0, 2 * PI)
        sin_x = math.sin(x)
        p_x = math.exp(-x / (2 * PI)) * sin_x * sin_x
        total += p_x
        samples.append((x, p_x))

    samples.sort(key=lambda sample: sample[0])

    half_sum = total / 2.0
    halfway_point = 0.0
    accum = 0.0
    for x, p_x in samples:
        accum += p_x
        if accum >= half_sum:
            halfway_point = x
            break

    return HalfwayEstimate(total / n, 2 * PI * total / n, halfway_point)


def integrate_x_sq(n: int = 1) -> float:
    """Estimate the integral of x^2 over [0, 2] by importance sampling with pdf 3x^2/8."""
    _check_count(n)
    total = 0.0
    for _ in range(n):
        z = random_double()
        if z == 0.0:
            continue
        x = 8.0 * z ** (1.0 / 3.0)
        total += x * x / ((3.0 / 8.0) * x * x)
    return total / n


def sphere_importance(n: int = 1_000_000) -> float:
    """Estimate the integral of cos^2 over the whole sphere with uniform directions."""
    _check_count(n)
    pdf = 1 / (4 * PI)
    total = 0.0
    for _ in range(n):
        d = random_unit_vector()
        total += d.z * d.z / pdf
    return total / n


def sphere_plot_points(count: int = 200) -> list[Vec3]:
    """Random points on the unit sphere generated from two uniform numbers each."""
    if count < 0:
        raise ValueError(f"point count must not be negative, got {count}")
    points = []
    for _ in range(count):
        r1 = random_double()
        r2 = random_double()
        s = 2 * math.sqrt(r2 * (1 - r2))
        points.append(Vec3(math.cos(2 * PI * r1) * s, math.sin(2 * PI * r1) * s, 1 - 2 * r2))
    return points


def _fixed(x: float) -> str:
    return f"{x:.12f}"


def _report_pi(n: int) -> list[str]:
    regular, stratified = estimate_pi(n)
    return [
        f"Regular    Estimate of Pi = {_fixed(regular)}",
        f"Stratified Estimate of Pi = {_fixed(stratified)}",
    ]


def _report_cos_cubed(n: int) -> list[str]:
    return [f"PI/2 = {_fixed(PI / 2.0)}", f"Estimate = {_fixed(cos_cubed_estimate(n))}"]


def _report_cos_density(n: int) -> list[str]:
    return [f"PI/2 = {_fixed(PI / 2.0)}", f"Estimate = {_fixed(cos_density_estimate(n))}"]


def _report_halfway(n: int) -> list[str]:
    result = estimate_halfway(n)
    return [
        f"Average = {_fixed(result.average)}",
        f"Area under curve = {_fixed(result.area)}",
        f"Halfway = {_fixed(result.halfway)}",
    ]


def _report_x_sq(n: int) -> list[str]:
    return [f"I = {_fixed(integrate_x_sq(n))}"]


def _report_sphere_importance(n: int) -> list[str]:
    return [f"I = {_fixed(sphere_importance(n))}"]


def _report_sphere_plot(n: int) -> list[str]:
    return [f"{p.x:g} {p.y:g} {p.z:g}" for p in sphere_plot_points(n)]


_PROGRAMS: dict[str, tuple[Callable[[int], list[str]], int]] = {
    "pi": (_report_pi, 1000),
    "cos_cubed": (_report_cos_cubed, 1_000_000),
    "cos_density": (_report_cos_density, 1_000_000),
    "estimate_halfway": (_report_halfway, 10_000),
    "integrate_x_sq": (_report_x_sq, 1),
    "sphere_importance": (_report_sphere_importance, 1_000_000),
    "sphere_plot": (_report_sphere_plot, 200),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the experiments and print its results."""
    parser = argparse.ArgumentParser(description="Monte Carlo sampling experiments.")
    parser.add_argument("program", choices=sorted(_PROGRAMS))
    parser.add_argument(
        "-n",
        "--samples",
        type=int,
        default=None,
        help="sample count (for pi, the square root of the sample count)",
    )
    args = parser.parse_args(argv)

    report, default_count = _PROGRAMS[args.program]
    count = default_count if args.samples is None else args.samples
    try:
        lines = report(count)
    except ValueError as exc:
        parser.error(str(exc))
    for line in lines:
        print(line)
    return 0