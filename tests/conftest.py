"""
Shared pytest fixtures for the ray tracer tests.
"""
import math

import pytest

from whitted import Material, Sphere, Vector3, World
from whitted.geometry import glass_sphere

SQRT2_2 = math.sqrt(2) / 2


def assert_vec(actual: Vector3, expected, eps: float = 1e-4):
    """Compares a Vector3 against an (x, y, z) tuple or Vector3 within eps."""
    ex, ey, ez = expected
    assert abs(actual.x - ex) < eps, f"{actual!r} != {expected!r}"
    assert abs(actual.y - ey) < eps, f"{actual!r} != {expected!r}"
    assert abs(actual.z - ez) < eps, f"{actual!r} != {expected!r}"


@pytest.fixture
def default_world() -> World:
    """Two concentric spheres lit by a white light at (-10, 10, -10)."""
    return World.default()


@pytest.fixture
def glass_material() -> Material:
    return Material(transparency=1.0, refractive_index=1.5)


@pytest.fixture
def glass() -> Sphere:
    """A unit glass sphere at the origin."""
    return glass_sphere()
