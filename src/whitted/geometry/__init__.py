from whitted.geometry.intersection import (
    Computations,
    Intersection,
    hit,
    prepare_computations,
    sort_intersections,
)
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere, glass_sphere
from whitted.geometry.plane import Plane
from whitted.geometry.cube import Cube
from whitted.geometry.cylinder import Cylinder
from whitted.geometry.triangle import Triangle, SmoothTriangle
from whitted.geometry.group import Group
from whitted.geometry.world import World, RECURSION_DEPTH

__all__ = [
    "Computations",
    "Intersection",
    "hit",
    "prepare_computations",
    "sort_intersections",
    "Shape",
    "Sphere",
    "glass_sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "Triangle",
    "SmoothTriangle",
    "Group",
    "World",
    "RECURSION_DEPTH",
]
