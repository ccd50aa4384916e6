# geometry/plane.py
import math
from typing import List

from whitted.core.aabb import AABB
from whitted.core.ray import Ray
from whitted.core.utils import EPSILON
from whitted.core.vector import Vector3
from whitted.geometry.shape import Shape


class Plane(Shape):
    """
    The infinite xz plane through the object-space origin (y = 0).
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        # Parallel rays never hit, and neither do rays lying in the plane.
        if abs(ray.direction.y) < EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, point: Vector3, hit=None) -> Vector3:
        return Vector3(0, 1, 0)

    def local_bounds(self) -> AABB:
        return AABB(Vector3(-math.inf, 0, -math.inf), Vector3(math.inf, 0, math.inf))
