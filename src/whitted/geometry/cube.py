# geometry/cube.py
import math
from typing import List, Tuple

from whitted.core.aabb import AABB
from whitted.core.ray import Ray
from whitted.core.utils import EPSILON
from whitted.core.vector import Vector3
from whitted.geometry.shape import Shape


def check_axis(origin: float, direction: float, lo: float = -1.0, hi: float = 1.0) -> Tuple[float, float]:
    if abs(direction) < EPSILON:
        # Parallel to the slab: the whole line is either inside it or not.
        if lo <= origin <= hi:
            return -math.inf, math.inf
        return math.inf, -math.inf

    tmin = (lo - origin) / direction
    tmax = (hi - origin) / direction
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


class Cube(Shape):
    """
    An axis-aligned cube spanning [-1, 1] on every object-space axis.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)

        if tmin > tmax:
            return []
        return [tmin, tmax]

    def local_normal_at(self, point: Vector3, hit=None) -> Vector3:
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)

        if maxc == ax:
            return Vector3(point.x, 0, 0)
        if maxc == ay:
            return Vector3(0, point.y, 0)
        return Vector3(0, 0, point.z)

    def local_bounds(self) -> AABB:
        return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
