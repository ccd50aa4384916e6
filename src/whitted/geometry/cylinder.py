# geometry/cylinder.py
import math
from typing import List

from whitted.core.aabb import AABB
from whitted.core.errors import InvalidGeometry
from whitted.core.ray import Ray
from whitted.core.utils import EPSILON
from whitted.core.vector import Vector3
from whitted.geometry.shape import Shape


class Cylinder(Shape):
    """
    A cylinder of radius 1 around the object-space y axis.

    `minimum` and `maximum` truncate it along y (both exclusive, infinite by
    default); `closed` adds end caps to a truncated cylinder.
    """
    def __init__(self, material=None, transform=None,
                 minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False):
        super().__init__(material, transform)
        if minimum > maximum:
            raise InvalidGeometry(f"cylinder minimum {minimum} is above its maximum {maximum}")
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, ray: Ray) -> List[float]:
        xs = []
        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z

        a = dx * dx + dz * dz
        # Rays parallel to the y axis can only hit the caps.
        if abs(a) >= EPSILON:
            b = 2 * ox * dx + 2 * oz * dz
            c = ox * ox + oz * oz - 1
            disc = b * b - 4 * a * c
            if disc < 0:
                return []

            sqrt_disc = math.sqrt(disc)
            t0 = (-b - sqrt_disc) / (2 * a)
            t1 = (-b + sqrt_disc) / (2 * a)
            if t0 > t1:
                t0, t1 = t1, t0

            y0 = oy + t0 * dy
            if self.minimum < y0 < self.maximum:
                xs.append(t0)
            y1 = oy + t1 * dy
            if self.minimum < y1 < self.maximum:
                xs.append(t1)

        self._intersect_caps(ray, xs)
        return xs

    def _intersect_caps(self, ray: Ray, xs: List[float]):
        if not self.closed or abs(ray.direction.y) < EPSILON:
            return
        for bound in (self.minimum, self.maximum):
            if not math.isfinite(bound):
                continue
            t = (bound - ray.origin.y) / ray.direction.y
            if _within_cap(ray, t):
                xs.append(t)

    def local_normal_at(self, point: Vector3, hit=None) -> Vector3:
        dist = point.x * point.x + point.z * point.z
        if dist < 1 and point.y >= self.maximum - EPSILON:
            return Vector3(0, 1, 0)
        if dist < 1 and point.y <= self.minimum + EPSILON:
            return Vector3(0, -1, 0)
        return Vector3(point.x, 0, point.z)

    def local_bounds(self) -> AABB:
        return AABB(Vector3(-1, self.minimum, -1), Vector3(1, self.maximum, 1))


def _within_cap(ray: Ray, t: float) -> bool:
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= 1
