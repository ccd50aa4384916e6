# geometry/sphere.py
import math
from typing import List

from whitted.core.aabb import AABB
from whitted.core.ray import Ray
from whitted.core.transform import Transform
from whitted.core.vector import Vector3
from whitted.geometry.shape import Shape
from whitted.materials.material import Material


class Sphere(Shape):
    """
    A unit sphere centered at the object-space origin. Position and size
    come from the transform; see `Sphere.at` for the usual shortcut.
    """
    @classmethod
    def at(cls, center: Vector3, radius: float, material=None) -> "Sphere":
        transform = (Transform.translation(center.x, center.y, center.z) @
                     Transform.scaling(radius, radius, radius))
        return cls(material, transform)

    def local_intersect(self, ray: Ray) -> List[float]:
        oc = ray.origin
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - 1.0
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return []

        # A tangent ray still reports two (equal) roots.
        sqrt_disc = math.sqrt(discriminant)
        return [(-half_b - sqrt_disc) / a, (-half_b + sqrt_disc) / a]

    def local_normal_at(self, point: Vector3, hit=None) -> Vector3:
        return Vector3(point.x, point.y, point.z)

    def local_bounds(self) -> AABB:
        return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


def glass_sphere(refractive_index: float = 1.5) -> Sphere:
    """A transparent unit sphere, handy for refraction scenes and tests."""
    return Sphere(Material(transparency=1.0, refractive_index=refractive_index))
