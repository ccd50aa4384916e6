# geometry/triangle.py
from typing import List, Optional, Tuple

from whitted.core.aabb import AABB
from whitted.core.errors import InvalidGeometry
from whitted.core.ray import Ray
from whitted.core.utils import EPSILON
from whitted.core.vector import Vector3
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape


class Triangle(Shape):
    """Represents a single flat triangle in object space."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material=None, transform=None):
        super().__init__(material, transform)
        # Vertices
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2

        self.edge1 = v1 - v0
        self.edge2 = v2 - v0
        face_normal = self.edge2.cross(self.edge1)
        if face_normal.length() < EPSILON:
            raise InvalidGeometry(f"triangle vertices are collinear: {v0!r}, {v1!r}, {v2!r}")
        self.normal = face_normal.normalize()

    def barycentric_intersect(self, ray: Ray) -> List[Tuple[float, float, float]]:
        """
        Möller–Trumbore intersection. Returns at most one (t, u, v) where u
        and v weight v1 and v2 respectively.
        """
        h = ray.direction.cross(self.edge2)
        a = self.edge1.dot(h)

        # If ray is parallel to triangle
        if abs(a) < EPSILON:
            return []

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)

        # Ray misses the triangle
        if u < 0.0 or u > 1.0:
            return []

        q = s.cross(self.edge1)
        v = f * ray.direction.dot(q)

        # Ray misses the triangle
        if v < 0.0 or u + v > 1.0:
            return []

        t = f * self.edge2.dot(q)
        return [(t, u, v)]

    def local_intersect(self, ray: Ray) -> List[float]:
        return [t for t, _, _ in self.barycentric_intersect(ray)]

    def local_normal_at(self, point: Vector3, hit: Optional[Intersection] = None) -> Vector3:
        return self.normal

    def local_bounds(self) -> AABB:
        """Compute the bounding box for the triangle."""
        min_x = min(self.v0.x, self.v1.x, self.v2.x)
        min_y = min(self.v0.y, self.v1.y, self.v2.y)
        min_z = min(self.v0.z, self.v1.z, self.v2.z)
        max_x = max(self.v0.x, self.v1.x, self.v2.x)
        max_y = max(self.v0.y, self.v1.y, self.v2.y)
        max_z = max(self.v0.z, self.v1.z, self.v2.z)
        return AABB(Vector3(min_x, min_y, min_z), Vector3(max_x, max_y, max_z))


class SmoothTriangle(Triangle):
    """
    A triangle whose normal is interpolated from per-vertex normals, so
    meshes built from it shade as curved surfaces.
    """
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3,
                 n0: Vector3, n1: Vector3, n2: Vector3, material=None, transform=None):
        super().__init__(v0, v1, v2, material, transform)
        # Normals
        self.n0 = n0
        self.n1 = n1
        self.n2 = n2

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = ray.transform(self.transform.inverse)
        return [Intersection(t, self, u, v) for t, u, v in self.barycentric_intersect(local_ray)]

    def local_normal_at(self, point: Vector3, hit: Optional[Intersection] = None) -> Vector3:
        """Interpolate the normal at the hit's barycentric coordinates."""
        if hit is None or hit.u is None:
            raise ValueError("smooth triangle normals need the intersection's u and v")
        u, v = hit.u, hit.v
        return self.n1 * u + self.n2 * v + self.n0 * (1.0 - u - v)
