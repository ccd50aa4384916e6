# geometry/shape.py
from typing import List, Optional

from whitted.core.aabb import AABB
from whitted.core.errors import SceneError
from whitted.core.ray import Ray
from whitted.core.transform import Transform
from whitted.core.vector import Vector3
from whitted.geometry.intersection import Intersection
from whitted.materials.material import Material


class Shape:
    """
    Base class for everything that can be hit by a ray.

    Subclasses only describe themselves in their own object space through
    `local_intersect`, `local_normal_at` and `local_bounds`; this class moves
    rays, points and normals between world and object space.

    A shape inside a Group holds its full object-to-world transform: the
    group composes its own transform into each child when the child is
    added, so no shape ever needs to look up its parents. Once a shape
    belongs to a group its transform is fixed; only the outermost group
    may be moved.
    """
    def __init__(self, material: Optional[Material] = None,
                 transform: Optional[Transform] = None):
        self.material = material if material is not None else Material()
        self._transform = transform if transform is not None else Transform.identity()
        self.in_group = False

    @property
    def transform(self) -> Transform:
        return self._transform

    @transform.setter
    def transform(self, transform: Transform):
        if self.in_group:
            raise SceneError(f"{self!r} belongs to a group; its transform can no longer change")
        self._transform = transform

    def _compose_parent(self, parent: Transform):
        """Prepends a parent group's transform to this shape's transform."""
        self._transform = parent @ self._transform

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = ray.transform(self._transform.inverse)
        return [Intersection(t, self) for t in self.local_intersect(local_ray)]

    def normal_at(self, point: Vector3, hit: Optional[Intersection] = None) -> Vector3:
        local_point = self._transform.inverse.apply_point(point)
        local_normal = self.local_normal_at(local_point, hit)
        return self._transform.apply_normal(local_normal)

    def bounding_box(self) -> AABB:
        """The shape's box in the space its transform maps into."""
        return self.local_bounds().transform(self._transform)

    def divide(self, threshold: int):
        """Only groups can be subdivided; primitives are left as they are."""

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Vector3, hit: Optional[Intersection] = None) -> Vector3:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def local_bounds(self) -> AABB:
        raise NotImplementedError("local_bounds() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r})"
