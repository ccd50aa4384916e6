# core/ray.py
from whitted.core.vector import Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is not required to be normalized.
    """
    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, transform) -> "Ray":
        """
        Returns this ray with the given matrix applied. The origin moves
        like a point, the direction like a vector (translation is ignored).
        """
        return Ray(transform.apply_point(self.origin),
                   transform.apply_vector(self.direction))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
