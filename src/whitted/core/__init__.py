from whitted.core.vector import Vector3
from whitted.core.ray import Ray
from whitted.core.aabb import AABB
from whitted.core.transform import Transform
from whitted.core.errors import (
    SceneError,
    InvalidGeometry,
    SingularTransform,
    InvalidViewConfiguration,
)

__all__ = [
    "Vector3",
    "Ray",
    "AABB",
    "Transform",
    "SceneError",
    "InvalidGeometry",
    "SingularTransform",
    "InvalidViewConfiguration",
]
