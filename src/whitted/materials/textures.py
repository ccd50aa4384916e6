# materials/textures.py
import math
from typing import Optional

from whitted.core.transform import Transform
from whitted.core.vector import Vector3


class Texture:
    """Base class for all textures."""
    def color_at(self, point: Vector3) -> Vector3:
        """Sample the texture at a point in the texture's own space."""
        raise NotImplementedError("color_at() must be implemented by texture subclasses.")

    def color_at_shape(self, shape, world_point: Vector3) -> Vector3:
        return self.color_at(world_point)


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def color_at(self, point: Vector3) -> Vector3:
        return self.color

    def color_at_shape(self, shape, world_point: Vector3) -> Vector3:
        return self.color


class PatternTexture(Texture):
    """
    Base class for two-color procedural patterns.

    A pattern has its own transform, independent of the shape it is painted
    on: world points are first taken into the shape's object space and then
    into pattern space.
    """
    def __init__(self, color1: Vector3, color2: Vector3, transform: Optional[Transform] = None):
        self.color1 = color1
        self.color2 = color2
        self.transform = transform if transform is not None else Transform.identity()

    def color_at_shape(self, shape, world_point: Vector3) -> Vector3:
        object_point = shape.transform.inverse.apply_point(world_point)
        pattern_point = self.transform.inverse.apply_point(object_point)
        return self.color_at(pattern_point)


class StripeTexture(PatternTexture):
    """Alternating stripes along x."""
    def color_at(self, point: Vector3) -> Vector3:
        return self.color1 if math.floor(point.x) % 2 == 0 else self.color2


class GradientTexture(PatternTexture):
    """Linear blend from color1 to color2, repeating every unit along x."""
    def color_at(self, point: Vector3) -> Vector3:
        fraction = point.x - math.floor(point.x)
        return self.color1 + (self.color2 - self.color1) * fraction


class RingTexture(PatternTexture):
    """Concentric rings around the y axis."""
    def color_at(self, point: Vector3) -> Vector3:
        distance = math.sqrt(point.x * point.x + point.z * point.z)
        return self.color1 if math.floor(distance) % 2 == 0 else self.color2


class CheckerTexture(PatternTexture):
    """A 3D checker pattern of unit cubes."""
    def color_at(self, point: Vector3) -> Vector3:
        total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        return self.color1 if total % 2 == 0 else self.color2
