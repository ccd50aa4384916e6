# camera/camera.py
import math
from typing import Optional

from whitted.core.errors import InvalidViewConfiguration
from whitted.core.ray import Ray
from whitted.core.transform import Transform
from whitted.core.vector import Vector3


class Camera:
    """
    A pinhole camera looking down -z in its own space, one unit in front of
    a canvas of `hsize` x `vsize` pixels. `transform` is the view transform
    (world to camera); its cached inverse takes pixel points back to world
    space.
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[Transform] = None):
        if int(hsize) != hsize or int(vsize) != vsize or hsize <= 0 or vsize <= 0:
            raise InvalidViewConfiguration(f"camera size must be positive integers, got {hsize}x{vsize}")
        if not 0 < field_of_view < math.pi:
            raise InvalidViewConfiguration(
                f"field of view must be between 0 and pi radians, got {field_of_view}")
        self.hsize = int(hsize)
        self.vsize = int(vsize)
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else Transform.identity()
        self.update_camera()

    @classmethod
    def looking_at(cls, hsize: int, vsize: int, field_of_view: float,
                   eye: Vector3, to: Vector3, up: Vector3 = Vector3(0, 1, 0)) -> "Camera":
        return cls(hsize, vsize, field_of_view, Transform.view_transform(eye, to, up))

    def update_camera(self):
        """Recomputes the canvas extents from the field of view and aspect ratio."""
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.hsize / self.vsize

        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view

        self.pixel_size = (self.half_width * 2) / self.hsize

    @property
    def aspect_ratio(self) -> float:
        return self.hsize / self.vsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """
        The primary ray from the camera through the center of pixel (px, py),
        with (0, 0) at the top-left corner.
        """
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        inverse = self.transform.inverse
        pixel = inverse.apply_point(Vector3(world_x, world_y, -1))
        origin = inverse.apply_point(Vector3(0, 0, 0))
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)
