# renderer/canvas.py
import numpy as np

from whitted.core.vector import Vector3


class Canvas:
    """
    The render output: a width x height grid of unclamped float RGB triples.
    Clamping and encoding are left to whoever consumes `to_array()`.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def write_pixel(self, x: int, y: int, color: Vector3):
        self.pixels[y, x] = (color.x, color.y, color.z)

    def write_row(self, y: int, colors):
        self.pixels[y] = [(c.x, c.y, c.z) for c in colors]

    def pixel_at(self, x: int, y: int) -> Vector3:
        r, g, b = self.pixels[y, x]
        return Vector3(float(r), float(g), float(b))

    def to_array(self) -> np.ndarray:
        """Copy of the pixel data with shape (height, width, 3)."""
        return self.pixels.copy()
