# materials/presets.py
from typing import Optional

from whitted.core.transform import Transform
from whitted.core.vector import Vector3
from whitted.lighting.light import PointLight
from whitted.materials.material import Material
from whitted.materials.textures import (
    CheckerTexture,
    GradientTexture,
    RingTexture,
    StripeTexture,
)


class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    YELLOW = Vector3(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)
    PURPLE = Vector3(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Vector3(1.0, 1.0, 1.0)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Vector3) -> Material:
        """Create a matte material with the given color."""
        return Material(color, specular=0.0)


class MetalPresets:
    """Reflective materials; the color tints the Phong terms."""

    @staticmethod
    def mirror() -> Material:
        return Material(Vector3(0.0, 0.0, 0.0), diffuse=0.0, specular=1.0, shininess=300, reflective=1.0)

    @staticmethod
    def gold() -> Material:
        return Material(Vector3(1.0, 0.78, 0.34), diffuse=0.3, specular=1.0, shininess=250, reflective=0.6)

    @staticmethod
    def silver() -> Material:
        return Material(Vector3(0.95, 0.93, 0.88), diffuse=0.2, specular=1.0, shininess=300, reflective=0.8)

    @staticmethod
    def copper() -> Material:
        return Material(Vector3(0.95, 0.64, 0.54), diffuse=0.3, specular=0.9, shininess=200, reflective=0.5)

    @staticmethod
    def chrome() -> Material:
        return Material(Vector3(0.9, 0.9, 0.9), diffuse=0.1, specular=1.0, shininess=300, reflective=0.9)


class DielectricPresets:
    """Transparent materials with realistic refractive indices."""

    @staticmethod
    def _clear(refractive_index: float) -> Material:
        return Material(Vector3(0.0, 0.0, 0.0), ambient=0.0, diffuse=0.1, specular=1.0, shininess=300,
                        reflective=0.9, transparency=0.9, refractive_index=refractive_index)

    @staticmethod
    def glass() -> Material:
        return DielectricPresets._clear(1.52)  # Common glass

    @staticmethod
    def water() -> Material:
        return DielectricPresets._clear(1.33)

    @staticmethod
    def diamond() -> Material:
        return DielectricPresets._clear(2.42)

    @staticmethod
    def ice() -> Material:
        return DielectricPresets._clear(1.31)

    @staticmethod
    def sapphire() -> Material:
        return DielectricPresets._clear(1.77)


class LightPresets:
    """Point lights with different colors and intensities."""

    @staticmethod
    def warm_light(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(1.0, 0.95, 0.9) * intensity)

    @staticmethod
    def cool_light(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(0.9, 0.95, 1.0) * intensity)

    @staticmethod
    def daylight(position: Vector3, intensity: float = 1.0) -> PointLight:
        return PointLight(position, Vector3(1.0, 1.0, 1.0) * intensity)


class TexturePresets:
    """Predefined pattern textures."""

    @staticmethod
    def checkerboard(color1: Vector3 = None, color2: Vector3 = None, scale: float = 1.0) -> CheckerTexture:
        """Create a checkerboard texture; `scale` is the size of one square."""
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        return CheckerTexture(color1, color2, _scaled(scale))

    @staticmethod
    def stripes(color1: Vector3, color2: Vector3, width: float = 1.0,
                transform: Optional[Transform] = None) -> StripeTexture:
        return StripeTexture(color1, color2, transform if transform is not None else _scaled(width))

    @staticmethod
    def rings(color1: Vector3, color2: Vector3, width: float = 1.0) -> RingTexture:
        return RingTexture(color1, color2, _scaled(width))

    @staticmethod
    def gradient(color1: Vector3, color2: Vector3, length: float = 1.0) -> GradientTexture:
        return GradientTexture(color1, color2, _scaled(length))


def _scaled(size: float) -> Transform:
    return Transform.scaling(size, size, size)
