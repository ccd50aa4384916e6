from whitted.materials.material import Material
from whitted.materials.textures import (
    Texture,
    SolidTexture,
    PatternTexture,
    StripeTexture,
    GradientTexture,
    RingTexture,
    CheckerTexture,
)

__all__ = [
    "Material",
    "Texture",
    "SolidTexture",
    "PatternTexture",
    "StripeTexture",
    "GradientTexture",
    "RingTexture",
    "CheckerTexture",
]
