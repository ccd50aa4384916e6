# materials/material.py
from typing import Optional, Union

from whitted.core.utils import reflect
from whitted.core.vector import Vector3
from whitted.materials.textures import SolidTexture, Texture

WHITE = Vector3(1, 1, 1)


class Material:
    """
    Phong surface description plus the reflection and refraction settings
    used by the recursive part of the shader.

    The surface color comes from a texture; passing a plain color wraps it
    in a SolidTexture.
    """
    def __init__(self,
                 color: Optional[Union[Vector3, Texture]] = None,
                 ambient: float = 0.1,
                 diffuse: float = 0.9,
                 specular: float = 0.9,
                 shininess: float = 200.0,
                 reflective: float = 0.0,
                 transparency: float = 0.0,
                 refractive_index: float = 1.0,
                 casts_shadow: bool = True,
                 texture: Optional[Texture] = None):
        if texture is None:
            if isinstance(color, Texture):
                texture = color
            else:
                texture = SolidTexture(color if color is not None else WHITE)
        self.texture = texture
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index
        # Shapes that don't cast shadows let light through, e.g. thin glass.
        self.casts_shadow = casts_shadow

    def lighting(self, shape, light, point: Vector3, eyev: Vector3, normalv: Vector3,
                 intensity: float = 1.0) -> Vector3:
        """
        Phong reflection at `point` for one light.

        `intensity` is the fraction of the light that reaches the point
        (0 in full shadow, 1 fully lit). Diffuse and specular terms are
        averaged over the light's sample positions, so an area light gives
        the same result as a point light placed at each sample.
        """
        color = self.texture.color_at_shape(shape, point)
        effective_color = color * light.intensity
        ambient = effective_color * self.ambient

        if intensity <= 0:
            return ambient

        samples = light.samples()
        total = Vector3(0, 0, 0)
        for sample in samples:
            lightv = (sample - point).normalize()
            light_dot_normal = lightv.dot(normalv)
            if light_dot_normal < 0:
                # Light is on the other side of the surface.
                continue
            total = total + effective_color * (self.diffuse * light_dot_normal)

            reflect_dot_eye = reflect(-lightv, normalv).dot(eyev)
            if reflect_dot_eye > 0:
                factor = reflect_dot_eye ** self.shininess
                total = total + light.intensity * (self.specular * factor)

        return ambient + total * (intensity / len(samples))

    @property
    def color(self) -> Vector3:
        """The base color when the texture is solid, else None."""
        if isinstance(self.texture, SolidTexture):
            return self.texture.color
        return None

    def __repr__(self) -> str:
        return (f"Material(texture={type(self.texture).__name__}, ambient={self.ambient}, "
                f"diffuse={self.diffuse}, specular={self.specular}, shininess={self.shininess}, "
                f"reflective={self.reflective}, transparency={self.transparency}, "
                f"refractive_index={self.refractive_index})")
