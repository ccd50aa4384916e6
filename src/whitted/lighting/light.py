# lighting/light.py
from typing import List

from whitted.core.errors import InvalidGeometry
from whitted.core.vector import Vector3


class Light:
    """
    Base class for light sources. A light is a set of sample positions
    sharing one intensity (color).
    """
    def __init__(self, intensity: Vector3):
        self.intensity = intensity

    def samples(self) -> List[Vector3]:
        raise NotImplementedError("samples() must be implemented by subclasses.")

    def intensity_at(self, world, point: Vector3) -> float:
        """
        Fraction of the light's samples visible from `point`, in [0, 1].
        """
        samples = self.samples()
        visible = sum(1 for sample in samples if not world.is_shadowed(sample, point))
        return visible / len(samples)


class PointLight(Light):
    """A light with no size, casting hard shadows."""
    def __init__(self, position: Vector3, intensity: Vector3):
        super().__init__(intensity)
        self.position = position

    def samples(self) -> List[Vector3]:
        return [self.position]

    def intensity_at(self, world, point: Vector3) -> float:
        return 0.0 if world.is_shadowed(self.position, point) else 1.0

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"


class AreaLight(Light):
    """
    A rectangular light spanned by two edge vectors from `corner`, divided
    into a usteps x vsteps grid of cells. Each cell is sampled at its
    center, which gives soft but fully deterministic shadows.
    """
    def __init__(self, corner: Vector3, full_uvec: Vector3, usteps: int,
                 full_vvec: Vector3, vsteps: int, intensity: Vector3):
        super().__init__(intensity)
        if usteps < 1 or vsteps < 1:
            raise InvalidGeometry(f"area light needs at least one cell per edge, got {usteps}x{vsteps}")
        self.corner = corner
        self.uvec = full_uvec / usteps
        self.usteps = usteps
        self.vvec = full_vvec / vsteps
        self.vsteps = vsteps
        self.position = corner + full_uvec * 0.5 + full_vvec * 0.5
        self._samples = [self.point_on_light(u, v)
                         for v in range(vsteps)
                         for u in range(usteps)]

    @property
    def sample_count(self) -> int:
        return self.usteps * self.vsteps

    def point_on_light(self, u: int, v: int, jitter: float = 0.5) -> Vector3:
        return self.corner + self.uvec * (u + jitter) + self.vvec * (v + jitter)

    def samples(self) -> List[Vector3]:
        return self._samples

    def __repr__(self) -> str:
        return (f"AreaLight(corner={self.corner!r}, uvec={self.uvec!r}x{self.usteps}, "
                f"vvec={self.vvec!r}x{self.vsteps}, intensity={self.intensity!r})")
