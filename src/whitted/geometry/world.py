# geometry/world.py
import logging
import math
from typing import List, Optional

from whitted.core.ray import Ray
from whitted.core.vector import Vector3
from whitted.geometry.intersection import (
    Computations,
    Intersection,
    hit,
    prepare_computations,
    sort_intersections,
)
from whitted.geometry.shape import Shape

logger = logging.getLogger(__name__)

BLACK = Vector3(0, 0, 0)

# Recursion budget for reflected and refracted rays.
RECURSION_DEPTH = 5


class World:
    """
    A scene: the top-level shapes plus the lights that illuminate them.

    Besides holding the scene, the world is the shading engine. Everything
    here reads the scene and never changes it, so one world can be shaded
    from any number of workers at once.
    """
    def __init__(self, objects: Optional[List[Shape]] = None, lights: Optional[list] = None):
        self.objects: List[Shape] = list(objects) if objects else []
        self.lights: list = list(lights) if lights else []

    @classmethod
    def default(cls) -> "World":
        """
        Two concentric spheres lit from the upper left, the world most of
        the shading tests are written against.
        """
        from whitted.core.transform import Transform
        from whitted.geometry.sphere import Sphere
        from whitted.lighting.light import PointLight
        from whitted.materials.material import Material

        outer = Sphere(Material(color=Vector3(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=Transform.scaling(0.5, 0.5, 0.5))
        light = PointLight(Vector3(-10, 10, -10), Vector3(1, 1, 1))
        return cls([outer, inner], [light])

    def add(self, obj: Shape):
        self.objects.append(obj)

    def add_light(self, light):
        self.lights.append(light)

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    def divide(self, threshold: int):
        """
        One-time subdivision of every group in the scene. Must finish before
        any rendering starts.
        """
        for obj in self.objects:
            obj.divide(threshold)
        logger.info("Subdivided scene groups with threshold %d", threshold)

    # ------------------------------------------------------------------
    # Intersection
    # ------------------------------------------------------------------
    def intersect(self, ray: Ray) -> List[Intersection]:
        xs = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        return sort_intersections(xs)

    def is_shadowed(self, light_position: Vector3, point: Vector3) -> bool:
        """
        True when a shadow-casting object sits strictly between `point` and
        `light_position`. The shadow ray's direction is left unnormalized,
        so the light itself is at t = 1.
        """
        direction = light_position - point
        if direction.length() == 0:
            # A sample sitting on the point itself cannot be blocked.
            return False
        shadow_ray = Ray(point, direction)
        for i in self.intersect(shadow_ray):
            if 0 < i.t < 1 and i.object.material.casts_shadow:
                return True
        return False

    # ------------------------------------------------------------------
    # Shading
    # ------------------------------------------------------------------
    def color_at(self, ray: Ray, remaining: int = RECURSION_DEPTH) -> Vector3:
        xs = self.intersect(ray)
        h = hit(xs)
        if h is None:
            return BLACK
        return self.shade_hit(prepare_computations(h, ray, xs), remaining)

    def shade_hit(self, comps: Computations, remaining: int = RECURSION_DEPTH) -> Vector3:
        material = comps.object.material

        surface = BLACK
        for light in self.lights:
            intensity = light.intensity_at(self, comps.over_point)
            surface = surface + material.lighting(comps.object, light, comps.over_point,
                                                  comps.eyev, comps.normalv, intensity)

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = comps.schlick()
            return surface + reflected * reflectance + refracted * (1 - reflectance)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = RECURSION_DEPTH) -> Vector3:
        reflective = comps.object.material.reflective
        if reflective == 0 or remaining <= 0:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = RECURSION_DEPTH) -> Vector3:
        transparency = comps.object.material.transparency
        if transparency == 0 or remaining <= 0:
            return BLACK

        # Snell's law: n1 * sin(theta_i) = n2 * sin(theta_t)
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1 - cos_i * cos_i)
        if sin2_t > 1:
            # Total internal reflection
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency
