# geometry/intersection.py
import math
from typing import Iterable, List, Optional

from whitted.core.ray import Ray
from whitted.core.utils import EPSILON, reflect
from whitted.core.vector import Vector3


class Intersection:
    """
    One place where a ray meets a primitive: the ray parameter `t`, the
    primitive itself, and the barycentric `u`/`v` (smooth triangles only).
    """
    def __init__(self, t: float, obj, u: Optional[float] = None, v: Optional[float] = None):
        self.t = t
        self.object = obj
        self.u = u
        self.v = v

    def __repr__(self) -> str:
        if self.u is None:
            return f"Intersection(t={self.t}, object={self.object!r})"
        return f"Intersection(t={self.t}, object={self.object!r}, u={self.u}, v={self.v})"


def sort_intersections(xs: Iterable[Intersection]) -> List[Intersection]:
    # sorted() is stable: equal t values keep their input order.
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """
    Returns the visible intersection: the one with the smallest t >= 0.
    Ties go to whichever came first in `xs`.
    """
    best = None
    for i in xs:
        if i.t >= 0 and (best is None or i.t < best.t):
            best = i
    return best


class Computations:
    """
    Everything the shading engine needs to know about a single hit.
    """
    def __init__(self, t, obj, point, eyev, normalv, inside, reflectv,
                 over_point, under_point, n1, n2):
        self.t = t
        self.object = obj
        self.point = point
        self.eyev = eyev
        self.normalv = normalv
        self.inside = inside
        self.reflectv = reflectv
        self.over_point = over_point
        self.under_point = under_point
        self.n1 = n1
        self.n2 = n2

    def schlick(self) -> float:
        """
        Schlick's approximation of the Fresnel reflectance at this hit.
        """
        cos = self.eyev.dot(self.normalv)
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)
        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def prepare_computations(intersection: Intersection, ray: Ray,
                         xs: Optional[List[Intersection]] = None) -> Computations:
    """
    Precomputes the shading state for `intersection`, which must come from
    `ray`. `xs` is the full sorted intersection list for the ray and is used
    to work out which materials the ray leaves (n1) and enters (n2).
    """
    if xs is None:
        xs = [intersection]

    point = ray.at(intersection.t)
    eyev = -ray.direction
    normalv = intersection.object.normal_at(point, intersection)
    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = -normalv
    reflectv = reflect(ray.direction, normalv)

    offset = normalv * EPSILON
    over_point = point + offset
    under_point = point - offset

    n1 = 1.0
    n2 = 1.0
    containers = []
    for i in xs:
        if i is intersection:
            if containers:
                n1 = containers[-1].material.refractive_index
        if any(c is i.object for c in containers):
            containers = [c for c in containers if c is not i.object]
        else:
            containers.append(i.object)
        if i is intersection:
            if containers:
                n2 = containers[-1].material.refractive_index
            break

    return Computations(intersection.t, intersection.object, point, eyev, normalv,
                        inside, reflectv, over_point, under_point, n1, n2)
