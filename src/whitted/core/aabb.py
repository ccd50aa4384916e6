# core/aabb.py
import math
from typing import Optional, Tuple

from whitted.core.utils import EPSILON
from whitted.core.vector import Vector3

AXES = ('x', 'y', 'z')


class AABB:
    """
    Axis-aligned bounding box given by its minimum and maximum corners.

    An empty box has its minimum at +inf and its maximum at -inf, which makes
    it the identity element of `surrounding_box`. Boxes may be unbounded
    (planes, open cylinders), so every operation here tolerates infinities.
    """
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def empty(cls) -> "AABB":
        return cls(Vector3(math.inf, math.inf, math.inf),
                   Vector3(-math.inf, -math.inf, -math.inf))

    def is_empty(self) -> bool:
        return (self.minimum.x > self.maximum.x or
                self.minimum.y > self.maximum.y or
                self.minimum.z > self.maximum.z)

    def add_point(self, p: Vector3) -> "AABB":
        return AABB(
            Vector3(min(self.minimum.x, p.x), min(self.minimum.y, p.y), min(self.minimum.z, p.z)),
            Vector3(max(self.maximum.x, p.x), max(self.maximum.y, p.y), max(self.maximum.z, p.z))
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def contains_point(self, p: Vector3) -> bool:
        return all(getattr(self.minimum, a) - EPSILON <= getattr(p, a) <= getattr(self.maximum, a) + EPSILON
                   for a in AXES)

    def contains_box(self, other: "AABB") -> bool:
        return self.contains_point(other.minimum) and self.contains_point(other.maximum)

    def transform(self, transform) -> "AABB":
        """
        Returns the smallest axis-aligned box enclosing this box after the
        transform is applied to it. Each output extent is accumulated from
        the matrix entries directly (equivalent to transforming the eight
        corners) so that 0 * inf terms contribute nothing.
        """
        if self.is_empty():
            return AABB.empty()
        lo = (self.minimum.x, self.minimum.y, self.minimum.z)
        hi = (self.maximum.x, self.maximum.y, self.maximum.z)
        new_min = []
        new_max = []
        for row in transform.matrix[:3].tolist():
            low = high = row[3]
            for j in range(3):
                if row[j] == 0.0:
                    continue
                a = row[j] * lo[j]
                b = row[j] * hi[j]
                low += min(a, b)
                high += max(a, b)
            new_min.append(low)
            new_max.append(high)
        return AABB(Vector3(*new_min), Vector3(*new_max))

    def hit(self, ray) -> bool:
        """
        Slab test against the whole line the ray lies on. It is never
        negative for a box the line crosses; hits behind the origin are
        left for the caller's hit selection.
        """
        if self.is_empty():
            return False
        t_min = -math.inf
        t_max = math.inf
        for a in AXES:
            origin = getattr(ray.origin, a)
            direction = getattr(ray.direction, a)
            lo = getattr(self.minimum, a)
            hi = getattr(self.maximum, a)
            if abs(direction) < EPSILON:
                # Parallel to this slab: inside it or never.
                if origin < lo - EPSILON or origin > hi + EPSILON:
                    return False
                continue
            t0 = (lo - origin) / direction
            t1 = (hi - origin) / direction
            if t0 > t1:
                t0, t1 = t1, t0
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_min > t_max + EPSILON:
                return False
        return True

    def split(self) -> Optional[Tuple["AABB", "AABB"]]:
        """
        Halves the box across its longest finite axis. Returns None when no
        axis has a finite, non-zero extent to split.
        """
        best_axis = None
        best_extent = 0.0
        for a in AXES:
            extent = getattr(self.maximum, a) - getattr(self.minimum, a)
            if math.isfinite(extent) and extent > best_extent:
                best_axis = a
                best_extent = extent
        if best_axis is None:
            return None
        mid = getattr(self.minimum, best_axis) + best_extent / 2.0
        left_max = Vector3(self.maximum.x, self.maximum.y, self.maximum.z)
        right_min = Vector3(self.minimum.x, self.minimum.y, self.minimum.z)
        setattr(left_max, best_axis, mid)
        setattr(right_min, best_axis, mid)
        return AABB(self.minimum, left_max), AABB(right_min, self.maximum)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
