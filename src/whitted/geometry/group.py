# geometry/group.py
import logging
from typing import Iterable, List, Optional

from whitted.core.aabb import AABB
from whitted.core.errors import SceneError
from whitted.core.ray import Ray
from whitted.core.transform import Transform
from whitted.geometry.intersection import Intersection
from whitted.geometry.shape import Shape

logger = logging.getLogger(__name__)


class Group(Shape):
    """
    A composite shape owning an ordered list of children.

    Adding a child composes the group's transform into it (and into all of
    its descendants), so every primitive ends up with its complete
    object-to-world transform and world rays can be handed straight down
    the tree. The group keeps its own transform to define its local space,
    where its bounding box is cached. A ray that misses that box skips the
    whole subtree.
    """
    def __init__(self, children: Iterable[Shape] = (), transform: Optional[Transform] = None,
                 material=None):
        super().__init__(material, transform)
        self.children: List[Shape] = []
        self._bounds: Optional[AABB] = None
        for child in children:
            self.add_child(child)

    @classmethod
    def _adopt(cls, children: List[Shape], transform: Transform) -> "Group":
        # Children already carry `transform`; take them over as they are.
        group = cls(transform=transform)
        group.children = list(children)
        return group

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def add_child(self, child: Shape):
        if child is self:
            raise SceneError("a group cannot contain itself")
        if child.in_group:
            raise SceneError(f"{child!r} already belongs to a group")
        child._compose_parent(self.transform)
        child.in_group = True
        self.children.append(child)
        self._bounds = None

    def extend(self, children: Iterable[Shape]):
        for child in children:
            self.add_child(child)

    def __len__(self) -> int:
        return len(self.children)

    @Shape.transform.setter
    def transform(self, transform: Transform):
        if self.in_group:
            raise SceneError(f"{self!r} belongs to a group; its transform can no longer change")
        # Re-base the subtree: undo the old transform, apply the new one.
        delta = transform @ self._transform.inverse
        self._transform = transform
        for child in self.children:
            child._compose_parent(delta)
        self._bounds = None

    def _compose_parent(self, parent: Transform):
        self._transform = parent @ self._transform
        for child in self.children:
            child._compose_parent(parent)
        self._bounds = None

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def child_bounds(self, child: Shape) -> AABB:
        """A child's box expressed in this group's local space."""
        return child.local_bounds().transform(self.transform.inverse @ child.transform)

    def local_bounds(self) -> AABB:
        if self._bounds is None:
            box = AABB.empty()
            for child in self.children:
                box = AABB.surrounding_box(box, self.child_bounds(child))
            self._bounds = box
        return self._bounds

    # ------------------------------------------------------------------
    # Intersection
    # ------------------------------------------------------------------
    def intersect(self, ray: Ray) -> List[Intersection]:
        if not self.children:
            return []
        if not self.local_bounds().hit(ray.transform(self.transform.inverse)):
            return []
        xs = []
        for child in self.children:
            xs.extend(child.intersect(ray))
        return xs

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError("groups are intersected through intersect()")

    def local_normal_at(self, point, hit=None):
        # Intersections always name the primitive that was hit, never a group.
        raise NotImplementedError("groups have no surface normal")

    # ------------------------------------------------------------------
    # Subdivision
    # ------------------------------------------------------------------
    def partition_children(self):
        """
        Splits this group's box in half and removes the children that fit
        entirely inside either half. Returns (left, right); children that
        straddle the split stay in the group.
        """
        halves = self.local_bounds().split()
        if halves is None:
            return [], []
        left_box, right_box = halves
        left, right, remaining = [], [], []
        for child in self.children:
            box = self.child_bounds(child)
            if left_box.contains_box(box):
                left.append(child)
            elif right_box.contains_box(box):
                right.append(child)
            else:
                remaining.append(child)
        self.children = remaining
        self._bounds = None
        return left, right

    def make_subgroup(self, children: List[Shape]):
        self.children.append(Group._adopt(children, self.transform))
        self.children[-1].in_group = True
        self._bounds = None

    def divide(self, threshold: int):
        """
        Rebuilds the subtree so that groups with more than `threshold`
        children are split into spatial halves. Only the grouping changes;
        rendering output does not.
        """
        if len(self.children) > threshold:
            left, right = self.partition_children()
            logger.debug("Dividing group of %d: %d left, %d right, %d straddling",
                         len(self.children) + len(left) + len(right),
                         len(left), len(right), len(self.children))
            # Splitting everything into one side would just rebuild this group.
            if left and not right and not self.children:
                self.children = left
                left = []
            elif right and not left and not self.children:
                self.children = right
                right = []
            if left:
                self.make_subgroup(left)
            if right:
                self.make_subgroup(right)
        for child in self.children:
            child.divide(threshold)
        self._bounds = None
