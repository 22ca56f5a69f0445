# geometry/bvh.py
import logging
import random
from typing import List, Optional, Sequence

from pathtracer.core.aabb import AABB, box_compare
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class BVHNode(Hittable):
    """
    Bounding volume hierarchy node with one or two children.

    Children are either primitives or further BVH nodes. Every recursive
    call draws its own split axis at random, sorts the objects by the start
    of their boxes on that axis and splits them at the median index.
    """
    def __init__(self, objects: Sequence[Hittable], rng: random.Random):
        if len(objects) == 0:
            raise ValueError("BVHNode needs at least one object")

        objects = list(objects)
        axis = rng.randint(0, 2)
        object_span = len(objects)

        self.left: Hittable
        self.right: Optional[Hittable]

        if object_span == 1:
            self.left = objects[0]
            self.right = None
            self.box = objects[0].bounding_box()
            return

        if object_span == 2:
            first, second = objects
            if box_compare(first.bounding_box(), second.bounding_box(), axis):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            objects.sort(key=lambda obj: obj.bounding_box().minimum[axis])
            mid = object_span // 2
            self.left = _build_child(objects[:mid], rng)
            self.right = _build_child(objects[mid:], rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    @classmethod
    def from_list(cls, world, rng: random.Random) -> "BVHNode":
        node = cls(world.objects, rng)
        logger.debug("Built BVH over %d objects (%d nodes, depth %d)",
                     len(world.objects), node.node_count(), node.depth())
        return node

    @property
    def is_leaf(self) -> bool:
        return self.right is None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        if self.right is None:
            return hit_left

        # A left hit bounds how far the right subtree needs to be searched.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max)

        if hit_left and hit_right:
            return hit_left if hit_left.t < hit_right.t else hit_right
        return hit_left or hit_right

    def bounding_box(self) -> AABB:
        return self.box

    def node_count(self) -> int:
        count = 1
        for child in (self.left, self.right):
            if isinstance(child, BVHNode):
                count += child.node_count()
        return count

    def depth(self) -> int:
        child_depths = [child.depth() for child in (self.left, self.right)
                        if isinstance(child, BVHNode)]
        return 1 + max(child_depths, default=0)

    def primitives(self) -> List[Hittable]:
        """All primitives below this node, left to right."""
        result = []
        for child in (self.left, self.right):
            if child is None:
                continue
            if isinstance(child, BVHNode):
                result.extend(child.primitives())
            else:
                result.append(child)
        return result


def _build_child(objects: List[Hittable], rng: random.Random) -> Hittable:
    # A single object is stored directly instead of behind a one-child node.
    if len(objects) == 1:
        return objects[0]
    return BVHNode(objects, rng)
