# geometry/world.py
import random
from typing import Iterable, List, Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A flat list of Hittable objects searched by linear scan.

    The aggregate bounding box is kept up to date as objects are added.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.box = AABB.empty()
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())

    def clear(self):
        self.objects.clear()
        self.box = AABB.empty()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, rng: random.Random):
        """Builds a BVH over a copy of the objects; the list itself is left as is."""
        from pathtracer.geometry.bvh import BVHNode

        return BVHNode.from_list(self, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box
