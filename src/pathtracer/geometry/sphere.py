# geometry/sphere.py
import math
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    A sphere defined by its center, radius and material.

    A sphere with a non-zero motion vector moves linearly from center at
    time 0 to center + motion at time 1. A negative radius flips the
    normals, which scenes use to model hollow glass.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 motion: Optional[Vector3] = None):
        self.center = center
        self.radius = radius
        self.material = material
        self.motion = motion if motion is not None else Vector3.zero()
        self.is_moving = self.motion != Vector3.zero()

        r = abs(radius)
        offset = Vector3(r, r, r)
        box = AABB(center - offset, center + offset)
        if self.is_moving:
            end = center + self.motion
            box = AABB.surrounding_box(box, AABB(end - offset, end + offset))
        self.box = box

    @classmethod
    def stationary(cls, center: Vector3, radius: float, material) -> "Sphere":
        return cls(center, radius, material)

    @classmethod
    def moving(cls, center: Vector3, motion: Vector3, radius: float, material) -> "Sphere":
        return cls(center, radius, material, motion=motion)

    def center_at(self, time: float) -> Vector3:
        if not self.is_moving:
            return self.center
        return self.center + self.motion * time

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.radius == 0:
            return None
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        p = ray.at(root)
        outward_normal = (p - center) / self.radius
        # Surface coordinates are not derived from the hit point.
        return HitRecord(ray, root, p, outward_normal, self.material, UV(0.0, 0.0))

    def bounding_box(self) -> AABB:
        return self.box

    def __repr__(self) -> str:
        if self.is_moving:
            return f"Sphere({self.center!r}, {self.radius}, motion={self.motion!r})"
        return f"Sphere({self.center!r}, {self.radius})"
