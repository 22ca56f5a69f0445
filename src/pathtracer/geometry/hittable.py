# geometry/hittable.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.

    The stored normal always points against the incoming ray; front_face
    tells whether that is the surface's outward side.
    """
    __slots__ = ("p", "normal", "t", "uv", "material", "front_face")

    def __init__(self, ray: Ray, t: float, p: Vector3, outward_normal: Vector3,
                 material, uv: Optional[UV] = None):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.uv = uv if uv is not None else UV(0.0, 0.0)
        self.material = material
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    @property
    def point(self) -> Vector3:
        return self.p

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
