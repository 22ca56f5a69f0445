"""Scene geometry: the Hittable contract, spheres and the scene containers."""

from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList

__all__ = [
    "BVHNode",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Sphere",
]
