# materials/metal.py
import random
from typing import Optional

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector, reflect
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scattered


class Metal(Material):
    """
    Specular metal. fuzz in [0, 1) blurs the reflection; other values become 1.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = fuzz if 0.0 <= fuzz < 1.0 else 1.0

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scattered]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0.0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return Scattered(scattered, self.albedo)

        return None  # Absorb the ray if it does not scatter away from the surface
