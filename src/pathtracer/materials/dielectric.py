# materials/dielectric.py
import math
import random

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, Scattered


class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    The choice between reflection and refraction is purely geometric:
    it reflects only under total internal reflection.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def refraction_ratio(self, front_face: bool) -> float:
        return 1.0 / self.ref_idx if front_face else self.ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Scattered:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        ni_over_nt = self.refraction_ratio(rec.front_face)
        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        if ni_over_nt * sin_theta > 1.0:
            # Total internal reflection
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return Scattered(Ray(rec.p, direction, ray_in.time), attenuation)
