# materials/material.py
import random
from typing import NamedTuple, Optional

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord


class Scattered(NamedTuple):
    """A scattered ray and the color it is attenuated by."""
    ray: Ray
    attenuation: Vector3


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[Scattered]:
        """
        Computes the scattered ray and attenuation.
        Returns a Scattered (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
