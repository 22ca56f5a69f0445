"""Value types and sampling helpers shared by the whole tracer."""

from pathtracer.core.aabb import AABB, box_compare
from pathtracer.core.ray import Ray
from pathtracer.core.utils import (
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
)
from pathtracer.core.uv import UV
from pathtracer.core.vector import Color, Vector3

__all__ = [
    "AABB",
    "box_compare",
    "Color",
    "Ray",
    "UV",
    "Vector3",
    "random_in_unit_disk",
    "random_in_unit_sphere",
    "random_unit_vector",
    "reflect",
    "refract",
]
