"""Scattering materials and the textures they sample."""

from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.material import Material, Scattered
from pathtracer.materials.metal import Metal
from pathtracer.materials.noise import Perlin
from pathtracer.materials.textures import (
    CheckerTexture,
    ImageTexture,
    PerlinTexture,
    SolidTexture,
    Texture,
)

__all__ = [
    "CheckerTexture",
    "Dielectric",
    "ImageTexture",
    "Lambertian",
    "Material",
    "Metal",
    "Perlin",
    "PerlinTexture",
    "Scattered",
    "SolidTexture",
    "Texture",
]
