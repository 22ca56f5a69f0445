"""CPU stochastic path tracer.

Subpackages:
    core: vectors, rays, bounding boxes and sampling helpers
    geometry: the Hittable contract, spheres, flat lists and the BVH
    materials: Lambertian, metal and dielectric scattering plus textures
    camera: look-at camera, its builder and the shading loop
    renderer: image container, tone mapping, row scheduling and PPM output
"""

from pathtracer.camera import Camera, CameraBuilder
from pathtracer.core import AABB, UV, Color, Ray, Vector3
from pathtracer.errors import ImageDataMissingError, RayTracerError, TextureLoadError
from pathtracer.geometry import BVHNode, HitRecord, Hittable, HittableList, Sphere
from pathtracer.materials import (
    CheckerTexture,
    Dielectric,
    ImageTexture,
    Lambertian,
    Material,
    Metal,
    Perlin,
    PerlinTexture,
    Scattered,
    SolidTexture,
    Texture,
)
from pathtracer.renderer import Image

__version__ = "0.1.0"

__all__ = [
    "AABB",
    "BVHNode",
    "Camera",
    "CameraBuilder",
    "CheckerTexture",
    "Color",
    "Dielectric",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Image",
    "ImageDataMissingError",
    "ImageTexture",
    "Lambertian",
    "Material",
    "Metal",
    "Perlin",
    "PerlinTexture",
    "Ray",
    "RayTracerError",
    "Scattered",
    "SolidTexture",
    "Sphere",
    "Texture",
    "TextureLoadError",
    "UV",
    "Vector3",
]
