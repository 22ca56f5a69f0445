# scenes.py
"""
Ready-made scenes. Each factory returns the world together with a camera
builder that callers may still adjust (image size, samples) before building.
"""
import math
import random
from typing import Callable, Dict, NamedTuple, Optional

from pathtracer.camera.builder import CameraBuilder
from pathtracer.core.vector import Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.noise import Perlin
from pathtracer.materials.texture_loader import load_texture
from pathtracer.materials.textures import CheckerTexture, PerlinTexture


class Scene(NamedTuple):
    world: Hittable
    camera: CameraBuilder


def _random_color(rng: random.Random, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(low, high), rng.uniform(low, high), rng.uniform(low, high))


def many_spheres(rng: random.Random) -> Scene:
    """Large ground, three feature spheres and a grid of small random ones."""
    material_ground = Lambertian(Vector3(0.5, 0.5, 0.5))
    material_dielectric = Dielectric(1.5)

    world = HittableList([
        Sphere.stationary(Vector3(0.0, -1000.0, 0.0), 1000.0, material_ground),
        Sphere.stationary(Vector3(0.0, 1.0, 0.0), 1.0, material_dielectric),
        Sphere.stationary(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))),
        Sphere.stationary(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)),
    ])

    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if center.distance(Vector3(4.0, 0.2, 0.0)) <= 0.9:
                continue

            choose_material = rng.random()
            if choose_material < 0.8:
                albedo = _random_color(rng) * _random_color(rng)
                motion = Vector3(0.0, rng.uniform(0.0, 0.5), 0.0)
                world.add(Sphere.moving(center, motion, 0.2, Lambertian(albedo)))
            elif choose_material < 0.95:
                albedo = _random_color(rng, 0.5, 1.0)
                world.add(Sphere.stationary(center, 0.2, Metal(albedo, rng.uniform(0.0, 0.5))))
            else:
                world.add(Sphere.stationary(center, 0.2, material_dielectric))

    camera = (CameraBuilder()
              .look_from(Vector3(13.0, 2.0, 3.0))
              .look_at(Vector3(0.0, 0.0, 0.0))
              .fov(20.0)
              .defocus_angle(0.6))
    return Scene(BVHNode.from_list(world, rng), camera)


def checker_spheres(rng: random.Random) -> Scene:
    checker = Lambertian(CheckerTexture.with_solid(
        0.8, Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9)))
    world = HittableList([
        Sphere.stationary(Vector3(0.0, -10.0, 0.0), 10.0, checker),
        Sphere.stationary(Vector3(0.0, 10.0, 0.0), 10.0, checker),
    ])
    camera = (CameraBuilder()
              .look_from(Vector3(13.0, 2.0, 3.0))
              .look_at(Vector3(0.0, 0.0, 0.0))
              .fov(20.0))
    return Scene(BVHNode.from_list(world, rng), camera)


def two_perlin_spheres(rng: random.Random) -> Scene:
    perlin = Lambertian(PerlinTexture(Perlin(rng), scale=4.0))
    world = HittableList([
        Sphere.stationary(Vector3(0.0, -1000.0, 0.0), 1000.0, perlin),
        Sphere.stationary(Vector3(0.0, 2.0, 0.0), 2.0, perlin),
    ])
    camera = (CameraBuilder()
              .look_from(Vector3(13.0, 2.0, 3.0))
              .look_at(Vector3(0.0, 0.0, 0.0))
              .fov(20.0))
    return Scene(world, camera)


def earth(rng: random.Random, texture_path: Optional[str] = None) -> Scene:
    if texture_path is None:
        raise ValueError("the earth scene needs a texture path")
    globe = Sphere.stationary(Vector3(0.0, 0.0, 0.0), 2.0, Lambertian(load_texture(texture_path)))
    camera = (CameraBuilder()
              .look_from(Vector3(0.0, 0.0, 12.0))
              .look_at(Vector3(0.0, 0.0, 0.0))
              .fov(20.0))
    return Scene(globe, camera)


def touching_spheres(rng: random.Random) -> Scene:
    r = math.cos(math.pi / 4.0)
    world = HittableList([
        Sphere.stationary(Vector3(-r, 0.0, -1.0), r, Lambertian(Vector3(0.0, 0.0, 1.0))),
        Sphere.stationary(Vector3(r, 0.0, -1.0), r, Lambertian(Vector3(1.0, 0.0, 0.0))),
    ])
    look_from = Vector3(0.0, 0.0, 0.0)
    look_at = Vector3(0.0, 0.0, -1.0)
    camera = (CameraBuilder()
              .look_from(look_from)
              .look_at(look_at)
              .focus_dist(look_from.distance(look_at)))
    return Scene(world, camera)


def _material_showcase() -> HittableList:
    glass = Dielectric(1.5)
    return HittableList([
        Sphere.stationary(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Vector3(0.8, 0.8, 0.0))),
        Sphere.stationary(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))),
        Sphere.stationary(Vector3(-1.0, 0.0, -1.0), 0.5, glass),
        # Negative radius turns the inner sphere into a hollow bubble.
        Sphere.stationary(Vector3(-1.0, 0.0, -1.0), -0.4, glass),
        Sphere.stationary(Vector3(1.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.0)),
    ])


def depth_of_field(rng: random.Random) -> Scene:
    camera = (CameraBuilder()
              .look_from(Vector3(-2.0, 2.0, 1.0))
              .look_at(Vector3(0.0, 0.0, -1.0))
              .fov(20.0)
              .defocus_angle(10.0)
              .focus_dist(3.4))
    return Scene(_material_showcase(), camera)


def distant_view(rng: random.Random) -> Scene:
    look_from = Vector3(-2.0, 2.0, 1.0)
    look_at = Vector3(0.0, 0.0, -1.0)
    camera = (CameraBuilder()
              .look_from(look_from)
              .look_at(look_at)
              .fov(90.0)
              .focus_dist(look_from.distance(look_at)))
    return Scene(_material_showcase(), camera)


def zoom_view(rng: random.Random) -> Scene:
    scene = distant_view(rng)
    return Scene(scene.world, scene.camera.fov(20.0))


SCENES: Dict[str, Callable[..., Scene]] = {
    "many_spheres": many_spheres,
    "checker_spheres": checker_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "touching_spheres": touching_spheres,
    "depth_of_field": depth_of_field,
    "distant_view": distant_view,
    "zoom_view": zoom_view,
}
