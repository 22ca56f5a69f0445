"""Pytest configuration for pathtracer tests.

Shared fixtures: a seeded generator and small ready-made scenes.
"""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal


@pytest.fixture
def rng():
    """A deterministic generator, fresh for every test."""
    return random.Random(1234)


@pytest.fixture
def grey():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def two_sphere_world():
    """Large ground sphere plus one small sphere resting on it."""
    ground = Lambertian(Vector3(0.8, 0.8, 0.0))
    return HittableList([
        Sphere.stationary(Vector3(0.0, -100.5, -1.0), 100.0, ground),
        Sphere.stationary(Vector3(0.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.1)),
    ])
