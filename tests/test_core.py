"""Unit tests for the vector, ray and sampling helpers."""

import math
import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.utils import (
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
)
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3


class TestVector3:
    def test_cross_follows_right_hand_rule(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)

    def test_normalize_zero_vector_stays_zero(self):
        assert Vector3.zero().normalize() == Vector3.zero()

    def test_component_wise_product(self):
        assert Vector3(1.0, 2.0, 3.0) * Vector3(2.0, 0.5, 0.0) == Vector3(2.0, 1.0, 0.0)

    def test_axis_indexing(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert [v[0], v[1], v[2]] == [1.0, 2.0, 3.0]
        with pytest.raises(IndexError):
            v[3]

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0.0).near_zero()
        assert not Vector3(1e-7, 0.0, 0.0).near_zero()

    def test_lerp_endpoints(self):
        a = Vector3(1.0, 1.0, 1.0)
        b = Vector3(0.5, 0.7, 1.0)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b


class TestRay:
    def test_at(self):
        ray = Ray(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 2.0, 0.0))
        assert ray.at(1.5) == Vector3(1.0, 3.0, 0.0)

    def test_time_defaults_to_zero(self):
        assert Ray(Vector3.zero(), Vector3(0.0, 0.0, 1.0)).time == 0.0


class TestSampling:
    def test_unit_sphere_samples_are_inside(self, rng):
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vectors_have_unit_length(self, rng):
        for _ in range(500):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk_samples_lie_in_xy_plane(self, rng):
        for _ in range(500):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.x * p.x + p.y * p.y < 1.0

    def test_same_seed_same_samples(self):
        a = [random_unit_vector(random.Random(7)) for _ in range(3)]
        b = [random_unit_vector(random.Random(7)) for _ in range(3)]
        assert a == b


class TestReflectRefract:
    def test_reflect_flips_normal_component(self):
        v = Vector3(1.0, -1.0, 0.0)
        n = Vector3(0.0, 1.0, 0.0)
        assert reflect(v, n) == Vector3(1.0, 1.0, 0.0)

    def test_refract_with_unit_ratio_passes_straight_through(self):
        v = Vector3(1.0, -1.0, 0.0).normalize()
        n = Vector3(0.0, 1.0, 0.0)
        out = refract(v, n, 1.0)
        assert out.x == pytest.approx(v.x)
        assert out.y == pytest.approx(v.y)

    def test_refract_obeys_snell(self):
        v = Vector3(math.sin(0.4), -math.cos(0.4), 0.0)
        n = Vector3(0.0, 1.0, 0.0)
        ratio = 1.0 / 1.5
        out = refract(v, n, ratio)
        assert out.length() == pytest.approx(1.0)
        assert out.x == pytest.approx(ratio * math.sin(0.4))
        assert out.y < 0.0


class TestUV:
    def test_clamped(self):
        assert UV(-1.0, 2.0).clamped() == UV(0.0, 1.0)
        assert UV(0.25, 0.75).clamped() == UV(0.25, 0.75)
