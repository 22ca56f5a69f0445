"""Unit tests for axis-aligned bounding boxes.

Tests cover:
- Union containment
- Slab hit/miss, including rays parallel to a slab
- Degenerate boxes and directions
"""

import math
import random

import pytest

from pathtracer.core.aabb import AABB, box_compare
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


def _random_box(rng):
    a = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
    b = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
    return AABB(
        Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)),
        Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z)),
    )


@pytest.fixture
def cube():
    return AABB(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 2.0, 2.0))


class TestSurroundingBox:
    def test_union_contains_both_inputs(self):
        rng = random.Random(3)
        for _ in range(200):
            a, b = _random_box(rng), _random_box(rng)
            union = AABB.surrounding_box(a, b)
            for axis in range(3):
                assert union.minimum[axis] <= min(a.minimum[axis], b.minimum[axis])
                assert union.maximum[axis] >= max(a.maximum[axis], b.maximum[axis])
            assert union.contains(a)
            assert union.contains(b)

    def test_empty_box_is_identity(self, cube):
        union = AABB.surrounding_box(AABB.empty(), cube)
        assert union.minimum == cube.minimum
        assert union.maximum == cube.maximum

    def test_axis_returns_range(self, cube):
        assert cube.axis(1) == (0.0, 2.0)


class TestSlabHit:
    def test_ray_toward_box_hits(self, cube):
        ray = Ray(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
        assert cube.hit(ray, 0.0, math.inf)

    def test_ray_pointing_away_misses(self, cube):
        ray = Ray(Vector3(-1.0, -1.0, -1.0), Vector3(-1.0, -1.0, -1.0))
        assert not cube.hit(ray, 0.0, math.inf)

    def test_range_excluding_box_misses(self, cube):
        ray = Ray(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
        # The box is entered at t=1.
        assert not cube.hit(ray, 0.0, 0.5)

    def test_parallel_ray_inside_slab_hits(self, cube):
        ray = Ray(Vector3(1.0, 1.0, -5.0), Vector3(0.0, 0.0, 1.0))
        assert cube.hit(ray, 0.0, math.inf)

    def test_parallel_ray_outside_slab_misses(self, cube):
        ray = Ray(Vector3(5.0, 1.0, -5.0), Vector3(0.0, 0.0, 1.0))
        assert not cube.hit(ray, 0.0, math.inf)

    def test_negative_zero_direction_component(self, cube):
        ray = Ray(Vector3(1.0, 1.0, -5.0), Vector3(-0.0, 0.0, 1.0))
        assert cube.hit(ray, 0.0, math.inf)

    def test_origin_on_slab_boundary_does_not_raise(self, cube):
        ray = Ray(Vector3(0.0, 1.0, -5.0), Vector3(0.0, 0.0, 1.0))
        assert cube.hit(ray, 0.0, math.inf)

    def test_zero_direction_does_not_raise(self, cube):
        ray = Ray(Vector3(5.0, 5.0, 5.0), Vector3(0.0, 0.0, 0.0))
        assert not cube.hit(ray, 0.0, math.inf)

    def test_flat_box_never_hit(self):
        flat = AABB(Vector3(0.0, 0.0, 0.0), Vector3(2.0, 0.0, 2.0))
        ray = Ray(Vector3(1.0, -1.0, 1.0), Vector3(0.0, 1.0, 0.0))
        assert not flat.hit(ray, 0.0, math.inf)

    def test_inverted_box_never_hit(self):
        inverted = AABB(Vector3(2.0, 2.0, 2.0), Vector3(0.0, 0.0, 0.0))
        assert not inverted.hit(Ray(Vector3(-1.0, 1.0, 1.0), Vector3(1.0, 0.0, 0.0)), 0.0, math.inf)
        assert not inverted.hit(Ray(Vector3(3.0, 1.0, 1.0), Vector3(-1.0, 0.0, 0.0)), 0.0, math.inf)

    def test_empty_box_never_hit(self):
        empty = AABB.empty()
        assert not empty.hit(Ray(Vector3.zero(), Vector3(1.0, 1.0, 1.0)), 0.0, math.inf)
        assert not empty.hit(Ray(Vector3.zero(), Vector3(-1.0, 0.0, 0.5)), 0.0, math.inf)

    def test_negative_direction_still_hits(self, cube):
        ray = Ray(Vector3(3.0, 3.0, 3.0), Vector3(-1.0, -1.0, -1.0))
        assert cube.hit(ray, 0.0, math.inf)

    def test_nan_origin_does_not_raise(self, cube):
        ray = Ray(Vector3(math.nan, 1.0, 1.0), Vector3(1.0, 0.0, 0.0))
        cube.hit(ray, 0.0, math.inf)


class TestBoxCompare:
    def test_orders_by_start(self):
        a = AABB(Vector3(0.0, 5.0, 0.0), Vector3(1.0, 6.0, 1.0))
        b = AABB(Vector3(2.0, 0.0, 2.0), Vector3(3.0, 1.0, 3.0))
        assert box_compare(a, b, 0)
        assert not box_compare(a, b, 1)
        assert box_compare(a, b, 2)
