# core/aabb.py
import math
from typing import Tuple

from pathtracer.core.vector import Vector3


def _slab_quotient(numerator: float, direction: float) -> float:
    # Python raises on float division by zero; reproduce IEEE-754 instead.
    if direction == 0.0:
        if numerator == 0.0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, direction)
    return numerator / direction


class AABB:
    """
    Axis-aligned bounding box stored as per-axis ranges [minimum, maximum).
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @staticmethod
    def empty() -> "AABB":
        """A box that contains nothing and is the identity for surrounding_box()."""
        return AABB(Vector3.splat(math.inf), Vector3.splat(-math.inf))

    def axis(self, n: int) -> Tuple[float, float]:
        return self.minimum[n], self.maximum[n]

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: narrow [t_min, t_max] by the entry/exit interval of each axis.
        for a in range(3):
            origin = ray.origin[a]
            direction = ray.direction[a]
            t0 = _slab_quotient(self.minimum[a] - origin, direction)
            t1 = _slab_quotient(self.maximum[a] - origin, direction)
            # Swap on the direction sign (-0.0 included), never on the quotients,
            # so inverted and empty boxes keep an empty interval.
            if math.copysign(1.0, direction) < 0:
                t0, t1 = t1, t0
            # NaN quotients compare false and leave the interval untouched.
            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            self.minimum[a] <= other.minimum[a] and self.maximum[a] >= other.maximum[a]
            for a in range(3)
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"


def box_compare(box0: AABB, box1: AABB, axis: int) -> bool:
    """True when box0 starts before box1 along the given axis."""
    return box0.minimum[axis] < box1.minimum[axis]
