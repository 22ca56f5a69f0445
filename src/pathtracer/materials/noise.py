# materials/noise.py
"""
Perlin-style value noise.

The lattice tables are drawn once from the caller's generator; sampling is a
pure function of the tables and the point, compiled with numba.
"""
import math
import random

import numpy as np
from numba import njit

from pathtracer.core.vector import Vector3

POINT_COUNT = 256


@njit
def _trilinear_noise(perm_x, perm_y, perm_z, ranfloat, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    # Hermite smoothing removes the grid artifacts of plain linear blending.
    u = u * u * (3.0 - 2.0 * u)
    v = v * v * (3.0 - 2.0 * v)
    w = w * w * (3.0 - 2.0 * w)

    i = np.int64(fx)
    j = np.int64(fy)
    k = np.int64(fz)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                index = (perm_x[(i + di) & 255]
                         ^ perm_y[(j + dj) & 255]
                         ^ perm_z[(k + dk) & 255])
                weight = ((di * u + (1 - di) * (1.0 - u))
                          * (dj * v + (1 - dj) * (1.0 - v))
                          * (dk * w + (1 - dk) * (1.0 - w)))
                accum += weight * ranfloat[index]
    return accum


def _generate_permutation(rng: random.Random) -> np.ndarray:
    return np.array(rng.sample(range(POINT_COUNT), POINT_COUNT), dtype=np.int64)


class Perlin:
    """
    Three permutation tables and a table of random scalars in [0, 1).

    noise(p) returns a smooth value in [0, 1).
    """
    def __init__(self, rng: random.Random):
        self.ranfloat = np.array([rng.random() for _ in range(POINT_COUNT)], dtype=np.float64)
        self.perm_x = _generate_permutation(rng)
        self.perm_y = _generate_permutation(rng)
        self.perm_z = _generate_permutation(rng)

    def noise(self, p: Vector3) -> float:
        return float(_trilinear_noise(self.perm_x, self.perm_y, self.perm_z, self.ranfloat,
                                      float(p.x), float(p.y), float(p.z)))
