# materials/textures.py
import math
from typing import Union

import numpy as np

from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.materials.noise import Perlin


class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV, point: Vector3) -> Vector3:
        """Sample the texture at the given surface coordinates and world position."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        return self.color


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    return albedo


class CheckerTexture(Texture):
    """
    A 3D checker pattern in world space.

    Cells are cubes of side `scale`; the parity of the summed cell indices
    picks the even or odd sub-texture, which may itself be any texture.
    """
    def __init__(self, scale: float, even: Union[Vector3, Texture], odd: Union[Vector3, Texture]):
        if scale == 0:
            raise ValueError("checker scale must be non-zero")
        self.scale = scale
        self.inv_scale = 1.0 / scale
        self.even = as_texture(even)
        self.odd = as_texture(odd)

    @classmethod
    def with_solid(cls, scale: float, even: Vector3, odd: Vector3) -> "CheckerTexture":
        return cls(scale, SolidTexture(even), SolidTexture(odd))

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        x = math.floor(point.x * self.inv_scale)
        y = math.floor(point.y * self.inv_scale)
        z = math.floor(point.z * self.inv_scale)
        if (x + y + z) % 2 == 0:
            return self.even.sample(uv, point)
        return self.odd.sample(uv, point)


class ImageTexture(Texture):
    """
    A texture backed by a decoded bitmap of shape (height, width, 3).

    Row 0 of the bitmap is the top of the image, so v is flipped.
    """
    def __init__(self, pixels: np.ndarray):
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError(f"expected a non-empty (height, width, 3) bitmap, got shape {pixels.shape}")
        self.height, self.width = pixels.shape[:2]
        # Normalize byte channels to [0,1] once, up front.
        self.data = pixels.astype(np.float64) * (1.0 / 255.0)

    @classmethod
    def from_file(cls, image_path) -> "ImageTexture":
        from pathtracer.materials.texture_loader import load_texture

        return load_texture(image_path)

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        uv = uv.clamped()
        x = min(int(uv.u * self.width), self.width - 1)
        y = min(int((1.0 - uv.v) * self.height), self.height - 1)
        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))


class PerlinTexture(Texture):
    """Grey-scale Perlin noise evaluated at the scaled world position."""
    def __init__(self, noise: Perlin, scale: float = 1.0):
        self.noise = noise
        self.scale = scale

    def sample(self, uv: UV, point: Vector3) -> Vector3:
        return Vector3.splat(self.noise.noise(point * self.scale))
