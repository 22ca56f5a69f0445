# camera/camera.py
import logging
import math
import random
import time
from pathlib import Path
from typing import Optional, Union

import numpy as np

from pathtracer import config
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.image import Image
from pathtracer.renderer.ppm_writer import write_ppm
from pathtracer.renderer.raytracer import render_rows
from pathtracer.renderer.tone_mapping import quantize

logger = logging.getLogger(__name__)

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)


class Camera:
    """
    Look-at camera with optional thin-lens depth of field.

    All derived geometry is computed once here; rendering only writes the
    pixel buffer of the owned Image.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, up: Vector3,
                 fov: float, defocus_angle: float, focus_dist: float,
                 samples_per_pixel: int, max_depth: int, image: Image):
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        self.position = look_from
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist
        self.fov = fov
        self.image = image

        # Orthonormal basis: w points backwards, u right, v up.
        self.w = (look_from - look_at).normalize()
        self.u = up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        h = math.tan(math.radians(fov) / 2.0)
        viewport_height = 2.0 * h * focus_dist
        viewport_width = viewport_height * image.aspect_ratio

        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / image.width
        self.pixel_delta_v = viewport_v / image.height

        viewport_upper_left = (self.position
                               - self.w * focus_dist
                               - viewport_u / 2.0
                               - viewport_v / 2.0)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = focus_dist * math.tan(math.radians(defocus_angle / 2.0))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    @property
    def defocus_enabled(self) -> bool:
        return self.defocus_angle > 0

    def get_ray(self, x: int, y: int, rng: random.Random) -> Ray:
        """Jittered ray through pixel (x, y) at a random shutter time."""
        pixel_center = self.pixel00_loc + self.pixel_delta_u * x + self.pixel_delta_v * y
        px = rng.random() - 0.5
        py = rng.random() - 0.5
        pixel_sample = pixel_center + self.pixel_delta_u * px + self.pixel_delta_v * py

        ray_origin = self.defocus_disk_sample(rng) if self.defocus_enabled else self.position
        ray_direction = pixel_sample - ray_origin
        return Ray(ray_origin, ray_direction, rng.random())

    def defocus_disk_sample(self, rng: random.Random) -> Vector3:
        p = random_in_unit_disk(rng)
        return self.position + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def ray_color(self, ray: Ray, depth: int, world: Hittable, rng: random.Random) -> Vector3:
        if depth <= 0:
            return BLACK

        rec = world.hit(ray, config.T_MIN, math.inf)
        if rec is not None:
            scattered = rec.material.scatter(ray, rec, rng)
            if scattered is None:
                return BLACK
            return scattered.attenuation * self.ray_color(scattered.ray, depth - 1, world, rng)

        # Sky: vertical white-to-blue gradient.
        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return WHITE.lerp(SKY_BLUE, a)

    def render_row(self, y: int, world: Hittable, rng: random.Random) -> np.ndarray:
        """Sum of samples_per_pixel sample colors for every pixel in row y."""
        row = np.zeros((self.image.width, 3), dtype=np.float64)
        for x in range(self.image.width):
            r = g = b = 0.0
            for _ in range(self.samples_per_pixel):
                color = self.ray_color(self.get_ray(x, y, rng), self.max_depth, world, rng)
                r += color.x
                g += color.y
                b += color.z
            row[x] = (r, g, b)
        return row

    def render_image(self, world: Hittable, seed: int = 0, workers: int = 1) -> Image:
        """
        Render the world into the camera's image.

        The same seed always produces the same pixels, whatever the number
        of worker processes.
        """
        logger.info("Rendering %dx%d, %d samples/pixel, max depth %d, %d worker(s)",
                    self.image.width, self.image.height, self.samples_per_pixel,
                    self.max_depth, workers)
        start = time.perf_counter()
        accumulated = render_rows(self, world, seed=seed, workers=workers)
        self.image.set_data(quantize(accumulated, self.samples_per_pixel, self.image.max_color_value))
        logger.info("Rendered in %.2fs", time.perf_counter() - start)
        return self.image

    def save_image(self, name: str, folder: Optional[Union[str, Path]] = None) -> Path:
        """Write the rendered image to <folder>/<name>.ppm."""
        folder = Path(folder) if folder is not None else config.IMAGES_FOLDER
        return write_ppm(self.image, folder / f"{name}.ppm")

    def __getstate__(self):
        # Workers never need a previous render's pixels.
        state = self.__dict__.copy()
        if self.image.has_data:
            image = Image(self.image.width, self.image.height, self.image.max_color_value)
            state["image"] = image
        return state
