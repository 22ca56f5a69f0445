# camera/builder.py
from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.renderer.image import Image


class CameraBuilder:
    """
    Chainable camera configuration with sensible defaults.

        camera = (CameraBuilder()
                  .look_from(Vector3(13, 2, 3))
                  .fov(20.0)
                  .build())
    """
    def __init__(self):
        self._look_from = Vector3(0.0, 0.0, -1.0)
        self._look_at = Vector3(0.0, 0.0, 0.0)
        self._up = Vector3(0.0, 1.0, 0.0)
        self._fov = 90.0
        self._defocus_angle = 0.0
        self._focus_dist = 10.0
        self._samples_per_pixel = 100
        self._max_depth = 50
        self._image = None

    def look_from(self, look_from: Vector3) -> "CameraBuilder":
        self._look_from = look_from
        return self

    def look_at(self, look_at: Vector3) -> "CameraBuilder":
        self._look_at = look_at
        return self

    def up(self, up: Vector3) -> "CameraBuilder":
        self._up = up
        return self

    def fov(self, fov: float) -> "CameraBuilder":
        self._fov = fov
        return self

    def defocus_angle(self, defocus_angle: float) -> "CameraBuilder":
        self._defocus_angle = defocus_angle
        return self

    def focus_dist(self, focus_dist: float) -> "CameraBuilder":
        self._focus_dist = focus_dist
        return self

    def samples_per_pixel(self, samples_per_pixel: int) -> "CameraBuilder":
        self._samples_per_pixel = samples_per_pixel
        return self

    def max_depth(self, max_depth: int) -> "CameraBuilder":
        self._max_depth = max_depth
        return self

    def image(self, image: Image) -> "CameraBuilder":
        self._image = image
        return self

    def build(self) -> Camera:
        # A fresh Image per build, so cameras never share a pixel buffer.
        if self._image is not None:
            image = Image(self._image.width, self._image.height, self._image.max_color_value)
        else:
            image = Image.from_width_aspect_ratio(400, 16.0 / 9.0, 255)
        return Camera(
            self._look_from,
            self._look_at,
            self._up,
            self._fov,
            self._defocus_angle,
            self._focus_dist,
            self._samples_per_pixel,
            self._max_depth,
            image,
        )
