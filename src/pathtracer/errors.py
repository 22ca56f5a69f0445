# errors.py
class RayTracerError(Exception):
    """Base class for errors raised by the tracer."""


class ImageDataMissingError(RayTracerError):
    """Raised when pixels are requested from an image that has not been rendered."""

    def __init__(self, message: str = "no image data: render the image before saving it"):
        super().__init__(message)


class TextureLoadError(RayTracerError, ValueError):
    """Raised when a bitmap file cannot be decoded into a texture."""
