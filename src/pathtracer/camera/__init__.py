from pathtracer.camera.builder import CameraBuilder
from pathtracer.camera.camera import Camera

__all__ = ["Camera", "CameraBuilder"]
