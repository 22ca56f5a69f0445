"""Image container, tone mapping, row scheduling and the PPM writer."""

from pathtracer.renderer.image import Image
from pathtracer.renderer.ppm_writer import format_ppm, write_ppm
from pathtracer.renderer.raytracer import render_rows, row_seeds
from pathtracer.renderer.tone_mapping import linear_to_gamma, quantize

__all__ = [
    "Image",
    "format_ppm",
    "linear_to_gamma",
    "quantize",
    "render_rows",
    "row_seeds",
    "write_ppm",
]
