# renderer/ppm_writer.py
"""
Plain-text P3 (PPM) writer for rendered images.

IO errors are not caught here; they reach the caller unchanged.
"""
import logging
from pathlib import Path
from typing import Union

from pathtracer.renderer.image import Image

logger = logging.getLogger(__name__)


def format_ppm(image: Image) -> str:
    """
    Serialize a rendered image as P3 text, one "r g b" line per pixel.

    Raises:
        ImageDataMissingError: If the image has not been rendered yet
    """
    pixels = image.pixels().reshape(-1, 3)
    body = "\n".join(f"{r} {g} {b}" for r, g, b in pixels.tolist())
    return f"P3\n{image.width} {image.height}\n{image.max_color_value}\n{body}\n"


def write_ppm(image: Image, path: Union[str, Path]) -> Path:
    """
    Write the image to path, creating parent folders as needed.
    """
    text = format_ppm(image)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="ascii")
    logger.info("Wrote %dx%d image to %s", image.width, image.height, path)
    return path
