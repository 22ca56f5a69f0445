# materials/texture_loader.py
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from pathtracer.errors import TextureLoadError
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def decode_image(image_path) -> np.ndarray:
    """
    Decode an image file into a (height, width, 3) uint8 array.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        TextureLoadError: If the file cannot be decoded as an image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            pixels = np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise TextureLoadError(f"Error loading texture {image_path}: {e}") from e

    logger.debug("Decoded texture %s (%dx%d)", image_path, pixels.shape[1], pixels.shape[0])
    return pixels


def load_texture(image_path) -> ImageTexture:
    """
    Load an image file as a texture.
    """
    return ImageTexture(decode_image(image_path))


def create_image_material(image_path, material_class, **material_params):
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class taking a texture as its first argument (e.g. Lambertian)
        **material_params: Additional parameters for the material

    Returns:
        Material instance with the image texture
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
