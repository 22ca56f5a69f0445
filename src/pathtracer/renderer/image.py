# renderer/image.py
from typing import Optional

import numpy as np

from pathtracer import config
from pathtracer.errors import ImageDataMissingError


class Image:
    """
    Output raster: dimensions, color resolution and, once rendered,
    an integer array of shape (height, width, 3).
    """
    def __init__(self, width: int, height: int, max_color_value: int = config.COLOR_RESOLUTION):
        if width <= 0 or height <= 0:
            raise ValueError(f"image dimensions must be positive, got {width}x{height}")
        if max_color_value <= 0:
            raise ValueError(f"max_color_value must be positive, got {max_color_value}")
        self.width = int(width)
        self.height = int(height)
        self.max_color_value = int(max_color_value)
        self.data: Optional[np.ndarray] = None

    @classmethod
    def from_width_height(cls, width: int, height: int,
                          max_color_value: int = config.COLOR_RESOLUTION) -> "Image":
        return cls(width, height, max_color_value)

    @classmethod
    def from_width_aspect_ratio(cls, width: int, aspect_ratio: float,
                                max_color_value: int = config.COLOR_RESOLUTION) -> "Image":
        height = max(1, int(width / aspect_ratio))
        return cls(width, height, max_color_value)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def pixels(self) -> np.ndarray:
        """The rendered buffer; raises ImageDataMissingError before rendering."""
        if self.data is None:
            raise ImageDataMissingError()
        return self.data

    def set_data(self, data: np.ndarray):
        if data.shape != (self.height, self.width, 3):
            raise ValueError(
                f"pixel buffer shape {data.shape} does not match image "
                f"({self.height}, {self.width}, 3)"
            )
        self.data = data

    def __repr__(self) -> str:
        state = "rendered" if self.has_data else "empty"
        return f"Image({self.width}x{self.height}, max={self.max_color_value}, {state})"
