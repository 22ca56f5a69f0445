# renderer/tone_mapping.py
import numpy as np


def linear_to_gamma(linear: np.ndarray) -> np.ndarray:
    """
    Gamma 2.0 encoding (component-wise square root) of linear colors.
    """
    return np.sqrt(np.maximum(linear, 0.0))


def quantize(accumulated: np.ndarray, samples_per_pixel: int, max_color_value: int) -> np.ndarray:
    """
    Turn summed sample colors into integer pixel values.

    The sum is averaged over the sample count, gamma-corrected, clamped to
    [0, 0.999], scaled by the color resolution and truncated. NaNs from
    degenerate geometry become black.
    """
    averaged = np.asarray(accumulated, dtype=np.float64) / samples_per_pixel
    averaged = np.nan_to_num(averaged, nan=0.0, posinf=1.0, neginf=0.0)
    mapped = linear_to_gamma(averaged).clip(0.0, 0.999)
    return (mapped * max_color_value).astype(np.int64)
