"""Configuration for pathtracer, overridable through environment variables."""

import os
from pathlib import Path


def _env_int_at_least(name: str, default: int, minimum: int = 1) -> int:
    """Integer setting from the environment, raised to minimum if smaller."""
    return max(minimum, int(os.getenv(name, str(default))))


# Output
IMAGES_FOLDER = Path(os.getenv("PATHTRACER_IMAGES_DIR", "images"))
COLOR_RESOLUTION = 255

# Logging settings
LOG_LEVEL = os.getenv("PATHTRACER_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("PATHTRACER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Rendering
T_MIN = 0.001  # lower bound of every intersection query, avoids shadow acne
PROGRESS_EVERY_ROWS = _env_int_at_least("PATHTRACER_PROGRESS_EVERY_ROWS", 25)
