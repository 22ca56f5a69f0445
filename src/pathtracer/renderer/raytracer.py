# renderer/raytracer.py
"""
Row scheduling for the CPU path tracer.

Each image row is traced with its own random.Random, seeded from a
numpy SeedSequence spawned off the render seed. Rows never share a
generator, so the result only depends on the seed, not on how rows are
spread over worker processes.
"""
import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import List, Tuple

import numpy as np

from pathtracer import config

logger = logging.getLogger(__name__)

# Per-process scene state, installed by the pool initializer.
_worker_camera = None
_worker_world = None


def row_seeds(seed: int, height: int) -> List[int]:
    """One independent integer seed per image row."""
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


def _init_worker(camera, world):
    global _worker_camera, _worker_world
    _worker_camera = camera
    _worker_world = world


def _render_row_in_worker(task: Tuple[int, int]) -> Tuple[int, np.ndarray]:
    y, seed = task
    return y, _worker_camera.render_row(y, _worker_world, random.Random(seed))


def render_rows(camera, world, seed: int = 0, workers: int = 1) -> np.ndarray:
    """
    Trace every row of the camera's image and return the per-pixel sums of
    sample colors as a float array of shape (height, width, 3).
    """
    width, height = camera.image.width, camera.image.height
    seeds = row_seeds(seed, height)
    accumulated = np.zeros((height, width, 3), dtype=np.float64)
    report_every = max(1, config.PROGRESS_EVERY_ROWS)

    if workers <= 1:
        for y, row_seed in enumerate(seeds):
            accumulated[y] = camera.render_row(y, world, random.Random(row_seed))
            if (y + 1) % report_every == 0 or y + 1 == height:
                logger.debug("Rendered %d/%d rows", y + 1, height)
        return accumulated

    tasks = list(enumerate(seeds))
    chunksize = max(1, height // (workers * 4))
    with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                             initargs=(camera, world)) as pool:
        for done, (y, row) in enumerate(pool.map(_render_row_in_worker, tasks, chunksize=chunksize), 1):
            accumulated[y] = row
            if done % report_every == 0 or done == height:
                logger.debug("Rendered %d/%d rows", done, height)
    return accumulated
