"""Render one of the bundled scenes to a PPM file.

Usage:
    pathtracer SCENE [options]

Example:
    pathtracer many_spheres --width 200 --samples 20 --workers 4
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from pathtracer import config
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image import Image
from pathtracer.scenes import SCENES

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a bundled scene with the CPU path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("scene", choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("--width", type=_positive_int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("--aspect-ratio", type=_positive_float, default=16.0 / 9.0,
                        help="Width divided by height (default: 16/9)")
    parser.add_argument("--samples", type=_positive_int, default=100, help="Samples per pixel (default: 100)")
    parser.add_argument("--max-depth", type=_positive_int, default=50, help="Maximum bounces per path (default: 50)")
    parser.add_argument("--seed", type=int, default=0, help="Seed for scene and render randomness (default: 0)")
    parser.add_argument("--workers", type=_positive_int, default=1, help="Worker processes (default: 1)")
    parser.add_argument("--output-dir", type=str, default=None,
                        help=f"Output folder (default: {config.IMAGES_FOLDER})")
    parser.add_argument("--name", type=str, default=None, help="Output file name without extension")
    parser.add_argument("--texture", type=str, default=None, help="Bitmap for the earth scene")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    factory = SCENES[args.scene]
    kwargs = {"texture_path": args.texture} if args.scene == "earth" else {}
    try:
        scene = factory(random.Random(args.seed), **kwargs)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Could not build scene %s: %s", args.scene, e)
        return 2

    camera = (scene.camera
              .image(Image.from_width_aspect_ratio(args.width, args.aspect_ratio))
              .samples_per_pixel(args.samples)
              .max_depth(args.max_depth)
              .build())
    camera.render_image(scene.world, seed=args.seed, workers=args.workers)

    try:
        path = camera.save_image(args.name or args.scene, args.output_dir)
    except OSError as e:
        logger.error("Failed to save the image: %s", e)
        return 1
    print(f"Image saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
