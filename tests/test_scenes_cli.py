"""Tests for the bundled scenes, the command line entry point and logging setup."""

import logging
import random

import pytest

from pathtracer.geometry.bvh import BVHNode
from pathtracer.logging_config import ROOT_LOGGER_NAME, setup_logging
from pathtracer.main import main, parse_args
from pathtracer.renderer.image import Image
from pathtracer.scenes import SCENES, Scene, checker_spheres, earth, many_spheres, two_perlin_spheres


def _tiny_render(scene):
    camera = (scene.camera
              .image(Image.from_width_height(6, 4))
              .samples_per_pixel(1)
              .max_depth(4)
              .build())
    return camera.render_image(scene.world, seed=0).pixels()


class TestScenes:
    @pytest.mark.parametrize("name", sorted(set(SCENES) - {"earth"}))
    def test_scene_builds(self, name):
        scene = SCENES[name](random.Random(0))
        assert isinstance(scene, Scene)
        assert scene.camera.build().image.width == 400

    def test_many_spheres_uses_a_bvh(self):
        scene = many_spheres(random.Random(0))
        assert isinstance(scene.world, BVHNode)
        # Ground plus three feature spheres plus the random grid.
        assert len(scene.world.primitives()) > 4

    def test_many_spheres_is_deterministic(self):
        a = many_spheres(random.Random(3)).world.primitives()
        b = many_spheres(random.Random(3)).world.primitives()
        assert [s.center for s in a] == [s.center for s in b]

    @pytest.mark.parametrize("factory", [checker_spheres, two_perlin_spheres])
    def test_tiny_render(self, factory):
        pixels = _tiny_render(factory(random.Random(0)))
        assert pixels.shape == (4, 6, 3)
        assert pixels.min() >= 0
        assert pixels.max() <= 255

    def test_earth_needs_a_texture(self):
        with pytest.raises(ValueError):
            earth(random.Random(0))


class TestCommandLine:
    def test_defaults(self):
        args = parse_args(["touching_spheres"])
        assert args.width == 400
        assert args.samples == 100
        assert args.max_depth == 50
        assert args.workers == 1

    def test_unknown_scene_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["no_such_scene"])

    @pytest.mark.parametrize("option, value", [
        ("--width", "0"),
        ("--width", "-3"),
        ("--samples", "0"),
        ("--max-depth", "-1"),
        ("--workers", "0"),
        ("--aspect-ratio", "0"),
    ])
    def test_non_positive_sizes_rejected(self, tmp_path, capsys, option, value):
        with pytest.raises(SystemExit) as excinfo:
            main(["touching_spheres", option, value, "--output-dir", str(tmp_path)])
        assert excinfo.value.code == 2
        assert option in capsys.readouterr().err
        assert not list(tmp_path.iterdir())

    def test_renders_to_output_dir(self, tmp_path, capsys):
        code = main(["touching_spheres", "--width", "8", "--samples", "1", "--max-depth", "2",
                     "--output-dir", str(tmp_path), "--name", "touch", "--log-level", "WARNING"])
        assert code == 0

        output = tmp_path / "touch.ppm"
        assert output.read_text().startswith("P3\n8 4\n255\n")
        assert str(output) in capsys.readouterr().out

    def test_earth_without_texture_fails(self, tmp_path):
        code = main(["earth", "--width", "4", "--output-dir", str(tmp_path), "--log-level", "ERROR"])
        assert code == 2
        assert not list(tmp_path.iterdir())

    def test_earth_with_missing_texture_fails(self, tmp_path):
        code = main(["earth", "--texture", str(tmp_path / "missing.jpg"),
                     "--output-dir", str(tmp_path), "--log-level", "ERROR"])
        assert code == 2

    def test_unwritable_output_dir(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        code = main(["touching_spheres", "--width", "4", "--samples", "1", "--max-depth", "1",
                     "--output-dir", str(blocker), "--log-level", "CRITICAL"])
        assert code == 1


class TestLogging:
    def test_setup_is_idempotent(self):
        logger = setup_logging("DEBUG")
        handlers = len(logger.handlers)
        again = setup_logging("WARNING")

        assert again is logger
        assert len(again.handlers) == handlers
        assert logger.level == logging.WARNING
        assert logger.name == ROOT_LOGGER_NAME
