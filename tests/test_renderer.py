"""Tests for RenderConfig and the Renderer wrapper.

Note: Imports are done inside test methods to avoid Taichi initialization issues.
"""

import numpy as np
import pytest


class TestRenderConfig:
    """Test render configuration validation."""

    def test_defaults(self):
        from whitted.camera.pinhole import PinholeCamera
        from whitted.core.renderer import RenderConfig

        config = RenderConfig()
        assert (config.width, config.height) == (800, 600)
        assert config.light_position == (5.0, 5.0, -5.0)
        assert config.camera == PinholeCamera()
        config.validate()

    @pytest.mark.parametrize("width, height", [(1, 600), (800, 1), (0, 0), (-4, 3)])
    def test_rejects_small_images(self, width, height):
        from whitted.core.renderer import RenderConfig

        with pytest.raises(ValueError, match="at least 2x2"):
            RenderConfig(width=width, height=height).validate()

    def test_rejects_bad_light(self):
        from whitted.core.renderer import RenderConfig

        with pytest.raises(ValueError, match="Light position"):
            RenderConfig(light_position=(1.0, 2.0)).validate()

    def test_rejects_bad_camera(self):
        from whitted.camera.pinhole import PinholeCamera
        from whitted.core.renderer import RenderConfig

        with pytest.raises(ValueError, match="Image plane distance"):
            RenderConfig(camera=PinholeCamera(image_plane_distance=-1.0)).validate()


class TestRenderer:
    """Test the Renderer object."""

    def test_invalid_config_raises_on_construction(self):
        from whitted.core.renderer import RenderConfig, Renderer

        with pytest.raises(ValueError):
            Renderer(RenderConfig(width=1))

    def test_image_before_render_raises(self):
        from whitted.core.renderer import RenderConfig, Renderer

        renderer = Renderer(RenderConfig(width=4, height=3))
        assert renderer.render_count == 0
        with pytest.raises(RuntimeError, match="Nothing rendered yet"):
            _ = renderer.image

    def test_save_before_render_raises(self, tmp_path):
        from whitted.core.renderer import RenderConfig, Renderer

        renderer = Renderer(RenderConfig(width=4, height=3))
        with pytest.raises(RuntimeError):
            renderer.save(tmp_path / "out.ppm")

    def test_render(self):
        from whitted.core.renderer import RenderConfig, Renderer

        renderer = Renderer(RenderConfig(width=8, height=6))
        image = renderer.render()

        assert image.shape == (6, 8, 3)
        assert image.dtype == np.float32
        assert renderer.image is image
        assert renderer.render_count == 1
        assert (renderer.width, renderer.height) == (8, 6)

    def test_render_reflects_scene_changes(self):
        """Test each render reads the scene as it is at call time."""
        from whitted.core.renderer import RenderConfig, Renderer
        from whitted.scene.manager import SceneManager

        scene = SceneManager()
        renderer = Renderer(RenderConfig(width=9, height=9, light_position=(0.0, 0.0, 0.0)))
        empty = renderer.render().copy()

        scene.add_sphere((0, 0, -5), 1.0, (1, 0, 0))
        with_sphere = renderer.render()

        assert renderer.render_count == 2
        assert not np.array_equal(empty[4, 4], with_sphere[4, 4])
        assert with_sphere[4, 4] == pytest.approx((1.1, 0.0, 0.0), abs=1e-5)

    def test_save_dispatches_on_suffix(self, tmp_path):
        from whitted.core.renderer import RenderConfig, Renderer

        renderer = Renderer(RenderConfig(width=4, height=3))
        renderer.render()

        ppm = renderer.save(tmp_path / "out.ppm")
        png = renderer.save(tmp_path / "out.PNG")
        other = renderer.save(tmp_path / "out.txt")

        assert ppm.read_text(encoding="ascii").startswith("P3\n4 3\n255\n")
        assert png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
        assert other.read_text(encoding="ascii").startswith("P3\n")

    def test_render_scene_function(self):
        from whitted.core.renderer import RenderConfig, render_scene

        image = render_scene(RenderConfig(width=3, height=2))
        assert image.shape == (2, 3, 3)
