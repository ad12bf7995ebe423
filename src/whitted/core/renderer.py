"""Render configuration and the high-level renderer.

This module wraps the integrator behind a small object interface:
- RenderConfig gathers everything a render needs besides the scene
  (image size, light position, camera)
- Renderer runs the render, keeps the last image and saves it

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.core.renderer import RenderConfig, Renderer
    >>> from whitted.scene.three_spheres import create_three_spheres_scene
    >>>
    >>> scene, camera, light_position = create_three_spheres_scene()
    >>> renderer = Renderer(RenderConfig(camera=camera, light_position=light_position))
    >>> renderer.render()
    >>> renderer.save_ppm("output.ppm")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import numpy.typing as npt

from whitted.camera.pinhole import PinholeCamera, validate_camera
from whitted.core.integrator import render_image
from whitted.preview.export import save_png, save_ppm


@dataclass
class RenderConfig:
    """Parameters of a render call.

    Attributes:
        width: Image width in pixels (at least 2).
        height: Image height in pixels (at least 2).
        light_position: Position of the single point light.
        camera: Camera producing the primary rays.
    """

    width: int = 800
    height: int = 600
    light_position: tuple[float, float, float] = (5.0, 5.0, -5.0)
    camera: PinholeCamera = field(default_factory=PinholeCamera)

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            ValueError: If the image is smaller than 2x2, the light position
                is not a 3-vector, or the camera is invalid.
        """
        if self.width < 2 or self.height < 2:
            raise ValueError(
                f"Image dimensions must be at least 2x2, got {self.width}x{self.height}"
            )
        if len(self.light_position) != 3:
            raise ValueError(
                f"Light position must have 3 components, got {len(self.light_position)}"
            )
        validate_camera(self.camera)


def render_scene(config: RenderConfig) -> npt.NDArray[np.float32]:
    """Render the current scene with the given configuration.

    Returns:
        Float32 array of shape (height, width, 3), unclamped.
    """
    config.validate()
    return render_image(config.camera, config.width, config.height, config.light_position)


class Renderer:
    """Renderer holding a configuration and the most recent image.

    Attributes:
        config: The render configuration.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the renderer.

        Args:
            config: Render configuration. Defaults to RenderConfig().

        Raises:
            ValueError: If the configuration is invalid.
        """
        self.config = config if config is not None else RenderConfig()
        self.config.validate()
        self._image: npt.NDArray[np.float32] | None = None
        self._render_count = 0

    @property
    def width(self) -> int:
        """Get the image width."""
        return self.config.width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self.config.height

    @property
    def render_count(self) -> int:
        """Number of completed render() calls."""
        return self._render_count

    @property
    def image(self) -> npt.NDArray[np.float32]:
        """The most recently rendered image.

        Raises:
            RuntimeError: If render() has not been called yet.
        """
        if self._image is None:
            raise RuntimeError("Nothing rendered yet. Call render() first.")
        return self._image

    def render(self) -> npt.NDArray[np.float32]:
        """Render the current scene into a new image buffer.

        Returns:
            Float32 array of shape (height, width, 3), unclamped.
        """
        self._image = render_scene(self.config)
        self._render_count += 1
        return self._image

    def save_ppm(self, filepath: str | Path) -> Path:
        """Save the last image as plain-text PPM.

        Raises:
            RuntimeError: If render() has not been called yet.
        """
        return save_ppm(self.image, filepath)

    def save_png(self, filepath: str | Path) -> Path:
        """Save the last image as PNG.

        Raises:
            RuntimeError: If render() has not been called yet.
        """
        return save_png(self.image, filepath)

    def save(self, filepath: str | Path) -> Path:
        """Save the last image, choosing PNG for a .png suffix and PPM otherwise."""
        if Path(filepath).suffix.lower() == ".png":
            return self.save_png(filepath)
        return self.save_ppm(filepath)
