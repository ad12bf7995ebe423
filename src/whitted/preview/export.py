"""Image export utilities for rendered images.

The renderer produces unclamped linear float colors. This module turns them
into files.

Supported formats:
    - PPM (plain-text P3), the renderer's native output
    - PNG (8-bit via Pillow)

PPM channels are converted as int(min(1.0, c) * 255): only the upper end is
clamped, and the conversion truncates like an integer cast.

Example:
    >>> from whitted.preview.export import save_ppm
    >>> from whitted.core.renderer import render_scene, RenderConfig
    >>>
    >>> image = render_scene(RenderConfig(width=800, height=600))
    >>> save_ppm(image, "output.ppm")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

PPM_MAX_VALUE = 255


def _check_image_shape(image: npt.NDArray[np.floating]) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {image.shape}")


def image_to_ppm_channels(image: npt.NDArray[np.floating]) -> npt.NDArray[np.int64]:
    """Convert float colors to PPM channel values.

    Args:
        image: Image array of shape (H, W, 3).

    Returns:
        Integer array of shape (H, W, 3) with int(min(1.0, c) * 255) per
        channel. Negative inputs are not clamped.

    Raises:
        ValueError: If the image does not have shape (H, W, 3).
    """
    _check_image_shape(image)
    clamped = np.minimum(image.astype(np.float32), np.float32(1.0))
    return (clamped * np.float32(PPM_MAX_VALUE)).astype(np.int64)


def format_ppm(image: npt.NDArray[np.floating]) -> str:
    """Serialize an image as plain-text PPM (P3).

    The header is "P3\\n<width> <height>\\n255\\n", followed by one
    "r g b" line per pixel, rows in buffer order, left to right.

    Args:
        image: Image array of shape (H, W, 3).

    Returns:
        The PPM document, 3 + H * W lines, newline terminated.
    """
    channels = image_to_ppm_channels(image)
    height, width, _ = channels.shape

    lines = ["P3", f"{width} {height}", str(PPM_MAX_VALUE)]
    lines.extend(f"{r} {g} {b}" for r, g, b in channels.reshape(-1, 3).tolist())
    return "\n".join(lines) + "\n"


def save_ppm(image: npt.NDArray[np.floating], filepath: str | Path) -> Path:
    """Save an image as a plain-text PPM file.

    Args:
        image: Image array of shape (H, W, 3).
        filepath: Output file path.

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.write_text(format_ppm(image), encoding="ascii")
    return path


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a float image to uint8 for display/export.

    Unlike the PPM conversion, both ends are clamped to [0, 1].

    Args:
        image: Image array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 3).
    """
    _check_image_shape(image)
    clamped = np.clip(image.astype(np.float32), 0.0, 1.0)
    return (clamped * 255).astype(np.uint8)


def save_png(image: npt.NDArray[np.floating], filepath: str | Path) -> Path:
    """Save an image as an 8-bit PNG file using Pillow.

    Args:
        image: Image array of shape (H, W, 3).
        filepath: Output file path (should end in .png).

    Returns:
        The path written.
    """
    path = Path(filepath)
    pil_image = PILImage.fromarray(image_to_uint8(image))
    pil_image.save(path)
    return path
