"""Preview module for image output.

Components:
    export: PPM and PNG image export

Example:
    >>> from whitted.preview import save_ppm, save_png
    >>> save_ppm(image, "output.ppm")
    >>> save_png(image, "output.png")
"""

from whitted.preview.export import (
    format_ppm,
    image_to_ppm_channels,
    image_to_uint8,
    save_png,
    save_ppm,
)

__all__ = [
    "format_ppm",
    "image_to_ppm_channels",
    "image_to_uint8",
    "save_ppm",
    "save_png",
]
