"""Camera module for primary ray generation.

Components:
    pinhole: Fixed-eye camera with a plain NDC pixel mapping

Ray generation uses normalized device coordinates:
    nx in [-1, 1]: left to right across image
    ny in [-1, 1]: first to last buffer row
"""

from .pinhole import PinholeCamera, get_ray, pixel_to_ndc, validate_camera

__all__ = [
    "PinholeCamera",
    "get_ray",
    "pixel_to_ndc",
    "validate_camera",
]
