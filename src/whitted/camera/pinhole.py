"""Pinhole camera mapping pixels to primary rays.

Every primary ray starts at the eye and passes through a point of an image
plane placed at image_plane_distance along -z. Pixel (i, j) of a
width x height image maps to normalized device coordinates

    nx = i / (width - 1) * 2 - 1
    ny = j / (height - 1) * 2 - 1

so both edges of the image land exactly on -1 and +1. There is no field of
view and no aspect-ratio correction: pixels are square in NDC space whatever
the image shape. Row j = 0 is ny = -1 and is the first row of the image
buffer.

The camera is passed explicitly into the render kernel; there is no global
camera state.

Example:
    >>> from whitted.camera.pinhole import PinholeCamera, pixel_to_ndc
    >>> camera = PinholeCamera()  # eye at the origin looking down -z
    >>> pixel_to_ndc(0, 0, 800, 600)
    (-1.0, -1.0)
"""

from dataclasses import dataclass

import taichi as ti

from whitted.core.ray import Ray, make_ray, vec3

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass
class PinholeCamera:
    """Configuration for the pinhole camera.

    Attributes:
        eye: Camera position in world space (x, y, z).
        image_plane_distance: Distance from the eye to the image plane along
            -z. The default of 1.0 gives ray directions (nx, ny, -1).
    """

    eye: tuple[float, float, float] = (0.0, 0.0, 0.0)
    image_plane_distance: float = 1.0


def validate_camera(camera: PinholeCamera) -> None:
    """Check that a camera configuration can produce rays.

    Raises:
        ValueError: If the eye is not a 3-vector or the image plane distance
            is not positive.
    """
    if len(camera.eye) != 3:
        raise ValueError(f"Camera eye must have 3 components, got {len(camera.eye)}")
    if camera.image_plane_distance <= 0.0:
        raise ValueError(
            f"Image plane distance must be positive, got {camera.image_plane_distance}"
        )


def pixel_to_ndc(pixel_i: int, pixel_j: int, width: int, height: int) -> tuple[float, float]:
    """Map a pixel to normalized device coordinates in [-1, 1].

    Python-side counterpart of the mapping used by get_ray().
    """
    nx = pixel_i / (width - 1) * 2.0 - 1.0
    ny = pixel_j / (height - 1) * 2.0 - 1.0
    return nx, ny


# =============================================================================
# Ray Generation (Taichi-compatible)
# =============================================================================


@ti.func
def get_ray(
    pixel_i: ti.i32,
    pixel_j: ti.i32,
    width: ti.i32,
    height: ti.i32,
    eye: vec3,
    image_plane_distance: ti.f32,
) -> Ray:
    """Generate the primary ray through pixel (pixel_i, pixel_j).

    Args:
        pixel_i: Pixel column (0 = left, nx = -1).
        pixel_j: Pixel row (0 = first buffer row, ny = -1).
        width: Image width in pixels (at least 2).
        height: Image height in pixels (at least 2).
        eye: Camera position.
        image_plane_distance: Distance of the image plane along -z.

    Returns:
        A Ray from the eye with normalized direction (nx, ny, -distance).
    """
    nx = ti.cast(pixel_i, ti.f32) / (width - 1) * 2.0 - 1.0
    ny = ti.cast(pixel_j, ti.f32) / (height - 1) * 2.0 - 1.0
    return make_ray(eye, vec3(nx, ny, -image_plane_distance))
