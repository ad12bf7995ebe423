"""Three-sphere reference scene.

Three unit spheres side by side at z = -5, seen from the origin:
- center (0, 0, -5): red, reflectivity 0.5
- right (2, 0, -5): green, reflectivity 0.5, refractive index 1.5 (glass)
- left (-2, 0, -5): blue, reflectivity 0.5

The point light sits at (5, 5, -5), level with the spheres and off to the
upper right.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.scene.three_spheres import create_three_spheres_scene
    >>> scene, camera, light_position = create_three_spheres_scene()
"""

from dataclasses import dataclass

from whitted.camera.pinhole import PinholeCamera
from whitted.scene.manager import SceneManager


@dataclass
class ThreeSpheresParams:
    """Parameters for the three-sphere scene.

    Attributes:
        center_color: RGB base color of the middle sphere.
        right_color: RGB base color of the glass sphere on the right.
        left_color: RGB base color of the left sphere.
        reflectivity: Reflectivity shared by all three spheres.
        glass_refractive_index: Refractive index of the right sphere.
        light_position: Position of the point light.
    """

    center_color: tuple[float, float, float] = (1.0, 0.0, 0.0)
    right_color: tuple[float, float, float] = (0.0, 1.0, 0.0)
    left_color: tuple[float, float, float] = (0.0, 0.0, 1.0)
    reflectivity: float = 0.5
    glass_refractive_index: float = 1.5
    light_position: tuple[float, float, float] = (5.0, 5.0, -5.0)


def create_three_spheres_scene(
    params: ThreeSpheresParams | None = None,
) -> tuple[SceneManager, PinholeCamera, tuple[float, float, float]]:
    """Build the three-sphere scene.

    Spheres are inserted middle, right, left; insertion order decides ties
    in the nearest-hit query.

    Args:
        params: Optional overrides. Defaults to ThreeSpheresParams().

    Returns:
        Tuple of (scene, camera, light_position).
    """
    if params is None:
        params = ThreeSpheresParams()

    scene = SceneManager()
    scene.add_sphere((0.0, 0.0, -5.0), 1.0, params.center_color, params.reflectivity)
    scene.add_sphere(
        (2.0, 0.0, -5.0),
        1.0,
        params.right_color,
        params.reflectivity,
        refractive_index=params.glass_refractive_index,
    )
    scene.add_sphere((-2.0, 0.0, -5.0), 1.0, params.left_color, params.reflectivity)

    camera = PinholeCamera(eye=(0.0, 0.0, 0.0), image_plane_distance=1.0)
    return scene, camera, params.light_position
