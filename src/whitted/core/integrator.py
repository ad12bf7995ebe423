"""Recursive (Whitted-style) shading integrator.

This module implements the color evaluation of the renderer: for a ray it
finds the nearest sphere, applies local Phong shading from a single point
light, and recursively follows one mirror-reflection ray and one refraction
ray, blending their colors by the sphere's reflectivity.

Key features:
    - Ambient + diffuse + white specular (exponent 32), no shadow rays
    - Mirror reflection for spheres with reflectivity > 0
    - Snell refraction for spheres with refractive index > 1, skipped under
      total internal reflection
    - Recursion bounded at MAX_DEPTH bounces
    - Secondary ray origins offset by RAY_EPSILON along the normal

Taichi functions cannot call themselves, so the recursion is unrolled at
compile time: one shader is generated per depth, each calling the shader of
the next depth, and the shader at MAX_DEPTH does local shading only.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.core.integrator import render_image, shade_ray
    >>> from whitted.camera.pinhole import PinholeCamera
    >>> from whitted.scene.manager import SceneManager
    >>>
    >>> scene = SceneManager()
    >>> scene.add_sphere((0, 0, -5), 1.0, (1, 0, 0), reflectivity=0.5)
    >>> shade_ray((0, 0, 0), (0, 0, -1), light_position=(5, 5, -5))
    >>> image = render_image(PinholeCamera(), 800, 600, light_position=(5, 5, -5))
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from whitted.camera.pinhole import PinholeCamera, get_ray, validate_camera
from whitted.core.ray import Ray, dot, make_ray, normalize, ray_at, reflect, refract, vec3
from whitted.geometry.sphere import Sphere
from whitted.scene.intersection import get_sphere, intersect_scene

# =============================================================================
# Rendering Constants
# =============================================================================

# Maximum number of recursive bounces (depths 0..MAX_DEPTH are evaluated)
MAX_DEPTH = 2

# Secondary ray origin offset to avoid self-intersection
RAY_EPSILON = 1e-3

# Color of rays that hit nothing
BACKGROUND_COLOR = vec3(0.2, 0.2, 0.3)

# Local shading coefficients
AMBIENT_STRENGTH = 0.1
SPECULAR_EXPONENT = 32
SPECULAR_COLOR = vec3(1.0, 1.0, 1.0)


# =============================================================================
# Local Illumination
# =============================================================================


@ti.func
def local_illumination(
    sphere: Sphere,
    ray_origin: vec3,
    hit_point: vec3,
    normal: vec3,
    light_position: vec3,
) -> vec3:
    """Phong shading of a hit point lit by one point light.

    The light is always considered visible (no shadow ray) and has unit
    intensity. The specular lobe reflects the light direction about the
    normal and compares it with the direction back to the ray origin.

    Args:
        sphere: The sphere that was hit.
        ray_origin: Origin of the ray that produced the hit.
        hit_point: The intersection point.
        normal: Outward unit normal at the hit point.
        light_position: Position of the point light.

    Returns:
        ambient + diffuse + specular, unclamped.
    """
    light_dir = normalize(light_position - hit_point)

    ambient = sphere.color * AMBIENT_STRENGTH
    diffuse = sphere.color * ti.max(0.0, dot(normal, light_dir))

    view_dir = normalize(ray_origin - hit_point)
    reflect_dir = reflect(light_dir, normal)
    specular = SPECULAR_COLOR * ti.max(0.0, dot(view_dir, reflect_dir)) ** SPECULAR_EXPONENT

    return ambient + diffuse + specular


# =============================================================================
# Recursive Shader
# =============================================================================


def _make_shader(deeper):
    """Build the shader for one recursion depth.

    Args:
        deeper: The shader for the next depth, or None for the deepest level,
            which only shades locally.

    Returns:
        A Taichi function (ray, light_position) -> color.
    """
    can_bounce = deeper is not None

    @ti.func
    def shade(ray: Ray, light_position: vec3) -> vec3:
        color = vec3(0.0, 0.0, 0.0)
        rec = intersect_scene(ray)

        if rec.hit == 0:
            color = BACKGROUND_COLOR
        else:
            sphere = get_sphere(rec.sphere_index)
            hit_point = ray_at(ray, rec.t)
            normal = normalize(hit_point - sphere.center)

            color = local_illumination(sphere, ray.origin, hit_point, normal, light_position)

            if ti.static(can_bounce):
                weight = sphere.reflectivity

                if weight > 0.0:
                    reflection_ray = make_ray(
                        hit_point + normal * RAY_EPSILON, reflect(ray.direction, normal)
                    )
                    reflection_color = deeper(reflection_ray, light_position)
                    color = color * (1.0 - weight) + reflection_color * weight

                if sphere.refractive_index > 1.0:
                    did_refract, refraction_dir = refract(
                        ray.direction, normal, 1.0 / sphere.refractive_index
                    )
                    if did_refract == 1:
                        refraction_ray = make_ray(hit_point - normal * RAY_EPSILON, refraction_dir)
                        refraction_color = deeper(refraction_ray, light_position)
                        # Refraction is blended with the reflectivity weight too
                        color = color * (1.0 - weight) + refraction_color * weight

        return color

    return shade


def _build_shaders() -> list:
    """Build shaders for depths 0..MAX_DEPTH, indexed by depth."""
    shaders = []
    deeper = None
    for _ in range(MAX_DEPTH + 1):
        deeper = _make_shader(deeper)
        shaders.insert(0, deeper)
    return shaders


_SHADERS = _build_shaders()

# Entry point of the recursion (depth 0)
color_at = _SHADERS[0]


# =============================================================================
# Rendering Kernels
# =============================================================================


@ti.kernel
def _shade_single_ray(
    origin: vec3,
    direction: vec3,
    light_position: vec3,
    depth: ti.template(),
) -> vec3:
    """Evaluate the shader of the given depth for one ray."""
    shader = ti.static(_SHADERS[depth])
    return shader(make_ray(origin, direction), light_position)


@ti.kernel
def _render_kernel(
    image: ti.types.ndarray(dtype=ti.f32, ndim=3),
    width: ti.i32,
    height: ti.i32,
    eye: vec3,
    image_plane_distance: ti.f32,
    light_position: vec3,
):
    """Shade every pixel, one after another, into image[row, column]."""
    ti.loop_config(serialize=True)
    for j, i in ti.ndrange(height, width):
        ray = get_ray(i, j, width, height, eye, image_plane_distance)
        color = color_at(ray, light_position)
        image[j, i, 0] = color.x
        image[j, i, 1] = color.y
        image[j, i, 2] = color.z


# =============================================================================
# Public Rendering API
# =============================================================================


def shade_ray(
    origin: tuple[float, float, float],
    direction: tuple[float, float, float],
    light_position: tuple[float, float, float],
    depth: int = 0,
) -> tuple[float, float, float]:
    """Compute the color seen along a single ray.

    This is a Python-callable function for testing and tooling. For full
    images use render_image(), which shades all pixels in one kernel launch.

    Args:
        origin: Ray origin.
        direction: Ray direction (normalized internally, must be non-zero).
        light_position: Position of the point light.
        depth: Recursion depth to start at. Rays started at MAX_DEPTH are
            shaded locally only.

    Returns:
        Tuple of (R, G, B) color values, unclamped.

    Raises:
        ValueError: If depth is outside [0, MAX_DEPTH].
    """
    if not 0 <= depth <= MAX_DEPTH:
        raise ValueError(f"depth must be in [0, {MAX_DEPTH}], got {depth}")

    color = _shade_single_ray(vec3(*origin), vec3(*direction), vec3(*light_position), depth)
    return (float(color[0]), float(color[1]), float(color[2]))


def render_image(
    camera: PinholeCamera,
    width: int,
    height: int,
    light_position: tuple[float, float, float],
) -> npt.NDArray[np.float32]:
    """Render the current scene into a fresh image buffer.

    Pixels are shaded sequentially; each pixel's color depends only on its
    own coordinates, so the result is fully deterministic.

    Args:
        camera: Camera producing the primary rays.
        width: Image width in pixels (at least 2).
        height: Image height in pixels (at least 2).
        light_position: Position of the point light.

    Returns:
        Row-major float32 array of shape (height, width, 3) with unclamped
        colors. Row 0 holds the pixels with ny = -1.

    Raises:
        ValueError: If the dimensions or the camera are invalid.
    """
    if width < 2 or height < 2:
        raise ValueError(f"Image dimensions must be at least 2x2, got {width}x{height}")
    validate_camera(camera)

    image = np.zeros((height, width, 3), dtype=np.float32)
    _render_kernel(
        image,
        width,
        height,
        vec3(*camera.eye),
        camera.image_plane_distance,
        vec3(*light_position),
    )
    return image
