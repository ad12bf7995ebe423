"""Scene-level sphere storage and nearest-hit query.

The scene stores spheres in Taichi fields (structure of arrays) in insertion
order. intersect_scene() scans them linearly and returns the closest hit.
Ties in t keep the sphere inserted first, so results depend only on the
scene contents and their order.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.scene.intersection import add_sphere, clear_scene, intersect_scene
    >>> clear_scene()
    >>> add_sphere((0, 0, -5), 1.0, color=(1, 0, 0), reflectivity=0.5)
    >>> # Use intersect_scene within a Taichi kernel
"""

import taichi as ti

from whitted.core.ray import Ray
from whitted.geometry.sphere import Sphere, hit_sphere


@ti.dataclass
class SceneHitRecord:
    """Record of the nearest ray-scene intersection.

    Attributes:
        hit: 1 if any sphere was hit, 0 on a miss.
        t: Distance along the ray to the hit. Only valid if hit == 1.
        sphere_index: Index of the hit sphere in insertion order.
            -1 on a miss.
    """

    hit: ti.i32
    t: ti.f32
    sphere_index: ti.i32


# Maximum number of spheres supported in the scene
MAX_SPHERES = 1024

# Upper bound for the nearest-hit search
T_MAX = 1e30

# Sphere storage: Structure of Arrays layout
sphere_centers = ti.Vector.field(3, dtype=ti.f32, shape=MAX_SPHERES)
sphere_radii = ti.field(dtype=ti.f32, shape=MAX_SPHERES)
sphere_colors = ti.Vector.field(3, dtype=ti.f32, shape=MAX_SPHERES)
sphere_reflectivities = ti.field(dtype=ti.f32, shape=MAX_SPHERES)
sphere_refractive_indices = ti.field(dtype=ti.f32, shape=MAX_SPHERES)
num_spheres = ti.field(dtype=ti.i32, shape=())


def clear_scene() -> None:
    """Remove all spheres from the scene.

    Only the count is reset; stale field data is overwritten by later
    insertions.
    """
    num_spheres[None] = 0


def add_sphere(
    center: tuple[float, float, float],
    radius: float,
    color: tuple[float, float, float],
    reflectivity: float,
    refractive_index: float = 1.0,
) -> int:
    """Append a sphere to the scene.

    Args:
        center: The center point of the sphere.
        radius: The radius of the sphere (should be positive).
        color: Base color as (R, G, B).
        reflectivity: Reflection (and refraction) blend weight.
        refractive_index: 1.0 for opaque spheres, > 1.0 for transmissive ones.

    Returns:
        The index of the added sphere.

    Raises:
        RuntimeError: If the maximum number of spheres is exceeded.
    """
    idx = num_spheres[None]
    if idx >= MAX_SPHERES:
        raise RuntimeError(f"Maximum number of spheres ({MAX_SPHERES}) exceeded")
    sphere_centers[idx] = [center[0], center[1], center[2]]
    sphere_radii[idx] = radius
    sphere_colors[idx] = [color[0], color[1], color[2]]
    sphere_reflectivities[idx] = reflectivity
    sphere_refractive_indices[idx] = refractive_index
    num_spheres[None] = idx + 1
    return idx


def get_sphere_count() -> int:
    """Get the number of spheres in the scene."""
    return int(num_spheres[None])


@ti.func
def get_sphere(index: ti.i32) -> Sphere:
    """Reassemble the sphere stored at index."""
    return Sphere(
        center=sphere_centers[index],
        radius=sphere_radii[index],
        color=sphere_colors[index],
        reflectivity=sphere_reflectivities[index],
        refractive_index=sphere_refractive_indices[index],
    )


@ti.func
def _make_miss_record() -> SceneHitRecord:
    """Create a SceneHitRecord indicating no intersection."""
    return SceneHitRecord(hit=0, t=0.0, sphere_index=-1)


@ti.func
def intersect_scene(ray: Ray) -> SceneHitRecord:
    """Find the nearest sphere hit by a ray.

    Tests every sphere in insertion order and keeps the smallest valid t.
    A later sphere only replaces the current best when its t is strictly
    smaller, so the first-inserted sphere wins ties.

    Args:
        ray: The ray to trace (normalized direction).

    Returns:
        A SceneHitRecord for the closest intersection, or a miss record.
    """
    closest_t = T_MAX
    result = _make_miss_record()

    n_spheres = num_spheres[None]
    for i in range(n_spheres):
        did_hit, t = hit_sphere(ray, get_sphere(i))
        if did_hit == 1 and t < closest_t:
            closest_t = t
            result = SceneHitRecord(hit=1, t=t, sphere_index=i)

    return result
