"""Sphere primitive with material properties and ray-sphere intersection.

A sphere carries its own surface description: base color, reflectivity and
refractive index. The intersection test solves the classic quadratic and
only ever reports the near root, so a ray starting inside a sphere does not
see it.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.geometry.sphere import Sphere, hit_sphere
    >>> sphere = Sphere(center=ti.math.vec3(0, 0, -5), radius=1.0)
    >>> # Use hit_sphere within a Taichi kernel
"""

import taichi as ti

from whitted.core.ray import Ray, dot, vec3


@ti.dataclass
class Sphere:
    """A sphere with the surface properties used for shading.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere (positive float).
        color: Base color (albedo) as RGB, nominally in [0, 1].
        reflectivity: Blend weight of secondary rays, nominally in [0, 1].
        refractive_index: 1.0 means opaque; values above 1.0 enable
            transmission.
    """

    center: vec3
    radius: ti.f32
    color: vec3
    reflectivity: ti.f32
    refractive_index: ti.f32


@ti.func
def hit_sphere(ray: Ray, sphere: Sphere):
    """Test a ray against a sphere.

    Solves |origin + t * direction - center|^2 = radius^2, i.e.

        a*t^2 + b*t + c = 0

    where:
        a = dot(direction, direction)
        b = 2 * dot(oc, direction)
        c = dot(oc, oc) - radius^2
        oc = origin - center

    Only the near root (-b - sqrt(b^2 - 4ac)) / 2a is considered.

    Args:
        ray: The ray to test.
        sphere: The sphere to test against.

    Returns:
        A tuple (hit, t). hit is 1 when the near root is strictly positive,
        0 otherwise; t is only meaningful when hit is 1.
    """
    oc = ray.origin - sphere.center
    a = dot(ray.direction, ray.direction)
    b = 2.0 * dot(oc, ray.direction)
    c = dot(oc, oc) - sphere.radius * sphere.radius
    discriminant = b * b - 4.0 * a * c

    did_hit = 0
    t = 0.0
    if discriminant >= 0.0:
        t = (-b - ti.sqrt(discriminant)) / (2.0 * a)
        if t > 0.0:
            did_hit = 1
    return did_hit, t


@ti.func
def make_sphere(
    center: vec3,
    radius: ti.f32,
    color: vec3,
    reflectivity: ti.f32,
    refractive_index: ti.f32,
) -> Sphere:
    """Create a sphere inside a Taichi kernel."""
    return Sphere(
        center=center,
        radius=radius,
        color=color,
        reflectivity=reflectivity,
        refractive_index=refractive_index,
    )
