"""Ray data structure and vector utilities for the recursive ray tracer.

This module provides the Ray dataclass and the vector operations the shader
needs: dot products, normalization, mirror reflection and Snell refraction.
All operations are Taichi functions and return new values; nothing is
modified in place.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> origin = ti.math.vec3(0.0, 0.0, 0.0)
    >>> direction = ti.math.vec3(0.0, 0.0, -2.0)
    >>> ray = make_ray(origin, direction)  # direction becomes (0, 0, -1)
    >>> point = ray_at(ray, 5.0)  # Point 5 units along the ray
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.dataclass
class Ray:
    """A ray with an origin point and a unit direction vector.

    Attributes:
        origin: The starting point of the ray (vec3).
        direction: The direction of the ray (vec3). Rays built with
            make_ray() always carry a unit-length direction, so the
            parameter t of ray_at() is a Euclidean distance.
    """

    origin: vec3
    direction: vec3


@ti.func
def ray_at(ray: Ray, t: ti.f32) -> vec3:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Positive values are in front of the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + t * ray.direction


@ti.func
def make_ray(origin: vec3, direction: vec3) -> Ray:
    """Create a ray from an origin and a raw direction.

    The direction is normalized here, so every ray in the renderer has a
    unit direction regardless of how it was derived.

    Args:
        origin: The starting point of the ray.
        direction: Any non-zero direction vector.

    Returns:
        A new Ray instance with a normalized direction.
    """
    return Ray(origin=origin, direction=normalize(direction))


# =============================================================================
# Vector Utility Functions
# =============================================================================


@ti.func
def length(v: vec3) -> ti.f32:
    """Compute the Euclidean length of a vector."""
    return ti.sqrt(length_squared(v))


@ti.func
def length_squared(v: vec3) -> ti.f32:
    """Compute the squared length of a vector.

    Cheaper than length() when only comparing magnitudes.
    """
    return v.x * v.x + v.y * v.y + v.z * v.z


@ti.func
def normalize(v: vec3) -> vec3:
    """Normalize a vector to unit length.

    Divides each component by sqrt(x^2 + y^2 + z^2). The input must not be
    the zero vector; in that case the components become NaN/Inf.

    Args:
        v: The input vector.

    Returns:
        A unit vector parallel to v.
    """
    return v / length(v)


@ti.func
def dot(a: vec3, b: vec3) -> ti.f32:
    """Compute the dot product a . b."""
    return a.x * b.x + a.y * b.y + a.z * b.z


@ti.func
def reflect(incident: vec3, normal: vec3) -> vec3:
    """Reflect a vector about a normal.

    Computes incident - normal * (2 * dot(incident, normal)). The result has
    the same length as the incident vector when the normal is unit length.

    Args:
        incident: The vector to reflect.
        normal: The surface normal (should be normalized).

    Returns:
        The mirrored vector.
    """
    return incident - normal * (2.0 * dot(incident, normal))


@ti.func
def refract(incident: vec3, normal: vec3, eta: ti.f32):
    """Refract an incident direction through a surface using Snell's law.

    Args:
        incident: The incoming direction (should be normalized).
        normal: The surface normal (should be normalized, pointing outward).
        eta: The ratio of refractive indices (n_incident / n_transmitted).

    Returns:
        A tuple (did_refract, direction). did_refract is 0 under total
        internal reflection, in which case direction is the zero vector and
        carries no meaning. Otherwise did_refract is 1 and direction is the
        transmitted direction.
    """
    cos_i = -dot(normal, incident)
    sin2_t = eta * eta * (1.0 - cos_i * cos_i)
    did_refract = 0
    direction = vec3(0.0, 0.0, 0.0)
    if sin2_t <= 1.0:
        cos_t = ti.sqrt(1.0 - sin2_t)
        direction = incident * eta + normal * (eta * cos_i - cos_t)
        did_refract = 1
    return did_refract, direction
