"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Ray data structure and vector utilities (reflect, refract, ...)
    integrator: The recursive shader and the per-pixel render loop
    renderer: Render configuration and the high-level Renderer wrapper

The integrator implements Whitted-style recursive ray tracing: local Phong
shading at each hit plus at most two levels of mirror reflection and
refraction, evaluated with Taichi functions.
"""

from .ray import (
    Ray,
    dot,
    length,
    length_squared,
    make_ray,
    normalize,
    ray_at,
    reflect,
    refract,
    vec3,
)

# Note: integrator and renderer are NOT imported here; they pull in the scene
# module, which declares Taichi fields at import time.
# Import directly from whitted.core.integrator or whitted.core.renderer.

__all__ = [
    "Ray",
    "ray_at",
    "make_ray",
    "vec3",
    "length",
    "length_squared",
    "normalize",
    "dot",
    "reflect",
    "refract",
]
