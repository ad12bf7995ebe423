"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with surface properties and ray-sphere
        intersection

The intersection routine is a Taichi function (@ti.func) and follows the
pattern:
    hit, t = hit_sphere(ray, sphere)
"""

from .sphere import Sphere, hit_sphere, make_sphere

__all__ = [
    "Sphere",
    "hit_sphere",
    "make_sphere",
]
