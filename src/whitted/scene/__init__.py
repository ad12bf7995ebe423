"""Scene module for sphere storage, nearest-hit queries and scene building.

Components:
    intersection: Taichi-field sphere storage and the nearest-hit query
    manager: Validated scene construction and (de)serialization
    three_spheres: The three-sphere reference scene

Scene data is organized for Taichi access:
    - Structure-of-Arrays layout for sphere centers, radii and materials
    - Insertion order doubles as iteration order, which makes tie-breaking
      in the nearest-hit query deterministic
"""

from .intersection import (
    MAX_SPHERES,
    SceneHitRecord,
    add_sphere,
    clear_scene,
    get_sphere,
    get_sphere_count,
    intersect_scene,
)
from .manager import SceneConfig, SceneManager, SphereInfo, validate_sphere
from .three_spheres import ThreeSpheresParams, create_three_spheres_scene

__all__ = [
    # Intersection module
    "SceneHitRecord",
    "add_sphere",
    "clear_scene",
    "get_sphere",
    "get_sphere_count",
    "intersect_scene",
    "MAX_SPHERES",
    # Manager module
    "SceneManager",
    "SceneConfig",
    "SphereInfo",
    "validate_sphere",
    # Reference scene
    "ThreeSpheresParams",
    "create_three_spheres_scene",
]
