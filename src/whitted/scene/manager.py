"""Scene manager for building and serializing sphere scenes.

This module provides a high-level scene construction API on top of the raw
Taichi storage in whitted.scene.intersection. It validates sphere
parameters at the Python boundary, keeps a host-side record of everything
inserted, and converts scenes to and from plain dictionaries.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from whitted.scene.manager import SceneManager
    >>> scene = SceneManager()
    >>> scene.add_sphere((0, 0, -5), 1.0, color=(1, 0, 0), reflectivity=0.5)
    >>> scene.add_sphere((2, 0, -5), 1.0, color=(0, 1, 0), reflectivity=0.5,
    ...                  refractive_index=1.5)
"""

from dataclasses import dataclass, field
from typing import Any

from whitted.scene.intersection import (
    MAX_SPHERES,
    add_sphere,
    clear_scene,
    get_sphere_count,
)


@dataclass
class SphereInfo:
    """Information about a sphere in the scene.

    Attributes:
        sphere_index: The index in the sphere storage arrays.
        center: The center of the sphere.
        radius: The radius of the sphere.
        color: Base color as (R, G, B).
        reflectivity: Reflection/refraction blend weight.
        refractive_index: Index of refraction (1.0 = opaque).
    """

    sphere_index: int
    center: tuple[float, float, float]
    radius: float
    color: tuple[float, float, float]
    reflectivity: float
    refractive_index: float


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        spheres: List of sphere configurations.
    """

    spheres: list[dict[str, Any]] = field(default_factory=list)


def _as_triple(values: Any, name: str) -> tuple[float, float, float]:
    """Convert a 3-element sequence into a float tuple."""
    if len(values) != 3:
        raise ValueError(f"{name} must have 3 components, got {len(values)}")
    return (float(values[0]), float(values[1]), float(values[2]))


def validate_sphere(
    radius: float,
    color: tuple[float, float, float],
    reflectivity: float,
    refractive_index: float,
) -> None:
    """Validate sphere parameters.

    Raises:
        ValueError: If radius or refractive_index is not positive, if
            reflectivity is outside [0, 1], or if a color component is
            negative.
    """
    if radius <= 0.0:
        raise ValueError(f"Sphere radius must be positive, got {radius}")
    for i, component in enumerate(color):
        if component < 0.0:
            raise ValueError(f"Color component {i} = {component} is negative.")
    if not 0.0 <= reflectivity <= 1.0:
        raise ValueError(f"Reflectivity must be in [0, 1], got {reflectivity}")
    if refractive_index <= 0.0:
        raise ValueError(f"Refractive index must be positive, got {refractive_index}")


class SceneManager:
    """Scene builder coordinating host-side bookkeeping and Taichi storage.

    There is one scene per process: the sphere storage lives in module-level
    Taichi fields, and creating a SceneManager clears it.

    Attributes:
        spheres: List of SphereInfo for all spheres in the scene, in
            insertion order.

    Example:
        >>> scene = SceneManager()
        >>> scene.add_sphere((0, 0, -5), 1.0, (1.0, 0.0, 0.0), reflectivity=0.5)
        0
        >>> scene.get_sphere_count()
        1
    """

    def __init__(self) -> None:
        """Initialize an empty scene."""
        self.spheres: list[SphereInfo] = []
        self._clear_all()

    def _clear_all(self) -> None:
        clear_scene()
        self.spheres.clear()

    def clear(self) -> None:
        """Clear the entire scene."""
        self._clear_all()

    def add_sphere(
        self,
        center: tuple[float, float, float],
        radius: float,
        color: tuple[float, float, float],
        reflectivity: float = 0.0,
        refractive_index: float = 1.0,
    ) -> int:
        """Add a sphere to the scene.

        Args:
            center: The center point of the sphere as (x, y, z).
            radius: The radius of the sphere (must be positive).
            color: Base color as (R, G, B), each component nominally in [0, 1].
            reflectivity: Blend weight in [0, 1] for reflected and refracted
                light. Default is 0 (purely local shading).
            refractive_index: Index of refraction. Default is 1.0 (opaque);
                values above 1.0 make the sphere transmissive.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If any parameter is invalid (see validate_sphere).
            RuntimeError: If the maximum number of spheres is exceeded.
        """
        center = _as_triple(center, "center")
        color = _as_triple(color, "color")
        validate_sphere(radius, color, reflectivity, refractive_index)

        sphere_index = add_sphere(center, radius, color, reflectivity, refractive_index)

        self.spheres.append(
            SphereInfo(
                sphere_index=sphere_index,
                center=center,
                radius=float(radius),
                color=color,
                reflectivity=float(reflectivity),
                refractive_index=float(refractive_index),
            )
        )
        return sphere_index

    # =========================================================================
    # Scene Queries
    # =========================================================================

    def get_sphere_count(self) -> int:
        """Get the number of spheres in the scene."""
        return get_sphere_count()

    def get_sphere_info(self, sphere_index: int) -> SphereInfo:
        """Get the recorded parameters of a sphere.

        Raises:
            ValueError: If sphere_index does not refer to a sphere.
        """
        if not 0 <= sphere_index < len(self.spheres):
            raise ValueError(f"Invalid sphere_index: {sphere_index}")
        return self.spheres[sphere_index]

    # =========================================================================
    # Scene Serialization
    # =========================================================================

    def to_config(self) -> SceneConfig:
        """Export the scene to a configuration object."""
        config = SceneConfig()
        for sphere in self.spheres:
            config.spheres.append(
                {
                    "center": list(sphere.center),
                    "radius": sphere.radius,
                    "color": list(sphere.color),
                    "reflectivity": sphere.reflectivity,
                    "refractive_index": sphere.refractive_index,
                }
            )
        return config

    def from_config(self, config: SceneConfig) -> None:
        """Load a scene from a configuration object.

        Clears the current scene and inserts the spheres in list order.

        Args:
            config: The scene configuration to load.

        Raises:
            ValueError: If the configuration contains invalid data.
        """
        self.clear()
        for sphere_config in config.spheres:
            self.add_sphere(
                center=sphere_config.get("center", [0.0, 0.0, 0.0]),
                radius=sphere_config.get("radius", 1.0),
                color=sphere_config.get("color", [1.0, 1.0, 1.0]),
                reflectivity=sphere_config.get("reflectivity", 0.0),
                refractive_index=sphere_config.get("refractive_index", 1.0),
            )

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization)."""
        return {"spheres": self.to_config().spheres}

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load a scene from a dictionary with a 'spheres' key."""
        self.from_config(SceneConfig(spheres=data.get("spheres", [])))

    @staticmethod
    def get_max_spheres() -> int:
        """Get the maximum number of spheres supported."""
        return MAX_SPHERES
