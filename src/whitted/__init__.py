"""Recursive ray tracer for reflective and refractive spheres, built on Taichi.

This package renders scenes of spheres lit by a single point light with
Whitted-style ray tracing:
- Local Phong shading (ambient, diffuse, specular)
- Recursive mirror reflection and Snell refraction, two bounces deep
- Deterministic, single-threaded evaluation of every pixel
- Plain-text PPM output (PNG via Pillow)

Subpackages:
    core: Rays, vector utilities, the recursive shader and the renderer
    geometry: The sphere primitive and ray-sphere intersection
    scene: Sphere storage, nearest-hit query and scene construction
    camera: Pixel-to-ray mapping
    preview: Image export
"""

__version__ = "0.1.0"
