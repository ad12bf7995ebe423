#!/usr/bin/env python3
"""Render the three-sphere scene.

This script renders the reference scene (red, glass-green and blue spheres
lit by one point light) and writes it as plain-text PPM, or PNG when the
output path ends in .png.

Usage:
    python -m examples.render_spheres [options]

Options:
    --width WIDTH       Image width in pixels (default: 800)
    --height HEIGHT     Image height in pixels (default: 600)
    --output OUTPUT     Output file path (default: output.ppm)
    --light X Y Z       Point light position (default: 5 5 -5)
    --arch {cpu,gpu}    Taichi backend (default: cpu)
    --quiet             Suppress progress output

Example:
    python -m examples.render_spheres --width 400 --height 300 --output spheres.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the three-sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=800,
        help="Image width in pixels (default: 800)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=600,
        help="Image height in pixels (default: 600)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="output.ppm",
        help="Output file path, .ppm or .png (default: output.ppm)",
    )
    parser.add_argument(
        "--light",
        type=float,
        nargs=3,
        default=None,
        metavar=("X", "Y", "Z"),
        help="Point light position (default: 5 5 -5)",
    )
    parser.add_argument(
        "--arch",
        choices=("cpu", "gpu"),
        default="cpu",
        help="Taichi backend (default: cpu)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_spheres(
    width: int = 800,
    height: int = 600,
    output_path: str = "output.ppm",
    light_position: tuple[float, float, float] | None = None,
    quiet: bool = False,
) -> Path:
    """Render the three-sphere scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (.ppm or .png).
        light_position: Overrides the scene's light position.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from whitted.core.renderer import RenderConfig, Renderer
    from whitted.scene.three_spheres import create_three_spheres_scene

    if not quiet:
        print(f"Creating three-sphere scene ({width}x{height})...")

    scene, camera, scene_light = create_three_spheres_scene()
    if light_position is None:
        light_position = scene_light

    config = RenderConfig(
        width=width,
        height=height,
        light_position=light_position,
        camera=camera,
    )
    renderer = Renderer(config)

    if not quiet:
        print(f"Rendering {scene.get_sphere_count()} spheres, light at {light_position}...")

    start_time = time.time()
    renderer.render()
    render_time = time.time() - start_time

    output_file = renderer.save(output_path)

    if not quiet:
        print(f"Rendered in {render_time:.2f}s")
        print(f"Saved to: {output_file.absolute()}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    ti.init(arch=ti.gpu if args.arch == "gpu" else ti.cpu)
    if not args.quiet:
        print(f"Using {args.arch.upper()} backend")

    try:
        render_spheres(
            width=args.width,
            height=args.height,
            output_path=args.output,
            light_position=tuple(args.light) if args.light is not None else None,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
