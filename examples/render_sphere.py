#!/usr/bin/env python3
"""Render lit spheres through the wall-projection camera.

This script renders either the default two-sphere world or a single purple
sphere, tracing one ray per pixel from an eye point through a wall in front
of the scene, and saves the result as PPM or PNG.

Usage:
    python -m examples.render_sphere [options]

Options:
    --width WIDTH       Image width in pixels (default: 100)
    --height HEIGHT     Image height in pixels (default: 100)
    --scene SCENE       "default" or "single" (default: single)
    --output OUTPUT     Output file path, .ppm or .png (default: sphere.ppm)
    --cpu               Force the Taichi CPU backend
    --quiet             Suppress progress output

Example:
    python -m examples.render_sphere --width 200 --height 200 --output sphere.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti

from phongtrace.camera.wall import WallCamera
from phongtrace.core.color import Color
from phongtrace.core.render import Renderer
from phongtrace.core.tuples import point
from phongtrace.geometry.sphere import Sphere
from phongtrace.materials.material import Material
from phongtrace.scene.light import PointLight
from phongtrace.scene.world import World


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render lit spheres through the wall-projection camera.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=100,
        help="Image width in pixels (default: 100)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=100,
        help="Image height in pixels (default: 100)",
    )
    parser.add_argument(
        "--scene",
        choices=("default", "single"),
        default="single",
        help="Scene to render (default: single)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sphere.ppm",
        help="Output file path, .ppm or .png (default: sphere.ppm)",
    )
    parser.add_argument(
        "--cpu",
        action="store_true",
        help="Force the Taichi CPU backend",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def create_single_sphere_world() -> World:
    """A unit sphere at the origin lit from the upper left behind the eye."""
    sphere = Sphere(material=Material(color=Color(1.0, 0.2, 1.0)))
    light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
    return World(objects=[sphere], light=light)


def render_sphere(
    width: int = 100,
    height: int = 100,
    scene: str = "single",
    output_path: str = "sphere.ppm",
    quiet: bool = False,
) -> Path:
    """Render the chosen scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        scene: "default" for World.default(), "single" for one sphere.
        output_path: Output file path (.ppm or .png).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    world = World.default() if scene == "default" else create_single_sphere_world()
    camera = WallCamera()

    if not quiet:
        print(f"Rendering {scene} scene ({width}x{height})...")

    renderer = Renderer(width, height)
    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            progress_pct = (current / target) * 100 if target > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows ({progress_pct:.1f}%)",
                end="",
                flush=True,
            )

    renderer.render(world, camera, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    renderer.save(output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Use GPU if available, fall back to CPU
    if args.cpu:
        ti.init(arch=ti.cpu)
    else:
        try:
            ti.init(arch=ti.gpu)
        except Exception:
            ti.init(arch=ti.cpu)

    try:
        render_sphere(
            width=args.width,
            height=args.height,
            scene=args.scene,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
