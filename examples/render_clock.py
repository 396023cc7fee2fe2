#!/usr/bin/env python3
"""Draw the twelve hour marks of a clock face.

Each mark starts at the point (0, 0, 1), is rotated about the y axis by a
multiple of 2*pi/12 and scaled out to the clock radius, then plotted on the
x/z plane with the center of the canvas as the clock center. The image is
written as ASCII PPM to a file or to standard output.

Usage:
    python -m examples.render_clock [options]

Options:
    --size SIZE         Canvas width and height in pixels (default: 48)
    --output OUTPUT     Output file path, or "-" for stdout (default: -)
    --cpu               Force the Taichi CPU backend
"""

from __future__ import annotations

import argparse
import math
import sys

import taichi as ti

from phongtrace.core.canvas import Canvas
from phongtrace.core.color import WHITE
from phongtrace.core.transformations import compose, rotation_y, scaling, translation
from phongtrace.core.tuples import ORIGIN
from phongtrace.preview.export import save_ppm, write_ppm

# Number of hour marks on the clock face
HOURS = 12


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Draw the twelve hour marks of a clock face as PPM.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=48,
        help="Canvas width and height in pixels (default: 48)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="-",
        help='Output file path, or "-" for stdout (default: -)',
    )
    parser.add_argument(
        "--cpu",
        action="store_true",
        help="Force the Taichi CPU backend",
    )
    return parser.parse_args()


def draw_clock(size: int = 48) -> Canvas:
    """Plot the hour marks on a square canvas.

    Args:
        size: Canvas width and height in pixels.

    Returns:
        The canvas with one white pixel per hour.
    """
    canvas = Canvas(size, size)
    radius = size / 4.0

    for hour in range(HOURS):
        angle = 2.0 * math.pi / HOURS * hour
        # Move to 12 o'clock, turn to the hour, then scale to the clock radius
        transform = compose(
            translation(0.0, 0.0, 1.0),
            rotation_y(angle),
            scaling(radius, radius, radius),
        )
        mark = transform @ ORIGIN

        x = int(mark.x + size / 2.0)
        y = int(mark.z + size / 2.0)
        canvas.put_pixel(WHITE, (x, y))

    return canvas


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.cpu:
        ti.init(arch=ti.cpu)
    else:
        try:
            ti.init(arch=ti.gpu)
        except Exception:
            ti.init(arch=ti.cpu)

    try:
        canvas = draw_clock(args.size)
        if args.output == "-":
            write_ppm(canvas, sys.stdout)
        else:
            save_ppm(canvas, args.output)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
