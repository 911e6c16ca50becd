#!/usr/bin/env python3
"""Draw the twelve hour marks of a clock face.

Each mark is the point (0, 0, 1) rotated about the y axis by a multiple of
pi/6, then projected onto the canvas by reading x and z as pixel offsets
from the center.

Usage:
    python -m examples.clock [options]

Options:
    --width WIDTH       Image width in pixels (default: 800)
    --height HEIGHT     Image height in pixels (default: 600)
    --output OUTPUT     Output file path, .ppm or .png (default: clock.ppm)
    --quiet             Suppress progress output
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

import taichi as ti

HOURS = 12


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Draw a clock face.")
    parser.add_argument("--width", type=int, default=800, help="Image width in pixels (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Image height in pixels (default: 600)")
    parser.add_argument(
        "--output",
        type=str,
        default="clock.ppm",
        help="Output file path, .ppm or .png (default: clock.ppm)",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args()


def hour_marks(radius: float) -> list[tuple[float, float]]:
    """Return (x, z) offsets of the twelve hour marks on a circle of radius."""
    from raykernel.core.transform import rotation_y
    from raykernel.core.tuple import point

    twelve = point(0.0, 0.0, 1.0)
    marks = []
    for hour in range(HOURS):
        p = rotation_y(hour * math.pi / 6.0) @ twelve
        marks.append((radius * p.x, radius * p.z))
    return marks


def draw_clock(
    width: int = 800,
    height: int = 600,
    output_path: str = "clock.ppm",
    quiet: bool = False,
) -> Path:
    """Draw the clock face and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (.ppm or .png).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from raykernel.core.tuple import RED, WHITE
    from raykernel.preview.canvas import Canvas
    from raykernel.preview.export import save_image

    canvas = Canvas(width, height)
    mid_x = width // 2
    mid_y = height // 2

    canvas.write_pixel(mid_x, mid_y, RED)
    radius = min(mid_x, mid_y) / 2.0
    for dx, dz in hour_marks(radius):
        canvas.write_pixel(mid_x + int(dx), mid_y + int(dz), WHITE)

    output_file = Path(output_path)
    save_image(canvas, output_file)
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        draw_clock(width=args.width, height=args.height, output_path=args.output, quiet=args.quiet)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
