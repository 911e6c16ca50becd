#!/usr/bin/env python3
"""Render a single shaded sphere.

This script casts one ray per pixel from a fixed eye point through a wall
behind a unit sphere, picks the nearest hit, computes the surface normal at
the hit point and shades it with a single point light.

Usage:
    python -m examples.render_sphere [options]

Options:
    --width WIDTH       Image width in pixels (default: 100)
    --height HEIGHT     Image height in pixels (default: 100)
    --output OUTPUT     Output file path, .ppm or .png (default: sphere.ppm)
    --flat              Draw a flat red silhouette instead of shading
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

# Scene layout: eye on the -z axis looking at a wall at z = WALL_Z
EYE_Z = -5.0
WALL_Z = 10.0
WALL_SIZE = 7.0


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a single shaded sphere.",
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
        "--output",
        type=str,
        default="sphere.ppm",
        help="Output file path, .ppm or .png (default: sphere.ppm)",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="Draw a flat red silhouette instead of shading",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_sphere(
    width: int = 100,
    height: int = 100,
    output_path: str = "sphere.ppm",
    flat: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the sphere scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (.ppm or .png).
        flat: If True, hits are painted solid red with no shading.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from raykernel.core.ray import Ray
    from raykernel.core.transform import compose, rotation_z, scaling
    from raykernel.core.tuple import RED, WHITE, color, point
    from raykernel.geometry.sphere import IdAllocator, Sphere
    from raykernel.materials.phong import Material, PointLight, lighting
    from raykernel.preview.canvas import Canvas
    from raykernel.preview.export import save_image
    from raykernel.scene.intersection import hit

    if not quiet:
        print(f"Creating sphere scene ({width}x{height})...")

    sphere = Sphere(IdAllocator(), Material(color=color(1.0, 0.2, 1.0)))
    # Squash then tilt, to exercise the inverse-transpose normal
    sphere.set_transform(compose(scaling(1.0, 0.5, 1.0), rotation_z(0.5)))
    light = PointLight(point(-10.0, 10.0, -10.0), WHITE)

    canvas = Canvas(width, height)
    eye = point(0.0, 0.0, EYE_Z)
    pixel_size = WALL_SIZE / min(width, height)
    half_width = pixel_size * width / 2.0
    half_height = pixel_size * height / 2.0

    start_time = time.time()
    for y in range(height):
        world_y = half_height - pixel_size * y
        for x in range(width):
            world_x = -half_width + pixel_size * x
            target = point(world_x, world_y, WALL_Z)
            ray = Ray(eye, (target - eye).normalize())
            nearest = hit(sphere.intersect(ray))
            if nearest is None:
                continue
            if flat:
                canvas.write_pixel(x, y, RED)
                continue
            position = ray.position(nearest.t)
            normal = sphere.normal_at(position)
            canvas.write_pixel(x, y, lighting(sphere.material, light, position, -ray.direction, normal))

        if not quiet:
            progress_pct = (y + 1) / height * 100
            print(f"\r  Progress: row {y + 1}/{height} ({progress_pct:.1f}%)", end="", flush=True)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_image(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
        if not args.quiet:
            print("Using GPU backend")
    except Exception:
        ti.init(arch=ti.cpu)
        if not args.quiet:
            print("Using CPU backend")

    try:
        render_sphere(
            width=args.width,
            height=args.height,
            output_path=args.output,
            flat=args.flat,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
