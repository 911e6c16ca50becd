"""Preview module for pixel buffers and image output.

Components:
    canvas: Taichi-field pixel buffer
    export: PPM and PNG writers

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raykernel.preview import Canvas, save_image
    >>> canvas = Canvas(32, 32)
    >>> save_image(canvas, "blank.png")
"""

from .canvas import MAX_CANVAS_SIZE, Canvas
from .export import (
    PPM_MAX_COLOR_VALUE,
    PPM_MAX_LINE_LENGTH,
    canvas_to_ppm,
    canvas_to_uint8,
    image_to_uint8,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "Canvas",
    "MAX_CANVAS_SIZE",
    "PPM_MAX_COLOR_VALUE",
    "PPM_MAX_LINE_LENGTH",
    "canvas_to_ppm",
    "canvas_to_uint8",
    "image_to_uint8",
    "save_image",
    "save_png",
    "save_ppm",
]
