"""Image export utilities for canvases.

This module converts a Canvas to 8-bit RGB and writes it out.

Supported formats:
    - PPM (plain-text P3)
    - PNG (8-bit RGB via Pillow)

Each channel is scaled by 255, rounded half up and clamped to [0, 255].

Example:
    >>> from raykernel.preview.canvas import Canvas
    >>> from raykernel.preview.export import save_image
    >>>
    >>> canvas = Canvas(64, 64)
    >>> save_image(canvas, "output.ppm")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from raykernel.preview.canvas import Canvas

# PPM lines are kept at or under this many characters
PPM_MAX_LINE_LENGTH = 70
PPM_MAX_COLOR_VALUE = 255


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Scale a linear float image to 8-bit.

    Args:
        image: Image array of shape (H, W, 3), nominally in [0, 1].

    Returns:
        Array of the same shape with dtype uint8.
    """
    scaled = np.floor(image.astype(np.float64) * PPM_MAX_COLOR_VALUE + 0.5)
    return np.clip(scaled, 0, PPM_MAX_COLOR_VALUE).astype(np.uint8)


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to a (height, width, 3) uint8 array."""
    return image_to_uint8(canvas.to_numpy())


def _wrap_row(tokens: list[str]) -> list[str]:
    lines: list[str] = []
    line = ""
    for token in tokens:
        if line and len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
            lines.append(line)
            line = token
        elif line:
            line = f"{line} {token}"
        else:
            line = token
    lines.append(line)
    return lines


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as plain-text PPM (P3).

    Every pixel row starts on a new line and long rows are wrapped so that
    no line exceeds PPM_MAX_LINE_LENGTH characters.

    Args:
        canvas: The canvas to serialize.

    Returns:
        The PPM text, ending with a newline.
    """
    pixels = canvas_to_uint8(canvas)
    lines = [
        "P3",
        f"{canvas.width} {canvas.height}",
        str(PPM_MAX_COLOR_VALUE),
    ]
    for row in pixels:
        lines.extend(_wrap_row([str(int(v)) for v in row.reshape(-1)]))
    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to a PPM file."""
    Path(filepath).write_text(canvas_to_ppm(canvas), encoding="ascii")


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to an 8-bit RGB PNG file."""
    pil_image = PILImage.fromarray(canvas_to_uint8(canvas))
    pil_image.save(str(filepath))


def save_image(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas, choosing the format from the file suffix.

    Args:
        canvas: The canvas to save.
        filepath: Output path ending in .ppm or .png.

    Raises:
        ValueError: If the suffix is not supported.
    """
    suffix = Path(filepath).suffix.lower()
    if suffix == ".ppm":
        save_ppm(canvas, filepath)
    elif suffix == ".png":
        save_png(canvas, filepath)
    else:
        raise ValueError(f"Unsupported image format: {suffix or filepath}")
