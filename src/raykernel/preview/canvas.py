"""Canvas pixel buffer backed by a Taichi vector field.

The canvas stores linear RGB colors in a ti.Vector.field of shape
(width, height), indexed as [x, y] with y growing downward, which is the
order images are written in. Taichi must be initialized (ti.init) before a
Canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raykernel.core.tuple import color
    >>> from raykernel.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, color(1, 0, 0))
    >>> canvas.pixel_at(2, 3) == color(1, 0, 0)
    True
"""

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from raykernel.core.tuple import Color

# Largest supported canvas side, in pixels
MAX_CANVAS_SIZE = 4096


@ti.kernel
def _fill_field(pixels: ti.template(), value: tm.vec3):
    for i, j in pixels:
        pixels[i, j] = value


class Canvas:
    """A width x height grid of colors, initially black.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate the pixel field.

        Args:
            width: Canvas width in pixels (1 to MAX_CANVAS_SIZE).
            height: Canvas height in pixels (1 to MAX_CANVAS_SIZE).

        Raises:
            ValueError: If either dimension is out of range.
        """
        if not (0 < width <= MAX_CANVAS_SIZE and 0 < height <= MAX_CANVAS_SIZE):
            raise ValueError(
                f"Canvas dimensions ({width}x{height}) must be between 1 and "
                f"{MAX_CANVAS_SIZE}"
            )
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._pixels.fill(0.0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def field(self) -> ti.MatrixField:
        """The underlying Taichi field, for use in kernels."""
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write_pixel(self, x: int, y: int, c: Color) -> None:
        """Set the color of one pixel.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = [c.red, c.green, c.blue]

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color of one pixel.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def fill(self, c: Color) -> None:
        """Set every pixel to the same color."""
        _fill_field(self._pixels, tm.vec3(c.red, c.green, c.blue))

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Return the pixels as a (height, width, 3) float32 array.

        Values are not clamped.
        """
        # Transpose from (width, height, 3) to (height, width, 3) for standard image format
        return np.transpose(self._pixels.to_numpy(), (1, 0, 2)).astype(np.float32)
