"""Homogeneous tuples, colors and the vector utilities built on them.

A Tuple is a 4-component value (x, y, z, w). Points carry w = 1 so that the
translation column of an affine matrix moves them; vectors carry w = 0 so that
it does not. Colors are a separate RGB value type: they share the arithmetic
(add, subtract, scale) but never take part in dot, cross or matrix products.

Equality is approximate. Two values are equal when every component differs by
less than EPSILON; matrix and intersection comparisons are built on the same
rule, since every chain of transformations accumulates rounding error.

Example:
    >>> from raykernel.core.tuple import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> p + v == point(1.0, 2.0, 4.0)
    True
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

# Tolerance used by every approximate comparison in the kernel
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """Compare two floats with the kernel-wide EPSILON tolerance.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if |a - b| < EPSILON.
    """
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Tuple:
    """A homogeneous 4-component value.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        w: Homogeneous coordinate. 1 for points, 0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    # Approximate equality is not compatible with hashing
    __hash__ = None  # type: ignore[assignment]

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        """Divide every component by a scalar.

        Division by zero raises ZeroDivisionError as plain float division does.
        Only normalize() maps the zero tuple to NaN.
        """
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def dot(self, other: Tuple) -> float:
        """Dot product over all four components, including w.

        Args:
            other: The tuple to dot with.

        Returns:
            x1*x2 + y1*y2 + z1*z2 + w1*w2.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of two vectors.

        Only meaningful for vectors: w is ignored and the result is always
        a vector.

        Args:
            other: The right-hand vector.

        Returns:
            The vector self x other.
        """
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Euclidean length over all four components."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Tuple:
        """Scale the tuple to unit magnitude.

        The zero tuple is not checked for: dividing by its zero magnitude
        yields NaN or infinite components rather than an error.

        Returns:
            A new tuple with magnitude 1.
        """
        mag = self.magnitude()
        if mag == 0.0:
            # 0/0 under IEEE rules rather than ZeroDivisionError
            return Tuple(math.nan, math.nan, math.nan, math.nan)
        return Tuple(self.x / mag, self.y / mag, self.z / mag, self.w / mag)


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


# Local-space origin shared by sphere intersection and normal computation
ORIGIN = point(0.0, 0.0, 0.0)


def reflect(incoming: Tuple, normal: Tuple) -> Tuple:
    """Reflect an incoming vector about a normal.

    Args:
        incoming: The incoming direction vector.
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incoming - normal * (2.0 * incoming.dot(normal))


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB color.

    Attributes:
        red: Red channel, nominally in [0, 1].
        green: Green channel, nominally in [0, 1].
        blue: Blue channel, nominally in [0, 1].
    """

    red: float
    green: float
    blue: float

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: float | Color) -> Color:
        if isinstance(other, Color):
            return self.hadamard(other)
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Color(self.red * other, self.green * other, self.blue * other)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue

    def hadamard(self, other: Color) -> Color:
        """Component-wise (Hadamard) product of two colors."""
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)


def color(red: float, green: float, blue: float) -> Color:
    """Create a color from its three channels."""
    return Color(float(red), float(green), float(blue))


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
RED = color(1.0, 0.0, 0.0)
