"""Affine transformation factories.

Every factory returns a 4x4 Matrix. Transforms compose by ordinary matrix
multiplication and apply to column tuples, so in C @ B @ A @ p the transform
A is applied first and C last. compose() takes transforms in the order they
are applied and multiplies them right to left.

Example:
    >>> import math
    >>> from raykernel.core.transform import compose, rotation_x, scaling, translation
    >>> from raykernel.core.tuple import point
    >>> m = compose(rotation_x(math.pi / 2), scaling(5, 5, 5), translation(10, 5, 7))
    >>> m @ point(1, 0, 1) == point(15, 0, 7)
    True
"""

from __future__ import annotations

import math

from raykernel.core.matrix import IDENTITY, Matrix, matrix4


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected."""
    return matrix4(
        1, 0, 0, x,
        0, 1, 0, y,
        0, 0, 1, z,
        0, 0, 0, 1,
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale points and vectors along each axis."""
    return matrix4(
        x, 0, 0, 0,
        0, y, 0, 0,
        0, 0, z, 0,
        0, 0, 0, 1,
    )


def rotation_x(radians: float) -> Matrix:
    """Right-handed rotation about the x axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return matrix4(
        1, 0, 0, 0,
        0, c, -s, 0,
        0, s, c, 0,
        0, 0, 0, 1,
    )


def rotation_y(radians: float) -> Matrix:
    """Right-handed rotation about the y axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return matrix4(
        c, 0, s, 0,
        0, 1, 0, 0,
        -s, 0, c, 0,
        0, 0, 0, 1,
    )


def rotation_z(radians: float) -> Matrix:
    """Right-handed rotation about the z axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return matrix4(
        c, -s, 0, 0,
        s, c, 0, 0,
        0, 0, 1, 0,
        0, 0, 0, 1,
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each component in proportion to the other two.

    Args:
        xy: Amount x moves in proportion to y.
        xz: Amount x moves in proportion to z.
        yx: Amount y moves in proportion to x.
        yz: Amount y moves in proportion to z.
        zx: Amount z moves in proportion to x.
        zy: Amount z moves in proportion to y.
    """
    return matrix4(
        1, xy, xz, 0,
        yx, 1, yz, 0,
        zx, zy, 1, 0,
        0, 0, 0, 1,
    )


def compose(*transforms: Matrix) -> Matrix:
    """Chain transforms given in application order.

    compose(a, b, c) returns c @ b @ a, so a is applied to a tuple first.

    Args:
        *transforms: 4x4 matrices, first applied first.

    Returns:
        The combined matrix, or the identity when no transforms are given.
    """
    result = IDENTITY
    for t in transforms:
        result = t @ result
    return result
