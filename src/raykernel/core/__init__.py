"""Core math module.

This module contains the value types every other part of the ray tracer
builds on:

Components:
    tuple: Homogeneous points and vectors, RGB colors, approximate equality
    matrix: Order 2-4 matrices with determinant, cofactor and inverse
    transform: Translation, scaling, rotation and shearing factories
    ray: Ray data structure with position and transform
    errors: InvalidDimension and NotInvertible

All values are immutable; every operation returns a new value.
"""

from .errors import InvalidDimension, NotInvertible
from .matrix import IDENTITY, Matrix, identity, matrix2, matrix3, matrix4
from .ray import Ray
from .transform import (
    compose,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from .tuple import (
    BLACK,
    EPSILON,
    ORIGIN,
    RED,
    WHITE,
    Color,
    Tuple,
    approx_equal,
    color,
    point,
    reflect,
    vector,
)

__all__ = [
    # errors
    "InvalidDimension",
    "NotInvertible",
    # tuple
    "BLACK",
    "EPSILON",
    "ORIGIN",
    "RED",
    "WHITE",
    "Color",
    "Tuple",
    "approx_equal",
    "color",
    "point",
    "reflect",
    "vector",
    # matrix
    "IDENTITY",
    "Matrix",
    "identity",
    "matrix2",
    "matrix3",
    "matrix4",
    # transform
    "compose",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "scaling",
    "shearing",
    "translation",
    # ray
    "Ray",
]
