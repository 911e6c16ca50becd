"""Geometry module for shape primitives.

Components:
    sphere: Unit sphere with an attached transform, ray intersection and
        inverse-transpose surface normals

Intersections are computed in object space: the ray is carried into the
shape's local frame with the cached inverse transform.
"""

from .sphere import IdAllocator, Sphere

__all__ = [
    "IdAllocator",
    "Sphere",
]
