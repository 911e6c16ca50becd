"""Geometry kernel for a small Whitted-style ray tracer.

This package provides the math a ray tracer is built on:
- Homogeneous 4-component tuples (points and vectors) and RGB colors
- Square matrices of order 2 to 4 with determinant, cofactor and inverse
- Affine transformation factories (translation, scaling, rotation, shearing)
- Rays, transformable unit spheres, and nearest-hit selection

Subpackages:
    core: Tuples, colors, matrices, transforms and rays
    geometry: Sphere primitive with cached inverse transform
    scene: Intersection records and hit selection
    materials: Point lights and Phong shading
    preview: Canvas pixel buffer and PPM/PNG export
"""

__version__ = "0.1.0"
