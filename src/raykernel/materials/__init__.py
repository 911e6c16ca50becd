"""Materials module for surface shading.

Components:
    phong: Point light, Phong material parameters and the lighting function
"""

from .phong import Material, PointLight, lighting

__all__ = [
    "Material",
    "PointLight",
    "lighting",
]
