"""Point light, Phong material and the lighting function.

The Phong model sums three terms:
    ambient:  material color * light intensity * ambient
    diffuse:  effective color * diffuse * cos(angle between light and normal)
    specular: light intensity * specular * cos(angle between reflection and eye)^shininess

Diffuse and specular vanish when the light is behind the surface; specular
also vanishes when the reflected light points away from the eye.

Example:
    >>> from raykernel.core.tuple import WHITE, color, point, vector
    >>> from raykernel.materials.phong import Material, PointLight, lighting
    >>> light = PointLight(point(0, 0, -10), WHITE)
    >>> eyev = normalv = vector(0, 0, -1)
    >>> lighting(Material(), light, point(0, 0, 0), eyev, normalv) == color(1.9, 1.9, 1.9)
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field

from raykernel.core.tuple import BLACK, WHITE, Color, Tuple, reflect


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting equally in every direction.

    Attributes:
        position: Position of the light (a point).
        intensity: Color and brightness of the light.
    """

    position: Tuple
    intensity: Color

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Material:
    """Surface reflectance parameters for Phong shading.

    Attributes:
        color: Surface color.
        ambient: Fraction of light reflected regardless of geometry.
        diffuse: Fraction of light reflected from a matte surface.
        specular: Fraction of light reflected as a highlight.
        shininess: Highlight tightness; larger is smaller and tighter.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} is negative.")
        if self.shininess <= 0.0:
            raise ValueError(f"Material shininess = {self.shininess} must be positive.")


def lighting(
    material: Material,
    light: PointLight,
    position: Tuple,
    eyev: Tuple,
    normalv: Tuple,
) -> Color:
    """Shade a point with the Phong reflection model.

    Args:
        material: Surface material at the point.
        light: The point light illuminating the scene.
        position: The world-space point being shaded.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point.

    Returns:
        The color seen at the point.
    """
    effective_color = material.color * light.intensity
    lightv = (light.position - position).normalize()
    ambient = effective_color * material.ambient

    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal < 0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = reflectv.dot(eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
