"""Ray data structure.

A ray is an origin point and a direction vector, parameterized as
origin + t * direction. Negative t lies behind the origin.

Example:
    >>> from raykernel.core.ray import Ray
    >>> from raykernel.core.tuple import point, vector
    >>> ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    >>> ray.position(2.5) == point(4.5, 3, 4)
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from raykernel.core.matrix import Matrix
from raykernel.core.tuple import Tuple


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w = 1).
        direction: The direction vector of the ray (w = 0). Not required to be
            normalized; t is measured in multiples of its length.
    """

    origin: Tuple
    direction: Tuple

    __hash__ = None  # type: ignore[assignment]

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> Ray:
        """Apply a 4x4 matrix to both origin and direction.

        Args:
            m: The transformation matrix.

        Returns:
            A new ray; the original is unchanged.
        """
        return Ray(m @ self.origin, m @ self.direction)
