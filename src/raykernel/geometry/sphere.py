"""Unit sphere primitive with a cached inverse transform.

The sphere is always the unit sphere at the origin of its own object space.
Its placement in the world is the attached transform. Rays are carried into
object space with the cached inverse rather than moving the sphere, and
normals are carried back with the transpose of that inverse.

Ids come from an IdAllocator passed in at construction, so creating spheres
has no hidden global state and is safe from several threads.

Example:
    >>> from raykernel.core.ray import Ray
    >>> from raykernel.core.transform import scaling
    >>> from raykernel.core.tuple import point, vector
    >>> from raykernel.geometry.sphere import IdAllocator, Sphere
    >>> sphere = Sphere(IdAllocator())
    >>> sphere.set_transform(scaling(2, 2, 2))
    >>> [x.t for x in sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [3.0, 7.0]
"""

from __future__ import annotations

import itertools
import math
import threading

from raykernel.core.errors import InvalidDimension
from raykernel.core.matrix import IDENTITY, Matrix
from raykernel.core.ray import Ray
from raykernel.core.tuple import ORIGIN, Tuple
from raykernel.materials.phong import Material
from raykernel.scene.intersection import Intersection


class IdAllocator:
    """Thread-safe source of unique, increasing object ids.

    Args:
        start: The first id handed out.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


class Sphere:
    """A unit sphere centered at the object-space origin.

    Attributes:
        id: Unique id assigned at construction.
        material: Surface material used for shading.
    """

    def __init__(self, allocator: IdAllocator, material: Material | None = None) -> None:
        """Create a sphere with the identity transform.

        Args:
            allocator: Source of the sphere's id.
            material: Surface material. Defaults to Material().
        """
        self.id = allocator.next_id()
        self.material = material if material is not None else Material()
        # Replaced together, only through set_transform()
        self._transform = IDENTITY
        self._inverse = IDENTITY

    @property
    def transform(self) -> Matrix:
        return self._transform

    @property
    def transform_inverse(self) -> Matrix:
        return self._inverse

    def set_transform(self, m: Matrix) -> None:
        """Attach a new object-to-world transform.

        The inverse is computed before anything is assigned, so on failure
        the previous transform and inverse are left as they were.

        Args:
            m: A 4x4 object-to-world matrix.

        Raises:
            NotInvertible: If m has a determinant of exactly zero.
            InvalidDimension: If m is not 4x4.
        """
        if m.order != 4:
            raise InvalidDimension(f"Sphere transform must be 4x4, got {m.order}x{m.order}")
        inverse = m.invert()
        self._transform, self._inverse = m, inverse

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with the sphere.

        Args:
            ray: The ray to test.

        Returns:
            An empty list on a miss, otherwise exactly two intersections in
            ascending t. Negative t values are kept; a tangent ray yields two
            equal values. A zero-length direction is a miss.
        """
        local = ray.transform(self._inverse)
        sphere_to_ray = local.origin - ORIGIN

        a = local.direction.dot(local.direction)
        if a == 0.0:
            return []
        b = 2.0 * local.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [Intersection(t1, self.id), Intersection(t2, self.id)]

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Compute the unit surface normal at a world-space point.

        The object-space normal is carried back to world space with the
        transpose of the inverse transform; the forward transform would skew
        normals under non-uniform scaling. The w that this product can leak
        is forced back to 0 before normalizing.

        Args:
            world_point: A point on the sphere's surface.

        Returns:
            The normalized world-space normal vector.
        """
        object_point = self._inverse @ world_point
        object_normal = object_point - ORIGIN
        world_normal = self._inverse.transpose() @ object_normal
        return Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0).normalize()

    def __repr__(self) -> str:
        return f"Sphere(id={self.id}, transform={self._transform!r})"
