"""Unit tests for the sphere primitive.

Tests cover:
- Id allocation
- Default and updated transforms, including the transactional failure path
- Ray-sphere intersection: two hits, tangent, miss, inside, behind
- Intersection of transformed spheres through the cached inverse
- Surface normals, including the inverse-transpose rule
"""

import math
import threading

import pytest


class TestIdAllocator:
    """Tests for IdAllocator."""

    def test_ids_start_at_one_and_increase(self, allocator):
        """Ids are handed out in increasing order."""
        assert [allocator.next_id() for _ in range(3)] == [1, 2, 3]

    def test_custom_start(self):
        """The first id can be chosen."""
        from raykernel.geometry.sphere import IdAllocator

        assert IdAllocator(start=100).next_id() == 100

    def test_spheres_get_unique_ids(self, allocator):
        """Each sphere takes the next id from its allocator."""
        from raykernel.geometry.sphere import Sphere

        s1 = Sphere(allocator)
        s2 = Sphere(allocator)
        assert s1.id == 1
        assert s2.id == 2

    def test_allocators_are_independent(self):
        """Two allocators do not share state."""
        from raykernel.geometry.sphere import IdAllocator, Sphere

        assert Sphere(IdAllocator()).id == Sphere(IdAllocator()).id == 1

    def test_concurrent_allocation_is_unique(self, allocator):
        """Ids stay unique when spheres are created from several threads."""
        from raykernel.geometry.sphere import Sphere

        ids = []
        lock = threading.Lock()

        def worker():
            for _ in range(200):
                s = Sphere(allocator)
                with lock:
                    ids.append(s.id)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ids) == 800
        assert len(set(ids)) == 800


class TestSphereTransform:
    """Tests for the transform and its cached inverse."""

    def test_default_transform_is_identity(self, sphere):
        """A new sphere has the identity transform and inverse."""
        from raykernel.core.matrix import IDENTITY

        assert sphere.transform == IDENTITY
        assert sphere.transform_inverse == IDENTITY

    def test_set_transform(self, sphere):
        """set_transform replaces the transform and caches its inverse."""
        from raykernel.core.transform import translation

        t = translation(2, 3, 4)
        sphere.set_transform(t)
        assert sphere.transform == t
        assert sphere.transform_inverse == translation(-2, -3, -4)

    def test_singular_transform_leaves_sphere_unchanged(self, sphere):
        """A failed set_transform raises and keeps the previous state."""
        from raykernel.core.errors import NotInvertible
        from raykernel.core.transform import scaling, translation

        t = translation(1, 2, 3)
        sphere.set_transform(t)
        with pytest.raises(NotInvertible):
            sphere.set_transform(scaling(0, 1, 1))
        assert sphere.transform == t
        assert sphere.transform_inverse == translation(-1, -2, -3)

    def test_non_4x4_transform_rejected(self, sphere):
        """A sphere transform must be 4x4."""
        from raykernel.core.errors import InvalidDimension
        from raykernel.core.matrix import IDENTITY, identity

        with pytest.raises(InvalidDimension):
            sphere.set_transform(identity(3))
        assert sphere.transform == IDENTITY

    def test_default_material(self, sphere):
        """A sphere gets the default material."""
        from raykernel.materials.phong import Material

        assert sphere.material == Material()

    def test_custom_material(self, allocator):
        """A material can be given at construction."""
        from raykernel.geometry.sphere import Sphere
        from raykernel.materials.phong import Material

        m = Material(ambient=1.0)
        assert Sphere(allocator, material=m).material is m


class TestSphereIntersection:
    """Tests for Sphere.intersect()."""

    def test_two_points(self, sphere):
        """A ray through the center hits at t = 4 and t = 6."""
        from raykernel.core.ray import Ray
        from raykernel.core.tuple import point, vector

        xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert len(xs) == 2
        assert xs[0].t == 4.0
        assert xs[1].t == 6.0
        assert xs[0].object_id == sphere.id
        assert xs[1].object_id == sphere.id

    def test_tangent(self, sphere):
        """A tangent ray yields the same t twice."""
        from raykernel.core.ray import Ray
        from raykernel.core.tuple import point, vector

        xs = sphere.intersect(Ray(point(0, 1, -5), vector(0, 0, 1)))
        assert [x.t for x in xs] == [5.0, 5.0]

    def test_miss(self, sphere):
        """A ray passing above the sphere returns no intersections."""
        from raykernel.core.ray import Ray
        from raykernel.core.tuple import point, vector

        assert sphere.intersect(Ray(point(0, 2, -5), vector(0, 0, 1))) == []

    def test_zero_direction_is_a_miss(self, sphere):
        """A ray with a zero-length direction returns no intersections."""
        from raykernel.core.ray import Ray
        from raykernel.core.tuple import point, vector
        from raykernel.scene.intersection import hit

        xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 0)))
        assert xs == []
        assert hit(xs) is None

    def test_ray_inside_sphere(self, sphere):
        """A ray starting at the center has one hit behind it."""
        from raykernel.core.ray import Ray
        from raykernel.core.tuple import point, vector

        xs = sphere.intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))
        assert [x.t for x in xs] == [-1.0, 1.0]

    def test_sphere_behind_ray(self, sphere):
        """Both hits are kept even when negative."""
        from raykernel.core.ray import Ray
        from raykernel.core.tuple import point, vector

        xs = sphere.intersect(Ray(point(0, 0, 5), vector(0, 0, 1)))
        assert [x.t for x in xs] == [-6.0, -4.0]

    def test_results_ascending(self, sphere):
        """Intersections come back in ascending t for any direction."""
        from raykernel.core.ray import Ray
        from raykernel.core.tuple import point, vector

        xs = sphere.intersect(Ray(point(0.3, -0.2, 4), vector(-0.1, 0.05, -1)))
        assert len(xs) == 2
        assert xs[0].t <= xs[1].t

    def test_scaled_sphere(self, sphere):
        """A sphere scaled by 2 is hit at t = 3 and t = 7."""
        from raykernel.core.ray import Ray
        from raykernel.core.transform import scaling
        from raykernel.core.tuple import point, vector

        sphere.set_transform(scaling(2, 2, 2))
        xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [x.t for x in xs] == [3.0, 7.0]
        assert all(x.object_id == sphere.id for x in xs)

    def test_translated_sphere(self, sphere):
        """A sphere moved out of the ray's path is missed."""
        from raykernel.core.ray import Ray
        from raykernel.core.transform import translation
        from raykernel.core.tuple import point, vector

        sphere.set_transform(translation(5, 0, 0))
        assert sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1))) == []

    def test_intersect_does_not_modify_ray(self, sphere):
        """The world-space ray is not changed by intersection."""
        from raykernel.core.ray import Ray
        from raykernel.core.transform import scaling
        from raykernel.core.tuple import point, vector

        sphere.set_transform(scaling(2, 2, 2))
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        sphere.intersect(ray)
        assert ray.origin == point(0, 0, -5)
        assert ray.direction == vector(0, 0, 1)

    def test_intersect_uses_cached_inverse(self, sphere, monkeypatch):
        """Intersection never recomputes the inverse."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.ray import Ray
        from raykernel.core.transform import scaling
        from raykernel.core.tuple import point, vector

        sphere.set_transform(scaling(2, 2, 2))

        def fail(self):
            raise AssertionError("invert() called during intersect()")

        monkeypatch.setattr(Matrix, "invert", fail)
        xs = sphere.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert len(xs) == 2


class TestSphereNormal:
    """Tests for Sphere.normal_at()."""

    @pytest.mark.parametrize(
        "p,expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
        ],
    )
    def test_normal_on_axis(self, sphere, p, expected):
        """On an axis the normal is that axis."""
        from raykernel.core.tuple import point, vector

        assert sphere.normal_at(point(*p)) == vector(*expected)

    def test_normal_nonaxial(self, sphere):
        """At a non-axial point the normal points away from the center."""
        from raykernel.core.tuple import point, vector

        r = math.sqrt(3) / 3
        assert sphere.normal_at(point(r, r, r)) == vector(r, r, r)

    def test_normal_is_normalized(self, sphere):
        """The normal has unit length."""
        from raykernel.core.tuple import point

        r = math.sqrt(3) / 3
        n = sphere.normal_at(point(r, r, r))
        assert n == n.normalize()

    def test_normal_translated(self, sphere):
        """Translation does not tilt the normal."""
        from raykernel.core.transform import translation
        from raykernel.core.tuple import point, vector

        sphere.set_transform(translation(0, 1, 0))
        assert sphere.normal_at(point(0, 1.70711, -0.70711)) == vector(0, 0.70711, -0.70711)

    def test_normal_scaled_and_rotated(self, sphere):
        """Non-uniform scaling uses the inverse transpose."""
        from raykernel.core.transform import rotation_z, scaling
        from raykernel.core.tuple import point, vector

        sphere.set_transform(scaling(1, 0.5, 1) @ rotation_z(math.pi / 5))
        half = math.sqrt(2) / 2
        assert sphere.normal_at(point(0, half, -half)) == vector(0, 0.97014, -0.24254)

    def test_normal_perpendicular_under_nonuniform_scaling(self, sphere):
        """The normal stays perpendicular to the squashed surface."""
        from raykernel.core.transform import scaling
        from raykernel.core.tuple import point, vector

        sphere.set_transform(scaling(2, 1, 1))
        # Surface x^2/4 + y^2 + z^2 = 1, gradient (x/2, 2y, 2z)
        p = point(math.sqrt(2), math.sqrt(2) / 2, 0)
        n = sphere.normal_at(p)
        tangent = vector(-2, 1, 0)
        assert abs(n.dot(tangent)) < 1e-9
        assert n == vector(1, 2, 0).normalize()

    def test_forward_transform_would_be_wrong(self, sphere):
        """Using the forward transform gives a non-perpendicular normal."""
        from raykernel.core.transform import scaling
        from raykernel.core.tuple import ORIGIN, point

        m = scaling(2, 1, 1)
        sphere.set_transform(m)
        p = point(math.sqrt(2), math.sqrt(2) / 2, 0)
        wrong = m @ (sphere.transform_inverse @ p - ORIGIN)
        assert wrong.normalize() != sphere.normal_at(p)

    def test_normal_w_is_zero(self, sphere):
        """The w leaked by the inverse transpose is cleared."""
        from raykernel.core.transform import translation
        from raykernel.core.tuple import point

        sphere.set_transform(translation(3, -2, 1))
        assert sphere.normal_at(point(4, -2, 1)).w == 0.0
