"""Intersection records and hit selection.

An Intersection pairs a ray parameter t with the id of the object that
produced it. It refers to the object by id only, so intersections never hold
the objects that created them.

Example:
    >>> from raykernel.scene.intersection import Intersection, hit, intersections
    >>> xs = intersections(Intersection(-1.0, 7), Intersection(1.0, 7))
    >>> hit(xs)
    Intersection(t=1.0, object_id=7)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from raykernel.core.tuple import approx_equal


@dataclass(frozen=True, eq=False)
class Intersection:
    """A ray parameter at which a ray meets an object.

    Attributes:
        t: Ray parameter of the intersection. May be negative (behind the origin).
        object_id: Id of the object that was intersected.
    """

    t: float
    object_id: int

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.object_id == other.object_id and approx_equal(self.t, other.t)


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by ascending t."""
    return sorted(xs, key=lambda x: x.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Single linear scan for the smallest non-negative t. Entries with t < 0
    are skipped. Among equal t values any one of them may be returned.

    Args:
        xs: Intersections in any order, possibly empty.

    Returns:
        The nearest intersection with t >= 0, or None if there is none.
    """
    best = None
    for x in xs:
        if x.t < 0:
            continue
        if best is None or x.t < best.t:
            best = x
    return best
