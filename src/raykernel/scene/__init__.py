"""Scene module for intersection records and hit selection.

Components:
    intersection: Intersection record (t, object id), sorted collection
        helper and nearest non-negative hit selection
"""

from .intersection import Intersection, hit, intersections

__all__ = [
    "Intersection",
    "hit",
    "intersections",
]
