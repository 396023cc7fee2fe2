"""Geometry module for shape primitives and intersection records.

This module provides the sphere primitive and the structures that record
where rays meet it:

Components:
    sphere: Transformed unit sphere with ray intersection and normals
    intersection: Intersection records and ordered intersection sets

Ray-object intersection follows the pattern:
    xs = shape.intersect(ray)       # all roots, ascending t
    hit = xs.hit()                  # smallest non-negative t, or None
"""

from .intersection import Intersection, Intersections
from .sphere import Sphere

__all__ = [
    "Sphere",
    "Intersection",
    "Intersections",
]
