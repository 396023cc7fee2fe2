"""Ray data structure.

A ray is an origin point plus a direction vector. Rays are created per traced
path and are immutable. Transforming a ray by a sphere's inverse transform
moves it into object space, where the sphere is the unit sphere at the origin.

Example:
    >>> from phongtrace.core.ray import Ray
    >>> from phongtrace.core.tuples import point, vector
    >>> ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    >>> ray.position(2.5)
    Tuple4(x=4.5, y=3.0, z=4.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from phongtrace.core.matrix import Matrix
from phongtrace.core.tuples import Tuple4


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w = 1).
        direction: The direction vector of the ray (w = 0). It is not
            normalized, so that t values stay meaningful after the ray is
            transformed into object space.
    """

    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + direction * t.
        """
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> Ray:
        """Map both origin and direction through a 4x4 matrix."""
        return Ray(m @ self.origin, m @ self.direction)
