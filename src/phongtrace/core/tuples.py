"""Homogeneous 4-component tuples for points and vectors.

This module provides the Tuple4 value type used throughout the renderer for
positions and directions. The fourth component ``w`` distinguishes the two:

    - w == 1.0: a point (affected by translation)
    - w == 0.0: a vector (a direction, invariant under translation)

Arithmetic keeps this convention without explicit renormalization:
point - point yields a vector, point + vector yields a point, and
vector + vector yields a vector.

Example:
    >>> from phongtrace.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> (p + v * 2.0).z
    5.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance for approximate floating-point comparisons
EPSILON = 1e-6


@dataclass(frozen=True)
class Tuple4:
    """A homogeneous (x, y, z, w) tuple.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: The homogeneous component (1.0 for points, 0.0 for vectors).
    """

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def point(cls, x: float, y: float, z: float) -> Tuple4:
        """Create a point (w = 1)."""
        return cls(float(x), float(y), float(z), 1.0)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> Tuple4:
        """Create a vector (w = 0)."""
        return cls(float(x), float(y), float(z), 0.0)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: Tuple4) -> Tuple4:
        return Tuple4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple4) -> Tuple4:
        return Tuple4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple4:
        return Tuple4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple4:
        return Tuple4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Tuple4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Tuple4:
        return self * (1.0 / scalar)

    def magnitude(self) -> float:
        """Compute the Euclidean length of the (x, y, z) part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Tuple4:
        """Scale the tuple to unit magnitude.

        Returns:
            A tuple in the same direction with magnitude 1.

        Raises:
            ValueError: If the tuple has zero magnitude.
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise ValueError(f"Cannot normalize zero-length tuple {self!r}")
        return self / mag

    def dot(self, other: Tuple4) -> float:
        """Compute the dot product over all four components."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple4) -> Tuple4:
        """Compute the cross product of the (x, y, z) parts.

        The result is always a vector.
        """
        return Tuple4.vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tuple4) -> Tuple4:
        """Reflect this vector about a normal.

        Args:
            normal: The surface normal (should be normalized).

        Returns:
            The reflected vector ``v - 2 * dot(v, n) * n``.
        """
        return self - normal * (2.0 * self.dot(normal))

    def approx_eq(self, other: Tuple4, epsilon: float = EPSILON) -> bool:
        """Check component-wise equality within a tolerance."""
        return (
            abs(self.x - other.x) < epsilon
            and abs(self.y - other.y) < epsilon
            and abs(self.z - other.z) < epsilon
            and abs(self.w - other.w) < epsilon
        )


def point(x: float, y: float, z: float) -> Tuple4:
    """Create a point (w = 1)."""
    return Tuple4.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple4:
    """Create a vector (w = 0)."""
    return Tuple4.vector(x, y, z)


# World origin, used as the center of every untransformed sphere
ORIGIN = Tuple4.point(0.0, 0.0, 0.0)
