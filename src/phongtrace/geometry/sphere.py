"""Sphere primitive with ray intersection in object space.

Every sphere is geometrically the unit sphere centered at the origin. Size,
position and orientation come entirely from its transform. To intersect a
world-space ray, the ray is moved into object space with the inverse
transform and solved against the unit sphere:

    |O + tD|^2 = 1

Expanding gives a*t^2 + b*t + c = 0 with:

    a = dot(D, D)
    b = 2 * dot(D, O - origin)
    c = dot(O - origin, O - origin) - 1

A negative discriminant means the ray misses. Otherwise both roots are
returned in ascending order, including negative ones; hit selection is left
to Intersections.hit.

Normals are computed in object space and carried back to world space with
the transpose of the inverse transform, which keeps them perpendicular to
the surface under non-uniform scaling. The translation part of that matrix
can leave a non-zero w, so w is reset to 0 before normalizing.

Example:
    >>> from phongtrace.core.ray import Ray
    >>> from phongtrace.core.tuples import point, vector
    >>> from phongtrace.geometry.sphere import Sphere
    >>> xs = Sphere().intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [x.t for x in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from phongtrace.core.matrix import Matrix
from phongtrace.core.ray import Ray
from phongtrace.core.tuples import ORIGIN, Tuple4
from phongtrace.geometry.intersection import Intersection, Intersections
from phongtrace.materials.material import Material


@dataclass(eq=False)
class Sphere:
    """A transformed unit sphere.

    Spheres compare by identity, so intersections can tell which sphere
    they belong to even when two spheres share the same parameters.

    Attributes:
        transform: Object-to-world transform (identity by default).
        material: Surface material (default Material by default).
    """

    transform: Matrix = field(default_factory=Matrix.identity)
    material: Material = field(default_factory=Material)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this sphere.

        Args:
            ray: The ray to test.

        Returns:
            Zero or two intersections in ascending t order. A tangent ray
            yields two intersections with equal t.

        Raises:
            MatrixNotInvertibleError: If the transform is singular.
            ValueError: If the ray direction is the zero vector.
        """
        local_ray = ray.transform(self.transform.inverse())

        sphere_to_ray = local_ray.origin - ORIGIN
        direction = local_ray.direction
        a = direction.dot(direction)
        if a == 0.0:
            raise ValueError("Cannot intersect a ray with a zero-length direction")
        b = 2.0 * direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0.0:
            return Intersections()

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return Intersections([Intersection(t1, self), Intersection(t2, self)])

    def normal_at(self, world_point: Tuple4) -> Tuple4:
        """Compute the unit surface normal at a world-space point.

        Args:
            world_point: A point on the sphere's surface.

        Returns:
            The outward unit normal as a vector (w = 0).

        Raises:
            MatrixNotInvertibleError: If the transform is singular.
        """
        inverse = self.transform.inverse()
        object_point = inverse @ world_point
        object_normal = object_point - ORIGIN
        world_normal = inverse.transpose() @ object_normal
        return Tuple4.vector(world_normal.x, world_normal.y, world_normal.z).normalize()
