"""World container: spheres, one point light, and ray shading.

The World aggregates intersections across all of its spheres and resolves a
ray to a color:

    1. intersect: every sphere's intersections, merged and sorted by t
    2. hit: the smallest non-negative t
    3. prepare_computations: point, eye vector, normal and inside flag
    4. shade_hit: the hit material's Phong lighting under the world light

A ray that hits nothing resolves to BACKGROUND. A world without a light
shades nothing (shade_hit returns None), so color_at also falls back to
BACKGROUND for it.

Tracing only reads the world. Scene changes (adding spheres, moving the
light) belong before or after a render pass, never during one.

Example:
    >>> from phongtrace.core.ray import Ray
    >>> from phongtrace.core.tuples import point, vector
    >>> from phongtrace.scene.world import World
    >>> world = World.default()
    >>> color = world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> round(color.r, 5), round(color.g, 5), round(color.b, 5)
    (0.38066, 0.47583, 0.2855)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from phongtrace.core.color import Color
from phongtrace.core.ray import Ray
from phongtrace.core.transformations import scaling
from phongtrace.core.tuples import Tuple4, point
from phongtrace.geometry.intersection import Intersection, Intersections
from phongtrace.geometry.sphere import Sphere
from phongtrace.materials.material import Material
from phongtrace.scene.light import PointLight

# Color of rays that hit nothing
BACKGROUND = Color(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Computations:
    """Shading data for one intersection.

    Attributes:
        t: The ray parameter of the hit.
        object: The sphere that was hit.
        point: The world-space hit point.
        eye_vector: Unit vector from the point back toward the ray origin.
        normal_vector: Unit surface normal, flipped to face the eye when the
            ray starts inside the object.
        inside: Whether the ray originates inside the object.
    """

    t: float
    object: Sphere
    point: Tuple4
    eye_vector: Tuple4
    normal_vector: Tuple4
    inside: bool


def prepare_computations(intersection: Intersection, ray: Ray) -> Computations:
    """Precompute the shading inputs for an intersection.

    Args:
        intersection: The intersection to shade (normally the hit).
        ray: The ray that produced it.

    Returns:
        The shading data, with the normal flipped toward the eye if the
        ray originates inside the object.
    """
    hit_point = ray.position(intersection.t)
    eye_vector = -ray.direction
    normal_vector = intersection.object.normal_at(hit_point)

    inside = normal_vector.dot(eye_vector) < 0.0
    if inside:
        normal_vector = -normal_vector

    return Computations(
        t=intersection.t,
        object=intersection.object,
        point=hit_point,
        eye_vector=eye_vector,
        normal_vector=normal_vector,
        inside=inside,
    )


@dataclass
class World:
    """A collection of spheres lit by at most one point light.

    Attributes:
        objects: The spheres in the scene.
        light: The scene light, or None for an unlit world.
    """

    objects: list[Sphere] = field(default_factory=list)
    light: PointLight | None = None

    @classmethod
    def default(cls) -> World:
        """Build the reference scene: two concentric spheres and a white light.

        The outer sphere is the unit sphere with a green-tinted material
        (color (0.8, 1.0, 0.6), diffuse 0.7, specular 0.2). The inner sphere
        is scaled by 0.5 with the default material. The light sits at
        (-10, 10, -10).
        """
        light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
        outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
        inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
        return cls(objects=[outer, inner], light=light)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every object.

        Returns:
            All intersections, sorted ascending by t. Overlapping objects
            contribute separate entries.
        """
        intersections = Intersections()
        for obj in self.objects:
            intersections.extend(obj.intersect(ray))
        intersections.sort_by_t()
        return intersections

    def shade_hit(self, comps: Computations) -> Color | None:
        """Shade prepared computations with the world light.

        Returns:
            The lit color, or None if the world has no light.
        """
        if self.light is None:
            return None
        return comps.object.material.lighting(
            self.light, comps.point, comps.eye_vector, comps.normal_vector
        )

    def color_at(self, ray: Ray) -> Color:
        """Resolve a ray to a color.

        Returns:
            The shaded color of the visible hit, or BACKGROUND if nothing is
            hit or the world has no light.
        """
        hit = self.intersect(ray).hit()
        if hit is None:
            return BACKGROUND

        color = self.shade_hit(prepare_computations(hit, ray))
        if color is None:
            return BACKGROUND
        return color
