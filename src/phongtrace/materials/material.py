"""Phong material and local illumination model.

This module implements the Phong reflection model, which approximates the
light leaving a surface point as the sum of three terms:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * dot(L, N)
    specular = intensity * specular * dot(R, E)^shininess

where:
    effective_color = material.color * light.intensity (component-wise)
    L = normalized vector from the point toward the light
    N = surface normal
    R = reflect(-L, N)
    E = vector from the point toward the eye

When the light is behind the surface (dot(L, N) < 0) only the ambient term
contributes. When the reflection points away from the eye (dot(R, E) <= 0)
the specular term is zero. The sum is not clamped; values above 1.0 are
handled when the image is quantized.

Example:
    >>> from phongtrace.core.color import Color
    >>> from phongtrace.core.tuples import point, vector
    >>> from phongtrace.materials.material import Material
    >>> from phongtrace.scene.light import PointLight
    >>> light = PointLight(point(0, 0, -10), Color(1, 1, 1))
    >>> c = Material().lighting(light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    >>> c.approx_eq(Color(1.9, 1.9, 1.9))
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from phongtrace.core.color import BLACK, Color
from phongtrace.core.tuples import Tuple4

if TYPE_CHECKING:
    from phongtrace.scene.light import PointLight


@dataclass(frozen=True)
class Material:
    """Phong surface parameters.

    Materials are immutable so the parameters always satisfy the checks in
    __post_init__. Derive variants with dataclasses.replace, which validates
    again, and assign the result to the sphere.

    Attributes:
        color: The surface color.
        ambient: Fraction of the light treated as uniform background light.
        diffuse: Weight of the matte (Lambertian) reflection.
        specular: Weight of the highlight.
        shininess: Specular exponent; larger values give smaller, tighter
            highlights (10 is very broad, 200 is very small).
    """

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {value}")

    def lighting(
        self,
        light: PointLight,
        point: Tuple4,
        eye_vector: Tuple4,
        normal_vector: Tuple4,
    ) -> Color:
        """Shade a surface point with the Phong model.

        Args:
            light: The point light illuminating the surface.
            point: The surface point being shaded.
            eye_vector: Unit vector from the point toward the eye.
            normal_vector: Unit surface normal at the point.

        Returns:
            The unclamped sum of the ambient, diffuse and specular terms.
        """
        effective_color = self.color * light.intensity
        light_vector = (light.position - point).normalize()
        ambient = effective_color * self.ambient

        light_dot_normal = light_vector.dot(normal_vector)
        if light_dot_normal < 0.0:
            # Light is on the other side of the surface
            diffuse = BLACK
            specular = BLACK
        else:
            diffuse = effective_color * self.diffuse * light_dot_normal

            reflect_vector = (-light_vector).reflect(normal_vector)
            reflect_dot_eye = reflect_vector.dot(eye_vector)
            if reflect_dot_eye <= 0.0:
                specular = BLACK
            else:
                factor = reflect_dot_eye**self.shininess
                specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular
