"""RGB color value type.

Colors are stored as unclamped floating-point intensities. Shading may push
channels above 1.0; clamping and scaling to 8-bit happen only when the image
is quantized for output (see phongtrace.core.canvas).
"""

from __future__ import annotations

from dataclasses import dataclass

from phongtrace.core.tuples import EPSILON


@dataclass(frozen=True)
class Color:
    """An RGB color.

    Attributes:
        r: Red intensity.
        g: Green intensity.
        b: Blue intensity.
    """

    r: float
    g: float
    b: float

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        # Color * Color is the component-wise (Hadamard) product
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, scalar: float) -> Color:
        return self.__mul__(scalar)

    def approx_eq(self, other: Color, epsilon: float = EPSILON) -> bool:
        """Check channel-wise equality within a tolerance."""
        return (
            abs(self.r - other.r) < epsilon
            and abs(self.g - other.g) < epsilon
            and abs(self.b - other.b) < epsilon
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
