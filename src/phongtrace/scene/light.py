"""Point light source."""

from __future__ import annotations

from dataclasses import dataclass

from phongtrace.core.color import Color
from phongtrace.core.tuples import Tuple4


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting equally in all directions.

    Attributes:
        position: Where the light sits in world space (a point).
        intensity: The color and brightness of the light.

    Raises:
        ValueError: If position is not a point.
    """

    position: Tuple4
    intensity: Color

    def __post_init__(self) -> None:
        if not self.position.is_point():
            raise ValueError(f"Light position must be a point (w = 1), got {self.position!r}")
