"""Scene module for lights and the world container.

This module handles scene representation and ray-scene queries:

Components:
    light: Point light source
    world: World container, shading computations and color resolution

The scene module manages:
    - The list of spheres to intersect
    - The single optional point light
    - Resolving a ray to a color (hit selection and Phong shading)
"""

from .light import PointLight
from .world import BACKGROUND, Computations, World, prepare_computations

__all__ = [
    "PointLight",
    "World",
    "Computations",
    "prepare_computations",
    "BACKGROUND",
]
