"""Camera module for primary ray generation.

Components:
    wall: Wall-projection camera shooting rays from an eye point through
        pixel centers on a plane at fixed z

Ray generation uses pixel coordinates:
    px in [0, width): left to right across the image
    py in [0, height): top to bottom across the image
"""

from .wall import WallCamera, get_ray

__all__ = [
    "WallCamera",
    "get_ray",
]
