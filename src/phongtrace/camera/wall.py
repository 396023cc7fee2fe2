"""Wall-projection camera for primary ray generation.

Rays leave a fixed eye point and pass through the centers of pixels laid out
on a square "wall" perpendicular to the z axis:

    pixel_size = wall_size / max(width, height)
    world_x = -half_width  + pixel_size * (px + 0.5)
    world_y =  half_height - pixel_size * (py + 0.5)

with half_width = pixel_size * width / 2 and half_height = pixel_size * height / 2.
Pixel row 0 is the top of the wall, so world y decreases as py grows. The
wall is centered on the z axis.

Example:
    >>> from phongtrace.camera.wall import WallCamera, get_ray
    >>> camera = WallCamera(ray_origin=(0.0, 0.0, -5.0), wall_z=10.0, wall_size=7.0)
    >>> ray = get_ray(camera, 50, 50, 101, 101)  # center pixel
    >>> ray.direction.approx_eq(ray.direction.normalize())
    True
"""

from __future__ import annotations

from dataclasses import dataclass

from phongtrace.core.ray import Ray
from phongtrace.core.tuples import point


@dataclass
class WallCamera:
    """Configuration for a wall-projection camera.

    Attributes:
        ray_origin: Eye position in world space (x, y, z).
        wall_z: z coordinate of the wall plane.
        wall_size: Side length of the square wall in world units; the longer
            raster dimension spans it exactly.
    """

    ray_origin: tuple[float, float, float] = (0.0, 0.0, -5.0)
    wall_z: float = 10.0
    wall_size: float = 7.0

    def __post_init__(self) -> None:
        if self.wall_size <= 0.0:
            raise ValueError(f"Wall size must be positive, got {self.wall_size}")
        if self.ray_origin[2] == self.wall_z:
            raise ValueError(
                f"Ray origin {self.ray_origin} lies on the wall plane z = {self.wall_z}"
            )


def get_ray(camera: WallCamera, px: int, py: int, width: int, height: int) -> Ray:
    """Generate the ray through the center of pixel (px, py).

    Args:
        camera: The camera configuration.
        px: Pixel column (0 = left).
        py: Pixel row (0 = top).
        width: Raster width in pixels.
        height: Raster height in pixels.

    Returns:
        A ray from the eye with a normalized direction.

    Raises:
        IndexError: If (px, py) lies outside the raster.
    """
    if not (0 <= px < width and 0 <= py < height):
        raise IndexError(f"Pixel ({px}, {py}) is outside the {width}x{height} raster")

    pixel_size = camera.wall_size / max(width, height)
    half_width = pixel_size * width / 2.0
    half_height = pixel_size * height / 2.0

    world_x = -half_width + pixel_size * (px + 0.5)
    world_y = half_height - pixel_size * (py + 0.5)
    target = point(world_x, world_y, camera.wall_z)

    origin = point(*camera.ray_origin)
    return Ray(origin, (target - origin).normalize())
