"""Render driver that traces one ray per pixel into a canvas.

The Renderer walks the raster row by row, asks the world for the color of
each camera ray, and writes it to its Canvas. Progress is reported after
every row, either through a callback or by iterating render_progressive.

There is no sampling or accumulation: each pixel gets exactly one ray
through its center.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from phongtrace.camera.wall import WallCamera
    >>> from phongtrace.core.render import Renderer
    >>> from phongtrace.scene.world import World
    >>>
    >>> renderer = Renderer(32, 32)
    >>> canvas = renderer.render(World.default(), WallCamera())
    >>> renderer.save("sphere.ppm")
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

from phongtrace.camera.wall import WallCamera, get_ray
from phongtrace.core.canvas import Canvas
from phongtrace.scene.world import World

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


class Renderer:
    """Traces a world through a camera into a canvas of fixed size.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        canvas: The raster the last pass was written to.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize the renderer.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Raises:
            ValueError: If the dimensions are not supported by Canvas.
        """
        self._canvas = Canvas(width, height)

    @property
    def width(self) -> int:
        return self._canvas.width

    @property
    def height(self) -> int:
        return self._canvas.height

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    def _render_row(self, world: World, camera: WallCamera, y: int) -> None:
        for x in range(self.width):
            ray = get_ray(camera, x, y, self.width, self.height)
            self._canvas.put_pixel(world.color_at(ray), (x, y))

    def render(
        self,
        world: World,
        camera: WallCamera,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render a full pass.

        Args:
            world: The scene to trace. It must not be modified during the pass.
            camera: The camera generating primary rays.
            callback: Optional callback called after each row with
                (rows_done, total_rows).

        Returns:
            The canvas holding the rendered image.
        """
        for rows_done, total_rows in self.render_progressive(world, camera):
            if callback is not None:
                callback(rows_done, total_rows)
        return self._canvas

    def render_progressive(
        self,
        world: World,
        camera: WallCamera,
    ) -> Generator[tuple[int, int], None, None]:
        """Render a full pass, yielding progress after each row.

        Yields:
            Tuple of (rows_done, total_rows).
        """
        self._canvas.clear()
        for y in range(self.height):
            self._render_row(world, camera, y)
            yield (y + 1, self.height)

    def save(self, filepath: str | Path) -> None:
        """Save the canvas, choosing the format from the file suffix.

        Args:
            filepath: Output path ending in .ppm or .png.

        Raises:
            ValueError: If the suffix is not supported.
        """
        from phongtrace.preview.export import save_png, save_ppm

        suffix = Path(filepath).suffix.lower()
        if suffix == ".ppm":
            save_ppm(self._canvas, filepath)
        elif suffix == ".png":
            save_png(self._canvas, filepath)
        else:
            raise ValueError(f"Unsupported image format '{suffix}', expected .ppm or .png")

    def __repr__(self) -> str:
        return f"Renderer(width={self.width}, height={self.height})"
