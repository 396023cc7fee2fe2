"""Raster buffer backed by a Taichi ndarray.

The canvas is the raster sink of the renderer: the render loop writes one
color per pixel with put_pixel, and the image encoders read the quantized
8-bit result with to_rgb8.

The color buffer is a Taichi vector ndarray of shape (width, height), indexed
[x, y] with y = 0 the top raster row. Stored colors are unclamped linear
intensities; quantization to [0, 255] runs as a Taichi kernel:

    channel = floor(clamp(value, 0, 1) * 255 + 0.5)

which rounds half away from zero for the clamped (non-negative) range.

Ndarrays are plain device allocations: they add no SNode tree to the Taichi
program and are freed with the canvas, so any number of canvases can be
created over a session. The kernels take ndarray arguments and compile once
for all canvases.

Taichi must be initialized (ti.init) before a Canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from phongtrace.core.canvas import Canvas
    >>> from phongtrace.core.color import Color
    >>> canvas = Canvas(5, 3)
    >>> canvas.put_pixel(Color(0.0, 0.5, 0.0), (2, 1))
    >>> canvas.to_rgb8()[1, 2].tolist()
    [0, 128, 0]
"""

# No postponed annotations in this module: Taichi kernels need evaluated
# argument annotations at decoration time.

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from phongtrace.core.color import Color

# Largest supported raster dimensions
MAX_CANVAS_WIDTH = 4096
MAX_CANVAS_HEIGHT = 4096

# Maximum channel value of the 8-bit output
CHANNEL_MAX = 255

ColorBuffer = ti.types.ndarray(dtype=ti.types.vector(3, ti.f32), ndim=2)
ChannelBuffer = ti.types.ndarray(dtype=ti.types.vector(3, ti.i32), ndim=2)


@ti.kernel
def _fill(pixels: ColorBuffer, r: ti.f32, g: ti.f32, b: ti.f32):
    for i, j in pixels:
        pixels[i, j] = tm.vec3(r, g, b)


@ti.kernel
def _quantize(pixels: ColorBuffer, out: ChannelBuffer):
    """Clamp each channel to [0, 1] and scale to [0, CHANNEL_MAX]."""
    for i, j in pixels:
        for c in ti.static(range(3)):
            value = tm.clamp(pixels[i, j][c], 0.0, 1.0)
            out[i, j][c] = ti.cast(ti.floor(value * CHANNEL_MAX + 0.5), ti.i32)


class Canvas:
    """A width x height grid of colors.

    Channels are stored as float32, so get_pixel returns the written color
    rounded to single precision. Quantization reads the same values, so the
    8-bit output is unaffected.

    Attributes:
        width: Raster width in pixels.
        height: Raster height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black canvas.

        Args:
            width: Raster width in pixels (1 to MAX_CANVAS_WIDTH).
            height: Raster height in pixels (1 to MAX_CANVAS_HEIGHT).

        Raises:
            ValueError: If a dimension is not positive or exceeds the maximum.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        if width > MAX_CANVAS_WIDTH or height > MAX_CANVAS_HEIGHT:
            raise ValueError(
                f"Canvas dimensions ({width}x{height}) exceed maximum supported "
                f"({MAX_CANVAS_WIDTH}x{MAX_CANVAS_HEIGHT})"
            )

        self._width = width
        self._height = height
        self._pixels = ti.Vector.ndarray(3, dtype=ti.f32, shape=(width, height))
        self._rgb8 = ti.Vector.ndarray(3, dtype=ti.i32, shape=(width, height))
        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def put_pixel(self, color: Color, at: tuple[int, int]) -> None:
        """Write a color at pixel (x, y).

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        x, y = at
        self._check_bounds(x, y)
        self._pixels[x, y] = [color.r, color.g, color.b]

    def get_pixel(self, at: tuple[int, int]) -> Color:
        """Read the color at pixel (x, y).

        The channels come back at float32 precision: a color written with
        put_pixel compares equal only with approx_eq unless every channel
        is exactly representable in single precision.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        x, y = at
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def fill(self, color: Color) -> None:
        """Set every pixel to the same color."""
        _fill(self._pixels, color.r, color.g, color.b)

    def clear(self) -> None:
        """Reset every pixel to black."""
        _fill(self._pixels, 0.0, 0.0, 0.0)

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Get the unclamped colors as an array of shape (height, width, 3)."""
        # Buffer layout is (width, height, 3); images are (height, width, 3)
        return np.transpose(self._pixels.to_numpy(), (1, 0, 2)).astype(np.float32)

    def to_rgb8(self) -> npt.NDArray[np.uint8]:
        """Quantize to 8-bit channels.

        Returns:
            Array of shape (height, width, 3) with dtype uint8, row 0 being
            the top raster row.
        """
        _quantize(self._pixels, self._rgb8)
        return np.transpose(self._rgb8.to_numpy(), (1, 0, 2)).astype(np.uint8)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
