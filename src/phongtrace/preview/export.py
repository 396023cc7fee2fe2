"""Image export utilities for rendered canvases.

This module encodes rasters as image files. All encoders read the same 8-bit
quantization (Canvas.to_rgb8), so a pixel written as 0.5 is 128 in every
format.

Supported formats:
    - PPM (ASCII "P3", one text line per raster row)
    - PNG (8-bit RGB via Pillow)

The P3 layout is:

    P3
    <width> <height>
    255
    R G B R G B ...   (one line per raster row, top row first)

Any object with ``width``, ``height`` and ``to_rgb8()`` can be exported.

Example:
    >>> from phongtrace.preview.export import encode_ppm, save_png
    >>> from phongtrace.core.canvas import Canvas
    >>>
    >>> canvas = Canvas(5, 3)
    >>> encode_ppm(canvas).splitlines()[:3]
    ['P3', '5 3', '255']
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Protocol, TextIO

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

PPM_MAGIC = "P3"
PPM_MAX = 255


class RasterImage(Protocol):
    """Interface the encoders need from a raster."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def to_rgb8(self) -> npt.NDArray[np.uint8]: ...


def _rgb8(image: RasterImage) -> npt.NDArray[np.uint8]:
    pixels = image.to_rgb8()
    expected = (image.height, image.width, 3)
    if pixels.shape != expected:
        raise ValueError(f"Raster data shape {pixels.shape} doesn't match {expected}")
    return pixels


def write_ppm(image: RasterImage, stream: TextIO) -> None:
    """Write an image to a text stream as ASCII PPM.

    Args:
        image: The raster to encode.
        stream: A writable text stream (file, sys.stdout, io.StringIO).
    """
    pixels = _rgb8(image)
    stream.write(f"{PPM_MAGIC}\n{image.width} {image.height}\n{PPM_MAX}\n")
    for row in pixels:
        stream.write(" ".join(str(int(channel)) for channel in row.ravel()))
        stream.write("\n")


def encode_ppm(image: RasterImage) -> str:
    """Encode an image as an ASCII PPM string."""
    buffer = StringIO()
    write_ppm(image, buffer)
    return buffer.getvalue()


def save_ppm(image: RasterImage, filepath: str | Path) -> None:
    """Save an image as an ASCII PPM file."""
    with open(filepath, "w", encoding="ascii", newline="\n") as f:
        write_ppm(image, f)


def save_png(image: RasterImage, filepath: str | Path) -> None:
    """Save an image as an 8-bit RGB PNG file."""
    # (H, W, 3) uint8 arrays are read as RGB
    pil_image = PILImage.fromarray(_rgb8(image))
    pil_image.save(filepath)
