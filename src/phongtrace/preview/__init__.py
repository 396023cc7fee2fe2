"""Preview module for image output.

Components:
    export: ASCII PPM and PNG encoders

Example:
    >>> from phongtrace.preview import save_ppm
    >>> save_ppm(canvas, "output.ppm")
"""

from phongtrace.preview.export import (
    PPM_MAGIC,
    PPM_MAX,
    RasterImage,
    encode_ppm,
    save_png,
    save_ppm,
    write_ppm,
)

__all__ = [
    "RasterImage",
    "encode_ppm",
    "write_ppm",
    "save_ppm",
    "save_png",
    "PPM_MAGIC",
    "PPM_MAX",
]
