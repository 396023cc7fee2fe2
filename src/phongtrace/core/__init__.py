"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Homogeneous points and vectors (Tuple4)
    color: RGB color values
    matrix: Matrices with cofactor determinant and inverse
    transformations: Translation, scaling, rotation and shearing constructors
    ray: Ray data structure
    canvas: Taichi-backed raster buffer with 8-bit quantization
    render: Render driver tracing one ray per pixel

Points carry w = 1 and vectors w = 0, so multiplying either by an affine
matrix needs no special casing: translation moves points and leaves
vectors alone.
"""

from .canvas import MAX_CANVAS_HEIGHT, MAX_CANVAS_WIDTH, Canvas
from .color import BLACK, WHITE, Color
from .matrix import PRECISION, Matrix, MatrixNotInvertibleError
from .ray import Ray
from .transformations import (
    compose,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from .tuples import EPSILON, ORIGIN, Tuple4, point, vector

# Note: render is NOT imported here to avoid circular imports, since it
# depends on the scene and camera packages.
# Import it directly when needed:
#   from phongtrace.core.render import Renderer

__all__ = [
    "Tuple4",
    "point",
    "vector",
    "ORIGIN",
    "EPSILON",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "MatrixNotInvertibleError",
    "PRECISION",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "compose",
    "Ray",
    "Canvas",
    "MAX_CANVAS_WIDTH",
    "MAX_CANVAS_HEIGHT",
]
