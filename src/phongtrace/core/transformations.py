"""Affine transform constructors.

Each constructor returns the 4x4 identity matrix with specific cells
overwritten. Transforms combine by matrix multiplication; in a product
``C @ B @ A`` applied to a point, A acts first. ``compose`` builds such a chain
from transforms listed in the order they should be applied.

Rotations use radians and follow the left-handed convention: looking along
the positive axis toward the origin, positive angles turn clockwise.

Example:
    >>> import math
    >>> from phongtrace.core.transformations import rotation_x
    >>> from phongtrace.core.tuples import point
    >>> p = rotation_x(math.pi / 2) @ point(0, 1, 0)
    >>> p.approx_eq(point(0, 0, 1))
    True
"""

from __future__ import annotations

import math

import numpy as np

from phongtrace.core.matrix import Matrix


def _from_cells(cells: dict[tuple[int, int], float]) -> Matrix:
    data = np.identity(4, dtype=np.float64)
    for (row, col), value in cells.items():
        data[row, col] = value
    return Matrix.as_4x4(data.ravel().tolist())


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors (w = 0) are unaffected."""
    return _from_cells({(0, 3): x, (1, 3): y, (2, 3): z})


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale each axis independently. Negative values reflect."""
    return _from_cells({(0, 0): x, (1, 1): y, (2, 2): z})


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return _from_cells({(1, 1): c, (1, 2): -s, (2, 1): s, (2, 2): c})


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return _from_cells({(0, 0): c, (0, 2): s, (2, 0): -s, (2, 2): c})


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return _from_cells({(0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c})


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Move each component in proportion to the other two.

    Args:
        xy: How much x moves in proportion to y.
        xz: How much x moves in proportion to z.
        yx: How much y moves in proportion to x.
        yz: How much y moves in proportion to z.
        zx: How much z moves in proportion to x.
        zy: How much z moves in proportion to y.
    """
    return _from_cells(
        {(0, 1): xy, (0, 2): xz, (1, 0): yx, (1, 2): yz, (2, 0): zx, (2, 1): zy}
    )


def compose(*transforms: Matrix) -> Matrix:
    """Chain transforms given in application order.

    ``compose(a, b, c)`` equals ``c @ b @ a``: a is applied first.
    With no arguments the identity is returned.
    """
    result = Matrix.identity()
    for transform in transforms:
        result = transform @ result
    return result
