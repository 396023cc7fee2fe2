"""Dense matrices with cofactor-based determinant and inverse.

This module provides the Matrix type used for affine transforms. Matrices are
immutable values: transposition, multiplication and inversion always return new
matrices. Any square size is supported so that the submatrices produced during
cofactor expansion (3x3, 2x2, 1x1) are ordinary matrices too, but transforms
and tuple multiplication are 4x4 only.

The determinant uses the closed form for 1x1 and 2x2 matrices and cofactor
expansion along row 0 otherwise:

    det(M) = sum_i M[0, i] * cofactor(0, i)
    cofactor(r, c) = (-1)^(r + c) * det(submatrix(r, c))

The inverse is the adjugate over the determinant. Entry (col, row) of the
result is cofactor(row, col) / det, so the transpose is folded into the index
swap.

Example:
    >>> from phongtrace.core.matrix import Matrix
    >>> from phongtrace.core.tuples import point
    >>> m = Matrix.as_2x2([1, 5, -3, 2])
    >>> m.determinant()
    17.0
    >>> Matrix.identity() @ point(1, 2, 3)
    Tuple4(x=1.0, y=2.0, z=3.0, w=1.0)
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from phongtrace.core.tuples import EPSILON, Tuple4

# Determinants smaller than this (in absolute value) mark a singular matrix
PRECISION = 1e-12


class MatrixNotInvertibleError(ValueError):
    """Raised when inverting a matrix whose determinant is (nearly) zero."""


class Matrix:
    """An immutable row-major matrix of float64 values.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, width: int, height: int, data: Sequence[float]) -> None:
        """Create a matrix from row-major data.

        Args:
            width: Number of columns.
            height: Number of rows.
            data: Row-major element values, exactly width * height of them.

        Raises:
            ValueError: If the matrix would be empty or the element count
                does not match the dimensions.
        """
        if width * height == 0:
            raise ValueError("Can't construct an empty matrix")
        if len(data) != width * height:
            raise ValueError(
                f"Matrix dimensions {height}x{width} don't match "
                f"given element count {len(data)}"
            )

        self._width = width
        self._height = height
        self._data = np.array(data, dtype=np.float64).reshape(height, width)
        self._data.setflags(write=False)
        self._inverse: Matrix | None = None

    @classmethod
    def _from_array(cls, array: npt.NDArray[np.float64]) -> Matrix:
        height, width = array.shape
        return cls(width, height, array.ravel().tolist())

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def as_1x1(cls, data: Sequence[float]) -> Matrix:
        return cls(1, 1, data)

    @classmethod
    def as_2x2(cls, data: Sequence[float]) -> Matrix:
        return cls(2, 2, data)

    @classmethod
    def as_3x3(cls, data: Sequence[float]) -> Matrix:
        return cls(3, 3, data)

    @classmethod
    def as_4x4(cls, data: Sequence[float]) -> Matrix:
        return cls(4, 4, data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Create a matrix from a list of rows.

        Raises:
            ValueError: If there are no rows or the rows differ in length.
        """
        if not rows:
            raise ValueError("Can't construct an empty matrix")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {i} has {len(row)} elements, expected {width}")
        return cls(width, len(rows), [value for row in rows for value in row])

    @classmethod
    def zero(cls, width: int = 4, height: int | None = None) -> Matrix:
        if height is None:
            height = width
        return cls(width, height, [0.0] * (width * height))

    @classmethod
    def identity(cls, n: int = 4) -> Matrix:
        return cls._from_array(np.identity(n, dtype=np.float64))

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the elements as a (height, width) array."""
        return self._data.copy()

    def is_square(self) -> bool:
        return self._width == self._height

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(
            np.array_equal(self._data, other._data)
        )

    def approx_eq(self, other: Matrix, epsilon: float = EPSILON) -> bool:
        """Check element-wise equality within a tolerance."""
        if self._data.shape != other._data.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) < epsilon))

    def __repr__(self) -> str:
        rows = ", ".join(str(row) for row in self._data.tolist())
        return f"Matrix({self._height}x{self._width}: [{rows}])"

    # =========================================================================
    # Products
    # =========================================================================

    def __matmul__(self, other: Matrix | Tuple4) -> Matrix | Tuple4:
        """Multiply by another matrix or by a Tuple4.

        Matrix products are not commutative. For a chain ``A @ B @ p`` the
        rightmost transform B is applied to p first.

        Raises:
            ValueError: If the dimensions are incompatible, or a tuple is
                multiplied by a matrix that is not 4x4.
        """
        if isinstance(other, Tuple4):
            return self._multiply_tuple(other)
        if isinstance(other, Matrix):
            if self._width != other._height:
                raise ValueError(
                    f"Dimensions of matrices don't match: "
                    f"{self._height}x{self._width} @ {other._height}x{other._width}"
                )
            return Matrix._from_array(self._data @ other._data)
        return NotImplemented

    def _multiply_tuple(self, t: Tuple4) -> Tuple4:
        if self._width != 4 or self._height != 4:
            raise ValueError(
                f"Only 4x4 matrices can multiply a tuple, got {self._height}x{self._width}"
            )
        x, y, z, w = (self._data @ np.array([t.x, t.y, t.z, t.w])).tolist()
        return Tuple4(x, y, z, w)

    # =========================================================================
    # Linear algebra
    # =========================================================================

    def transpose(self) -> Matrix:
        return Matrix._from_array(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Remove one row and one column."""
        reduced = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix._from_array(reduced)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        sign = -1.0 if (row + col) % 2 == 1 else 1.0
        return sign * self.minor(row, col)

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along row 0.

        Raises:
            ValueError: If the matrix is not square.
        """
        if not self.is_square():
            raise ValueError("Determinant is only defined for square matrices")

        d = self._data
        if self._width == 1:
            return float(d[0, 0])
        if self._width == 2:
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        return sum(float(d[0, col]) * self.cofactor(0, col) for col in range(self._width))

    def is_invertible(self) -> bool:
        return abs(self.determinant()) >= PRECISION

    def inverse(self) -> Matrix:
        """Compute the inverse via the adjugate.

        The result is cached on this matrix, which is safe because matrices
        never change after construction.

        Returns:
            The inverse matrix.

        Raises:
            ValueError: If the matrix is not square.
            MatrixNotInvertibleError: If |determinant| < PRECISION.
        """
        if self._inverse is not None:
            return self._inverse
        if not self.is_square():
            raise ValueError("Inverse is only defined for square matrices")

        det = self.determinant()
        if abs(det) < PRECISION:
            raise MatrixNotInvertibleError(f"Matrix is not invertible (determinant {det!r})")

        n = self._width
        result = np.empty((n, n), dtype=np.float64)
        for row in range(n):
            for col in range(n):
                result[col, row] = self.cofactor(row, col) / det

        self._inverse = Matrix._from_array(result)
        return self._inverse
