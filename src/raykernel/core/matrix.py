"""Square matrices of order 2, 3 and 4.

Matrices are immutable and stored row-major in a flat tuple. The inverse is
built from cofactors (adjugate over determinant) rather than row reduction,
and the determinant uses recursive Laplace expansion along the first row.
That expansion is factorial in the order, so orders above 4 are rejected at
construction and order 1 is never produced by submatrix().

Invertibility compares the determinant to exactly zero. A near-singular
matrix is therefore treated as invertible and yields an inverse with very
large, unstable entries; callers composing extreme scalings should check
determinant() themselves.

Example:
    >>> from raykernel.core.matrix import IDENTITY, Matrix
    >>> from raykernel.core.tuple import point
    >>> m = Matrix.from_rows([[1, 0, 0, 5], [0, 1, 0, -3], [0, 0, 1, 2], [0, 0, 0, 1]])
    >>> m @ point(-3, 4, 5) == point(2, 1, 7)
    True
    >>> m.invert() @ m == IDENTITY
    True
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np
import numpy.typing as npt

from raykernel.core.errors import InvalidDimension, NotInvertible
from raykernel.core.tuple import Tuple, approx_equal

# Supported matrix orders; the cofactor determinant is only used within this range
MIN_ORDER = 2
MAX_ORDER = 4


class Matrix:
    """An immutable n x n matrix with n in {2, 3, 4}.

    Attributes:
        order: The number of rows (and columns).
    """

    __slots__ = ("_order", "_values")

    def __init__(self, values: Iterable[float]) -> None:
        """Build a matrix from a flat row-major sequence of n*n values.

        Args:
            values: The matrix elements, row by row.

        Raises:
            InvalidDimension: If the length is not 4, 9 or 16.
        """
        flat = tuple(float(v) for v in values)
        order = math.isqrt(len(flat))
        if order * order != len(flat) or not MIN_ORDER <= order <= MAX_ORDER:
            raise InvalidDimension(
                f"Matrix needs 4, 9 or 16 values, got {len(flat)}"
            )
        self._order = order
        self._values = flat

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from nested rows.

        Raises:
            InvalidDimension: If the rows do not form a supported square.
        """
        if any(len(row) != len(rows) for row in rows):
            raise InvalidDimension("Matrix rows must form a square")
        return cls(v for row in rows for v in row)

    @classmethod
    def _build(cls, order: int, values: list[float]) -> Matrix:
        # Skips validation for matrices assembled by the methods below
        m = cls.__new__(cls)
        m._order = order
        m._values = tuple(values)
        return m

    @property
    def order(self) -> int:
        return self._order

    def at(self, row: int, col: int) -> float:
        """Return the element at (row, col).

        Raises:
            IndexError: If row or col is outside the matrix.
        """
        if not (0 <= row < self._order and 0 <= col < self._order):
            raise IndexError(f"({row}, {col}) is outside a {self._order}x{self._order} matrix")
        return self._values[row * self._order + col]

    def rows(self) -> list[tuple[float, ...]]:
        n = self._order
        return [self._values[r * n : (r + 1) * n] for r in range(n)]

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Export the matrix as a (n, n) float64 NumPy array."""
        return np.array(self._values, dtype=np.float64).reshape(self._order, self._order)

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    def multiply(self, other: Matrix) -> Matrix:
        """Standard matrix product self x other.

        Raises:
            InvalidDimension: If the orders differ.
        """
        if self._order != other._order:
            raise InvalidDimension(
                f"Cannot multiply {self._order}x{self._order} by {other._order}x{other._order}"
            )
        n = self._order
        a = self._values
        b = other._values
        values = [0.0] * (n * n)
        for row in range(n):
            for col in range(n):
                values[row * n + col] = sum(a[row * n + k] * b[k * n + col] for k in range(n))
        return Matrix._build(n, values)

    def multiply_tuple(self, t: Tuple) -> Tuple:
        """Multiply a 4x4 matrix by a column tuple.

        The tuple's w takes part in the product, so the translation column is
        applied to points (w = 1) and drops out for vectors (w = 0).

        Raises:
            InvalidDimension: If the matrix is not 4x4.
        """
        if self._order != 4:
            raise InvalidDimension(
                f"Only 4x4 matrices multiply tuples, got {self._order}x{self._order}"
            )
        v = self._values
        return Tuple(
            v[0] * t.x + v[1] * t.y + v[2] * t.z + v[3] * t.w,
            v[4] * t.x + v[5] * t.y + v[6] * t.z + v[7] * t.w,
            v[8] * t.x + v[9] * t.y + v[10] * t.z + v[11] * t.w,
            v[12] * t.x + v[13] * t.y + v[14] * t.z + v[15] * t.w,
        )

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.multiply_tuple(other)
        return NotImplemented

    def transpose(self) -> Matrix:
        n = self._order
        return Matrix._build(n, [self._values[col * n + row] for row in range(n) for col in range(n)])

    # -------------------------------------------------------------------------
    # Determinant and inverse
    # -------------------------------------------------------------------------

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        if self._order == 2:
            a, b, c, d = self._values
            return a * d - b * c
        return sum(self._values[col] * self.cofactor(0, col) for col in range(self._order))

    def submatrix(self, row: int, col: int) -> Matrix:
        """Remove one row and one column.

        Raises:
            InvalidDimension: If the matrix is 2x2 (order 1 is unsupported).
            IndexError: If row or col is outside the matrix.
        """
        n = self._order
        if n == MIN_ORDER:
            raise InvalidDimension("Cannot take a submatrix of a 2x2 matrix")
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"({row}, {col}) is outside a {n}x{n} matrix")
        values = [
            self._values[r * n + c]
            for r in range(n)
            if r != row
            for c in range(n)
            if c != col
        ]
        return Matrix._build(n - 1, values)

    def minor(self, row: int, col: int) -> float:
        if self._order == MIN_ORDER:
            if row not in (0, 1) or col not in (0, 1):
                raise IndexError(f"({row}, {col}) is outside a 2x2 matrix")
            # The 1x1 remainder is its own determinant
            return self.at(1 - row, 1 - col)
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return minor if (row + col) % 2 == 0 else -minor

    def is_invertible(self) -> bool:
        # Exact comparison; near-singular matrices count as invertible
        return self.determinant() != 0

    def invert(self) -> Matrix:
        """Inverse via the adjugate: element [col, row] = cofactor(row, col) / det.

        Raises:
            NotInvertible: If the determinant is exactly zero.
        """
        det = self.determinant()
        if det == 0:
            raise NotInvertible("Matrix is not invertible (determinant is 0)")
        n = self._order
        values = [0.0] * (n * n)
        for row in range(n):
            for col in range(n):
                values[col * n + row] = self.cofactor(row, col) / det
        return Matrix._build(n, values)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._order != other._order:
            return False
        return all(approx_equal(a, b) for a, b in zip(self._values, other._values))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({[list(r) for r in self.rows()]!r})"


def matrix2(*values: float) -> Matrix:
    """Create a 2x2 matrix from 4 row-major values."""
    if len(values) != 4:
        raise InvalidDimension(f"matrix2 needs 4 values, got {len(values)}")
    return Matrix(values)


def matrix3(*values: float) -> Matrix:
    """Create a 3x3 matrix from 9 row-major values."""
    if len(values) != 9:
        raise InvalidDimension(f"matrix3 needs 9 values, got {len(values)}")
    return Matrix(values)


def matrix4(*values: float) -> Matrix:
    """Create a 4x4 matrix from 16 row-major values."""
    if len(values) != 16:
        raise InvalidDimension(f"matrix4 needs 16 values, got {len(values)}")
    return Matrix(values)


IDENTITY = matrix4(
    1, 0, 0, 0,
    0, 1, 0, 0,
    0, 0, 1, 0,
    0, 0, 0, 1,
)


def identity(order: int = 4) -> Matrix:
    """Identity matrix of the given order."""
    if not MIN_ORDER <= order <= MAX_ORDER:
        raise InvalidDimension(f"Unsupported matrix order {order}")
    return Matrix(1.0 if r == c else 0.0 for r in range(order) for c in range(order))
