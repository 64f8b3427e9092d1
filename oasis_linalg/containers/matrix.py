################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Fixed-shape numeric matrix

A Matrix owns a contiguous row-major numpy buffer. Element (r, c) of a matrix
with ``columns`` columns lives at ``data[r * columns + c]`` and the buffer
length always equals ``rows * columns``.

Shape-changing operations (products, transpose, concatenation) return new
matrices. In-place operators compute the full result first and then install
the new shape and buffer together.

Determinant family:

    minor(i, j)     matrix with row i and column j deleted
    cofactor(i, j)  (-1)^(i+j) * det(minor(i, j))
    adjugate        transpose of the cofactor matrix
    determinant     1x1: a, 2x2: a*d - b*c, otherwise (A * adj(A))[0][0]
    inverse         adj(A) / det(A)

The n >= 3 determinant relies on ``A * adj(A) = det(A) * I`` and recurses
through the cofactors of every (n-1)-sized minor, so its cost grows
factorially. ``determinant_lu`` offers an LU-based alternative for large or
floating-point matrices.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Sequence

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from oasis_linalg.config.linalg_params import DEFAULT_PARAMS
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.containers import scalar as kernels
from oasis_linalg.containers.scalar import Scalar
from oasis_linalg.containers.shape import MatrixSize
from oasis_linalg.containers.shape import check_index
from oasis_linalg.containers.shape import flat_index
from oasis_linalg.containers.shape import require_same_size
from oasis_linalg.containers.shape import require_square
from oasis_linalg.containers.shape import validate_dimension
from oasis_linalg.containers.vector import Vector
from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_errors import InvalidDimensionError
from oasis_linalg.linalg_errors import ShapeMismatchError
from oasis_linalg.linalg_errors import SingularMatrixError


_LOG: logging.Logger = logging.getLogger(__name__)


class Matrix:
    """Owned, fixed-shape, mutable row-major grid of numeric elements."""

    __slots__ = ("_size", "_data")

    def __init__(
        self, rows: int = 0, columns: int = 0, dtype: DTypeLike | None = None
    ) -> None:
        """Create a zero-filled matrix.

        Args:
            rows: Number of rows, non-negative
            columns: Number of columns, non-negative
            dtype: Element type, float64 when omitted
        """
        size: MatrixSize = MatrixSize(rows, columns)
        self._size: MatrixSize = size
        self._data: NDArray[Any] = np.zeros(
            size.count, dtype=kernels.resolve_dtype(dtype)
        )

    ############################################################################
    # Construction
    ############################################################################

    @classmethod
    def from_size(cls, size: MatrixSize, dtype: DTypeLike | None = None) -> Matrix:
        """Create a zero-filled matrix with the given shape."""
        return cls(size.rows, size.columns, dtype)

    @classmethod
    def from_matrix(cls, other: Matrix) -> Matrix:
        """Create a deep copy of ``other``."""
        return cls._from_buffer(other._size, other._data.copy())

    @classmethod
    def from_vector(cls, vector: Vector) -> Matrix:
        """Create a single-column matrix holding a copy of ``vector``."""
        return cls._from_buffer(MatrixSize(vector.length(), 1), vector.to_numpy())

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Scalar]],
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """Create a matrix from nested rows.

        Raises:
            ShapeMismatchError: If the rows have different lengths
        """
        row_count: int = len(rows)
        column_count: int = len(rows[0]) if row_count else 0
        for row in rows:
            if len(row) != column_count:
                raise ShapeMismatchError("rows must all have the same length")
        values: list[Scalar] = [value for row in rows for value in row]
        return cls._from_buffer(
            MatrixSize(row_count, column_count), kernels.to_buffer(values, dtype)
        )

    @classmethod
    def from_flat(
        cls,
        rows: int,
        columns: int,
        values: Sequence[Scalar],
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """Create a matrix from a row-major sequence of ``rows * columns`` values.

        Raises:
            ShapeMismatchError: If the number of values does not fit the shape
        """
        size: MatrixSize = MatrixSize(rows, columns)
        if len(values) != size.count:
            raise ShapeMismatchError(
                f"expected {size.count} values for {rows}x{columns}, "
                f"got {len(values)}"
            )
        return cls._from_buffer(size, kernels.to_buffer(list(values), dtype))

    @classmethod
    def from_numpy(cls, array: Any, dtype: DTypeLike | None = None) -> Matrix:
        """Create a matrix from a 2-D array-like.

        Raises:
            InvalidDimensionError: If the array is not two-dimensional
        """
        if np.ndim(array) != 2:
            raise InvalidDimensionError("matrix input must be two-dimensional")
        shape: tuple[int, ...] = np.shape(array)
        return cls._from_buffer(
            MatrixSize(shape[0], shape[1]), kernels.to_buffer(array, dtype)
        )

    @classmethod
    def identity(cls, n: int, dtype: DTypeLike | None = None) -> Matrix:
        """Create an ``n x n`` identity matrix."""
        dim: int = validate_dimension(n, "n")
        matrix: Matrix = cls(dim, dim, dtype)
        matrix._data[:: dim + 1] = 1
        return matrix

    @classmethod
    def _from_buffer(cls, size: MatrixSize, buffer: NDArray[Any]) -> Matrix:
        # Takes ownership of a freshly computed buffer
        if buffer.shape != (size.count,):
            raise ShapeMismatchError(
                f"buffer of {buffer.size} elements does not fit "
                f"{size.rows}x{size.columns}"
            )
        matrix: Matrix = cls.__new__(cls)
        matrix._size = size
        matrix._data = buffer
        return matrix

    def copy(self) -> Matrix:
        """Return a deep copy."""
        return Matrix.from_matrix(self)

    ############################################################################
    # Shape and element access
    ############################################################################

    def rows(self) -> int:
        """Return the number of rows."""
        return self._size.rows

    def columns(self) -> int:
        """Return the number of columns."""
        return self._size.columns

    def size(self) -> MatrixSize:
        """Return the ``(rows, columns)`` shape."""
        return self._size

    def length(self) -> int:
        """Return the larger of the two dimensions."""
        return max(self._size.rows, self._size.columns)

    @property
    def dtype(self) -> np.dtype:
        """Return the element type."""
        return self._data.dtype

    def get(self, row: int, column: int) -> Scalar:
        """Return the element at ``(row, column)``.

        Raises:
            IndexOutOfRangeError: If either index is outside the shape
        """
        return kernels.to_python(self._data[flat_index(self._size, row, column)])

    def set(self, row: int, column: int, value: Scalar) -> None:
        """Store ``value`` at ``(row, column)``, converted to the element type.

        Raises:
            IndexOutOfRangeError: If either index is outside the shape
        """
        index: int = flat_index(self._size, row, column)
        kernels.require_scalar(value, "set")
        self._data[index] = value

    def row(self, row: int) -> Vector:
        """Return a copy of one row as a vector."""
        check_index(row, self._size.rows, "row")
        return Vector.from_numpy(self._grid()[row, :])

    def column(self, column: int) -> Vector:
        """Return a copy of one column as a vector."""
        check_index(column, self._size.columns, "column")
        return Vector.from_numpy(self._grid()[:, column])

    def diagonal(self) -> Vector:
        """Return a copy of the main diagonal as a vector."""
        return Vector.from_numpy(np.diagonal(self._grid()))

    def block(self, row: int, column: int, rows: int, columns: int) -> Matrix:
        """Return a copy of the ``rows x columns`` block starting at ``(row, column)``.

        Raises:
            IndexOutOfRangeError: If the block extends past the matrix
        """
        size: MatrixSize = MatrixSize(rows, columns)
        row_start: int = validate_dimension(row, "row")
        column_start: int = validate_dimension(column, "column")
        if (
            row_start + size.rows > self._size.rows
            or column_start + size.columns > self._size.columns
        ):
            raise IndexOutOfRangeError(
                f"block {size.rows}x{size.columns} at ({row_start}, {column_start}) "
                f"exceeds {self._size.rows}x{self._size.columns}"
            )
        grid: NDArray[Any] = self._grid()[
            row_start : row_start + size.rows,
            column_start : column_start + size.columns,
        ]
        return Matrix._from_buffer(size, grid.copy().reshape(-1))

    def tolist(self) -> list[list[Scalar]]:
        """Return the elements as nested row lists of Python scalars."""
        return self._grid().tolist()  # type: ignore[no-any-return]

    def to_numpy(self) -> NDArray[Any]:
        """Return a copy of the elements as a 2-D numpy array."""
        return self._grid().copy()

    def _grid(self) -> NDArray[Any]:
        # Read-only 2-D view used for slicing; never handed to callers
        view: NDArray[Any] = self._data.reshape(self._size.rows, self._size.columns)
        view.flags.writeable = False
        return view

    ############################################################################
    # Elementwise operations
    ############################################################################

    def add(self, other: Matrix | Scalar) -> Matrix:
        """Return the elementwise sum with a matrix or a scalar.

        Raises:
            ShapeMismatchError: If the matrix shapes differ
        """
        if isinstance(other, Matrix):
            require_same_size(self._size, other._size, "add")
            return Matrix._from_buffer(self._size, self._data + other._data)
        return Matrix._from_buffer(
            self._size, kernels.broadcast_add(self._data, other)
        )

    def subtract(self, other: Matrix | Scalar) -> Matrix:
        """Return the elementwise difference with a matrix or a scalar.

        Raises:
            ShapeMismatchError: If the matrix shapes differ
        """
        if isinstance(other, Matrix):
            require_same_size(self._size, other._size, "subtract")
            return Matrix._from_buffer(self._size, self._data - other._data)
        return Matrix._from_buffer(
            self._size, kernels.broadcast_subtract(self._data, other)
        )

    def divide(self, scalar: Scalar) -> Matrix:
        """Return every element divided by ``scalar``.

        Integer matrices divided by an integer truncate toward zero.
        """
        return Matrix._from_buffer(
            self._size, kernels.broadcast_divide(self._data, scalar)
        )

    def power(self, scalar: Scalar) -> Matrix:
        """Return every element raised to ``scalar``."""
        return Matrix._from_buffer(
            self._size, kernels.broadcast_power(self._data, scalar)
        )

    ############################################################################
    # Products
    ############################################################################

    def multiply(self, other: Matrix | Vector | Scalar) -> Matrix | Vector:
        """Multiply by a matrix, a column vector or a scalar.

        Args:
            other: Right operand. A matrix needs ``other.rows == self.columns``
                and yields a ``(self.rows x other.columns)`` matrix. A vector
                needs ``length == self.columns`` and yields a vector of length
                ``self.rows``. A scalar scales every element.

        Raises:
            ShapeMismatchError: If the inner dimensions differ
        """
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if isinstance(other, Vector):
            return self._vector_product(other)
        return Matrix._from_buffer(
            self._size, kernels.broadcast_multiply(self._data, other)
        )

    def left_multiply(self, vector: Vector) -> Vector:
        """Return the row-vector product ``vector * self``.

        Raises:
            ShapeMismatchError: If ``vector.length() != self.rows()``
        """
        rows: int = self._size.rows
        cols: int = self._size.columns
        if vector.length() != rows:
            raise ShapeMismatchError(
                f"row vector of length {vector.length()} cannot multiply "
                f"a {rows}x{cols} matrix"
            )
        x: NDArray[Any] = vector.to_numpy()
        out: NDArray[Any] = np.zeros(cols, dtype=np.result_type(x, self._data))
        for c in range(cols):
            total: Any = out.dtype.type(0)
            for r in range(rows):
                total += x[r] * self._data[r * cols + c]
            out[c] = total
        return Vector.from_numpy(out)

    def _matrix_product(self, other: Matrix) -> Matrix:
        a_rows: int = self._size.rows
        a_cols: int = self._size.columns
        b_rows: int = other._size.rows
        b_cols: int = other._size.columns
        if a_cols != b_rows:
            raise ShapeMismatchError(
                f"cannot multiply {a_rows}x{a_cols} by {b_rows}x{b_cols}"
            )
        a: NDArray[Any] = self._data
        b: NDArray[Any] = other._data
        out: NDArray[Any] = np.zeros(a_rows * b_cols, dtype=np.result_type(a, b))
        for r in range(a_rows):
            row_base: int = r * a_cols
            for c in range(b_cols):
                total: Any = out.dtype.type(0)
                for k in range(a_cols):
                    total += a[row_base + k] * b[k * b_cols + c]
                out[r * b_cols + c] = total
        return Matrix._from_buffer(MatrixSize(a_rows, b_cols), out)

    def _vector_product(self, vector: Vector) -> Vector:
        rows: int = self._size.rows
        cols: int = self._size.columns
        if vector.length() != cols:
            raise ShapeMismatchError(
                f"cannot multiply {rows}x{cols} matrix by vector of length "
                f"{vector.length()}"
            )
        x: NDArray[Any] = vector.to_numpy()
        out: NDArray[Any] = np.zeros(rows, dtype=np.result_type(self._data, x))
        for r in range(rows):
            row_base: int = r * cols
            total: Any = out.dtype.type(0)
            for c in range(cols):
                total += self._data[row_base + c] * x[c]
            out[r] = total
        return Vector.from_numpy(out)

    ############################################################################
    # Structure
    ############################################################################

    def transpose(self) -> Matrix:
        """Return the ``(columns x rows)`` transpose."""
        rows: int = self._size.rows
        cols: int = self._size.columns
        out: NDArray[Any] = np.zeros(rows * cols, dtype=self._data.dtype)
        for r in range(rows):
            for c in range(cols):
                out[c * rows + r] = self._data[r * cols + c]
        return Matrix._from_buffer(self._size.transposed(), out)

    def hcat(self, other: Matrix | Vector) -> Matrix:
        """Return ``self`` with the columns of ``other`` appended.

        A vector is appended as a single extra column.

        Raises:
            ShapeMismatchError: If the row counts differ
        """
        right: Matrix = (
            Matrix.from_vector(other) if isinstance(other, Vector) else other
        )
        if self._size.rows != right._size.rows:
            raise ShapeMismatchError(
                f"hcat requires equal rows, got {self._size.rows} and "
                f"{right._size.rows}"
            )
        grid: NDArray[Any] = np.hstack((self._grid(), right._grid()))
        size: MatrixSize = MatrixSize(
            self._size.rows, self._size.columns + right._size.columns
        )
        return Matrix._from_buffer(size, grid.copy().reshape(-1))

    def vcat(self, other: Matrix | Vector) -> Matrix:
        """Return ``self`` with the rows of ``other`` appended below.

        A vector is appended as a single extra row.

        Raises:
            ShapeMismatchError: If the column counts differ
        """
        bottom: Matrix = (
            Matrix.from_vector(other).transpose()
            if isinstance(other, Vector)
            else other
        )
        if self._size.columns != bottom._size.columns:
            raise ShapeMismatchError(
                f"vcat requires equal columns, got {self._size.columns} and "
                f"{bottom._size.columns}"
            )
        size: MatrixSize = MatrixSize(
            self._size.rows + bottom._size.rows, self._size.columns
        )
        return Matrix._from_buffer(size, np.concatenate((self._data, bottom._data)))

    ############################################################################
    # Determinant family
    ############################################################################

    def minor(self, row: int, column: int) -> Matrix:
        """Return the matrix with ``row`` and ``column`` removed.

        Raises:
            NotSquareError: If the matrix is not square
            IndexOutOfRangeError: If either index is outside the shape
        """
        require_square(self._size, "minor")
        flat_index(self._size, row, column)
        return self._minor(row, column)

    def cofactor(self, row: int, column: int) -> Scalar:
        """Return ``(-1)^(row+column) * det(minor(row, column))``.

        Raises:
            NotSquareError: If the matrix is not square
            IndexOutOfRangeError: If either index is outside the shape
        """
        require_square(self._size, "cofactor")
        flat_index(self._size, row, column)
        return kernels.to_python(self._cofactor(row, column))

    def determinant(self, params: LinalgParams | None = None) -> Scalar:
        """Return the determinant by recursive cofactor expansion.

        An empty matrix has determinant 1.

        Raises:
            NotSquareError: If the matrix is not square
        """
        require_square(self._size, "determinant")
        active: LinalgParams = params or DEFAULT_PARAMS
        n: int = self._size.rows
        if n > active.cofactor_warn_dim:
            _LOG.warning(
                "Recursive determinant of a %dx%d matrix, cost grows factorially",
                n,
                n,
            )
        return kernels.to_python(self._determinant())

    def determinant_lu(self) -> float:
        """Return the determinant from an LU factorization in double precision.

        Raises:
            NotSquareError: If the matrix is not square
        """
        require_square(self._size, "determinant_lu")
        grid: NDArray[Any] = self._grid()
        if np.iscomplexobj(grid):
            raise TypeError("determinant_lu requires real elements")
        return float(np.linalg.det(grid.astype(np.float64)))

    def adjugate(self) -> Matrix:
        """Return the transpose of the cofactor matrix.

        Raises:
            NotSquareError: If the matrix is not square
        """
        require_square(self._size, "adjugate")
        return self._adjugate()

    def inverse(self, params: LinalgParams | None = None) -> Matrix:
        """Return ``adjugate() / determinant()``.

        Integer matrices keep their element type, so each entry of the result
        is truncated toward zero.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If ``|det| <= params.singular_eps``
        """
        require_square(self._size, "inverse")
        active: LinalgParams = params or DEFAULT_PARAMS
        det: Scalar = self.determinant(active)
        if abs(det) <= active.singular_eps:
            _LOG.debug("Rejecting inverse of singular matrix, det=%s", det)
            raise SingularMatrixError(
                f"matrix is singular (determinant {det}), cannot invert"
            )
        return self._adjugate().divide(det)

    def trace(self) -> Scalar:
        """Return the sum of the diagonal elements.

        Raises:
            NotSquareError: If the matrix is not square
        """
        require_square(self._size, "trace")
        n: int = self._size.rows
        total: Any = self._data.dtype.type(0)
        for i in range(n):
            total += self._data[i * n + i]
        return kernels.to_python(total)

    def _minor(self, row: int, column: int) -> Matrix:
        n: int = self._size.rows
        kept_rows: NDArray[Any] = np.delete(self._grid(), row, axis=0)
        grid: NDArray[Any] = np.delete(kept_rows, column, axis=1)
        return Matrix._from_buffer(MatrixSize(n - 1, n - 1), grid.copy().reshape(-1))

    def _cofactor(self, row: int, column: int) -> Any:
        det: Any = self._minor(row, column)._determinant()
        if (row + column) % 2 == 0:
            return det
        # Negate in the element type, unsigned types wrap
        return kernels.negate(det)[()]

    def _determinant(self) -> Any:
        n: int = self._size.rows
        a: NDArray[Any] = self._data
        if n == 0:
            return a.dtype.type(1)
        if n == 1:
            return a[0]
        if n == 2:
            return a[0] * a[3] - a[1] * a[2]
        product: Matrix = self._matrix_product(self._adjugate())
        return product._data[0]

    def _adjugate(self) -> Matrix:
        n: int = self._size.rows
        cofactors: Matrix = Matrix(n, n, self._data.dtype)
        for i in range(n):
            for j in range(n):
                cofactors._data[i * n + j] = self._cofactor(i, j)
        return cofactors.transpose()

    ############################################################################
    # Predicates
    ############################################################################

    def is_square(self) -> bool:
        """Return True when rows equal columns."""
        return self._size.is_square()

    def is_diagonal(self) -> bool:
        """Return True for a square matrix with all off-diagonal elements 0."""
        if not self.is_square():
            return False
        grid: NDArray[Any] = self._grid()
        off_diagonal: NDArray[Any] = grid[~np.eye(self._size.rows, dtype=bool)]
        return kernels.all_equal(off_diagonal, 0)

    def is_identity(self) -> bool:
        """Return True for a diagonal matrix whose diagonal is all 1."""
        if not self.is_diagonal():
            return False
        return kernels.all_equal(np.diagonal(self._grid()), 1)

    def is_symmetric(self) -> bool:
        """Return True for a square matrix equal to its transpose."""
        if not self.is_square():
            return False
        grid: NDArray[Any] = self._grid()
        return bool(np.array_equal(grid, grid.T))

    def is_skew_symmetric(self) -> bool:
        """Return True when ``a[i][j] == -a[j][i]`` for every ``i != j``.

        The diagonal is not checked.
        """
        if not self.is_square():
            return False
        n: int = self._size.rows
        for i in range(n):
            for j in range(i + 1, n):
                if self._data[i * n + j] != -self._data[j * n + i]:
                    return False
        return True

    def is_zero(self) -> bool:
        """Return True when every element equals 0."""
        return kernels.all_equal(self._data, 0)

    def is_one(self) -> bool:
        """Return True when every element equals 1."""
        return kernels.all_equal(self._data, 1)

    def allclose(self, other: Matrix, params: LinalgParams | None = None) -> bool:
        """Return True when shapes match and elements agree within tolerance."""
        active: LinalgParams = params or DEFAULT_PARAMS
        if self._size != other._size:
            return False
        return bool(
            np.allclose(
                self._data,
                other._data,
                rtol=active.allclose_rtol,
                atol=active.allclose_atol,
            )
        )

    ############################################################################
    # Replacement-style assignment
    ############################################################################

    def assign(self, other: Matrix) -> None:
        """Replace the shape and contents with a deep copy of ``other``."""
        self._install(other.copy())

    def multiply_assign(self, other: Matrix | Scalar) -> None:
        """Replace the contents with ``self * other`` for a matrix or scalar."""
        if isinstance(other, Matrix):
            self._install(self._matrix_product(other))
            return
        self._install(
            Matrix._from_buffer(
                self._size, kernels.broadcast_multiply(self._data, other)
            )
        )

    def hcat_assign(self, other: Matrix | Vector) -> None:
        """Replace the contents with ``hcat(self, other)``."""
        self._install(self.hcat(other))

    def vcat_assign(self, other: Matrix | Vector) -> None:
        """Replace the contents with ``vcat(self, other)``."""
        self._install(self.vcat(other))

    def _install(self, result: Matrix) -> None:
        # Shape and buffer always change together
        self._size, self._data = result._size, result._data

    ############################################################################
    # Python protocol
    ############################################################################

    def __len__(self) -> int:
        return self.length()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._size == other._size and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r}, dtype={self.dtype})"

    def __neg__(self) -> Matrix:
        return Matrix._from_buffer(self._size, kernels.negate(self._data))

    def __add__(self, other: Matrix | Scalar) -> Matrix:
        if not isinstance(other, Matrix) and not kernels.is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Scalar) -> Matrix:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix | Scalar) -> Matrix:
        if not isinstance(other, Matrix) and not kernels.is_scalar(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Scalar) -> Matrix:
        if not kernels.is_scalar(other):
            return NotImplemented
        return Matrix._from_buffer(
            self._size, kernels.broadcast_multiply(self._data, other)
        )

    def __rmul__(self, other: Scalar) -> Matrix:
        return self.__mul__(other)

    def __truediv__(self, other: Scalar) -> Matrix:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, other: Scalar) -> Matrix:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.power(other)

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if isinstance(other, Vector):
            return self._vector_product(other)
        return NotImplemented

    def __rmatmul__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.left_multiply(other)

    def __iadd__(self, other: Matrix | Scalar) -> Matrix:
        self._install(self.add(other))
        return self

    def __isub__(self, other: Matrix | Scalar) -> Matrix:
        self._install(self.subtract(other))
        return self

    def __imul__(self, other: Scalar) -> Matrix:
        kernels.require_scalar(other, "multiply")
        self.multiply_assign(other)
        return self

    def __itruediv__(self, other: Scalar) -> Matrix:
        self._install(self.divide(other))
        return self

    def __ipow__(self, other: Scalar) -> Matrix:
        self._install(self.power(other))
        return self

    def __imatmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._install(self._matrix_product(other))
        return self


def transpose(matrix: Matrix) -> Matrix:
    """Return the transpose of ``matrix``."""
    return matrix.transpose()


def hcat(left: Matrix, right: Matrix | Vector) -> Matrix:
    """Return ``left`` and ``right`` joined side by side."""
    return left.hcat(right)


def vcat(top: Matrix, bottom: Matrix | Vector) -> Matrix:
    """Return ``top`` stacked above ``bottom``."""
    return top.vcat(bottom)
