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
Shape bookkeeping and precondition checks for the numeric containers

Matrices are stored as row-major buffers. Element (r, c) for a matrix with
``columns`` columns is stored at ``data[r * columns + c]``.
"""

from __future__ import annotations

from dataclasses import dataclass

from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_errors import InvalidDimensionError
from oasis_linalg.linalg_errors import NotSquareError
from oasis_linalg.linalg_errors import ShapeMismatchError


def validate_dimension(value: object, name: str) -> int:
    """Return ``value`` as a dimension, rejecting negatives and non-integers.

    Args:
        value: Candidate dimension
        name: Name used in error messages

    Returns:
        The dimension as a Python int

    Raises:
        InvalidDimensionError: If the value is not a non-negative integer
    """
    if isinstance(value, bool) or not hasattr(value, "__index__"):
        raise InvalidDimensionError(f"{name} must be an integer")
    dim: int = value.__index__()  # type: ignore[attr-defined]
    if dim < 0:
        raise InvalidDimensionError(f"{name} must be non-negative")
    return dim


@dataclass(frozen=True)
class MatrixSize:
    """Immutable ``(rows, columns)`` pair describing a matrix shape.

    Attributes:
        rows: Number of rows, non-negative
        columns: Number of columns, non-negative
    """

    rows: int
    columns: int

    def __post_init__(self) -> None:
        """Validate and normalize both dimensions."""
        object.__setattr__(self, "rows", validate_dimension(self.rows, "rows"))
        object.__setattr__(
            self, "columns", validate_dimension(self.columns, "columns")
        )

    @property
    def count(self) -> int:
        """Return the number of elements in a buffer of this shape."""
        return self.rows * self.columns

    def is_square(self) -> bool:
        """Return True when rows equal columns."""
        return self.rows == self.columns

    def transposed(self) -> MatrixSize:
        """Return the shape with rows and columns swapped."""
        return MatrixSize(self.columns, self.rows)

    def as_tuple(self) -> tuple[int, int]:
        """Return the shape as a ``(rows, columns)`` tuple."""
        return (self.rows, self.columns)


def flat_index(size: MatrixSize, row: int, column: int) -> int:
    """Return the row-major buffer index of ``(row, column)``.

    Raises:
        IndexOutOfRangeError: If either index is outside the shape
    """
    check_index(row, size.rows, "row")
    check_index(column, size.columns, "column")
    return row * size.columns + column


def check_index(index: int, bound: int, name: str) -> None:
    """Require ``0 <= index < bound``."""
    if isinstance(index, bool) or not hasattr(index, "__index__"):
        raise IndexOutOfRangeError(f"{name} index must be an integer")
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name} index {index} out of range for dimension {bound}"
        )


def require_same_size(a: MatrixSize, b: MatrixSize, name: str) -> None:
    """Require two shapes to be identical."""
    if a != b:
        raise ShapeMismatchError(
            f"{name} requires equal shapes, got {a.as_tuple()} and {b.as_tuple()}"
        )


def require_same_length(a: int, b: int, name: str) -> None:
    """Require two lengths to be identical."""
    if a != b:
        raise ShapeMismatchError(f"{name} requires equal lengths, got {a} and {b}")


def require_square(size: MatrixSize, name: str) -> None:
    """Require a square shape."""
    if not size.is_square():
        raise NotSquareError(
            f"{name} requires a square matrix, got {size.rows}x{size.columns}"
        )
