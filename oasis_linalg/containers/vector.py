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
Fixed-length numeric vector

A Vector owns a contiguous numpy buffer whose length is fixed at construction.
Every operation that produces a different value computes a fresh buffer;
in-place operators then install that buffer in one step, so a Vector is never
observed half-updated and never shares storage with another container.

Element types follow numpy dtypes. Vector/vector operations promote both
element types, while scalar broadcasts keep the vector's own element type.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
from typing import Any
from typing import Iterable
from typing import Iterator

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from oasis_linalg.config.linalg_params import DEFAULT_PARAMS
from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.containers import scalar as kernels
from oasis_linalg.containers.scalar import Scalar
from oasis_linalg.containers.shape import check_index
from oasis_linalg.containers.shape import require_same_length
from oasis_linalg.containers.shape import validate_dimension
from oasis_linalg.linalg_errors import InvalidDimensionError
from oasis_linalg.linalg_errors import ZeroMagnitudeError


if TYPE_CHECKING:
    from oasis_linalg.containers.matrix import Matrix


# Cross products are only defined for 3D vectors
CROSS_LENGTH: int = 3


class Vector:
    """Owned, fixed-length, mutable sequence of numeric elements."""

    __slots__ = ("_data",)

    def __init__(self, length: int = 0, dtype: DTypeLike | None = None) -> None:
        """Create a zero-filled vector.

        Args:
            length: Number of elements, non-negative
            dtype: Element type, float64 when omitted
        """
        size: int = validate_dimension(length, "length")
        self._data: NDArray[Any] = np.zeros(size, dtype=kernels.resolve_dtype(dtype))

    @classmethod
    def from_values(
        cls, values: Iterable[Scalar], dtype: DTypeLike | None = None
    ) -> Vector:
        """Create a vector holding a copy of ``values``."""
        buffer: NDArray[Any] = kernels.to_buffer(list(values), dtype)
        return cls._from_buffer(buffer)

    @classmethod
    def from_vector(cls, other: Vector) -> Vector:
        """Create a deep copy of ``other``."""
        return cls._from_buffer(other._data.copy())

    @classmethod
    def from_numpy(cls, array: Any, dtype: DTypeLike | None = None) -> Vector:
        """Create a vector from a 1-D array-like.

        Raises:
            InvalidDimensionError: If the array is not one-dimensional
        """
        if np.ndim(array) != 1:
            raise InvalidDimensionError("vector input must be one-dimensional")
        return cls._from_buffer(kernels.to_buffer(array, dtype))

    @classmethod
    def _from_buffer(cls, buffer: NDArray[Any]) -> Vector:
        # Takes ownership of a freshly computed buffer
        vector: Vector = cls.__new__(cls)
        vector._data = buffer
        return vector

    def copy(self) -> Vector:
        """Return a deep copy."""
        return Vector.from_vector(self)

    ############################################################################
    # Shape and element access
    ############################################################################

    def length(self) -> int:
        """Return the fixed number of elements."""
        return int(self._data.shape[0])

    @property
    def dtype(self) -> np.dtype:
        """Return the element type."""
        return self._data.dtype

    def get(self, index: int) -> Scalar:
        """Return the element at ``index``.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, length)``
        """
        check_index(index, self.length(), "vector")
        return kernels.to_python(self._data[index])

    def set(self, index: int, value: Scalar) -> None:
        """Store ``value`` at ``index``, converted to the element type.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``[0, length)``
        """
        check_index(index, self.length(), "vector")
        kernels.require_scalar(value, "set")
        self._data[index] = value

    def tolist(self) -> list[Scalar]:
        """Return the elements as a list of Python scalars."""
        return self._data.tolist()  # type: ignore[no-any-return]

    def to_numpy(self) -> NDArray[Any]:
        """Return a copy of the elements as a 1-D numpy array."""
        return self._data.copy()

    ############################################################################
    # Vector/vector operations
    ############################################################################

    def add(self, other: Vector | Scalar) -> Vector:
        """Return the elementwise sum with a vector or a scalar."""
        if isinstance(other, Vector):
            require_same_length(self.length(), other.length(), "add")
            return Vector._from_buffer(self._data + other._data)
        return Vector._from_buffer(kernels.broadcast_add(self._data, other))

    def subtract(self, other: Vector | Scalar) -> Vector:
        """Return the elementwise difference with a vector or a scalar."""
        if isinstance(other, Vector):
            require_same_length(self.length(), other.length(), "subtract")
            return Vector._from_buffer(self._data - other._data)
        return Vector._from_buffer(kernels.broadcast_subtract(self._data, other))

    def dot(self, other: Vector) -> Scalar:
        """Return the dot product ``sum(self[i] * other[i])``.

        Raises:
            ShapeMismatchError: If the lengths differ
        """
        require_same_length(self.length(), other.length(), "dot")
        total: Any = np.result_type(self._data, other._data).type(0)
        for a, b in zip(self._data, other._data):
            total = total + a * b
        return kernels.to_python(total)

    def cross(self, other: Vector) -> Vector:
        """Return the 3D cross product ``self x other``.

        Raises:
            InvalidDimensionError: If either vector does not have length 3
        """
        if self.length() != CROSS_LENGTH or other.length() != CROSS_LENGTH:
            raise InvalidDimensionError(
                "cross product requires two vectors of length 3, got "
                f"{self.length()} and {other.length()}"
            )
        a: NDArray[Any] = self._data
        b: NDArray[Any] = other._data
        dtype: np.dtype = np.result_type(a, b)
        return Vector._from_buffer(
            np.array(
                [
                    a[1] * b[2] - a[2] * b[1],
                    a[2] * b[0] - a[0] * b[2],
                    a[0] * b[1] - a[1] * b[0],
                ],
                dtype=dtype,
            )
        )

    def concat(self, other: Vector) -> Vector:
        """Return ``self`` followed by ``other`` as a new vector."""
        return Vector._from_buffer(np.concatenate((self._data, other._data)))

    ############################################################################
    # Scalar broadcasts
    ############################################################################

    def multiply(self, other: Matrix | Scalar) -> Vector:
        """Return every element multiplied by a scalar.

        A matrix operand gives the row-vector product ``self * other``, which
        needs ``self.length() == other.rows()``.
        """
        # Deferred, the matrix module imports this one
        from oasis_linalg.containers.matrix import Matrix

        if isinstance(other, Matrix):
            return other.left_multiply(self)
        return Vector._from_buffer(kernels.broadcast_multiply(self._data, other))

    def divide(self, scalar: Scalar) -> Vector:
        """Return every element divided by ``scalar``.

        Integer vectors divided by an integer truncate toward zero.
        """
        return Vector._from_buffer(kernels.broadcast_divide(self._data, scalar))

    def power(self, scalar: Scalar) -> Vector:
        """Return every element raised to ``scalar``."""
        return Vector._from_buffer(kernels.broadcast_power(self._data, scalar))

    ############################################################################
    # Queries
    ############################################################################

    def magnitude(self) -> float:
        """Return the Euclidean norm ``sqrt(dot(self, self))``."""
        return math.sqrt(float(self.dot(self)))

    def normalize(self, params: LinalgParams | None = None) -> Vector:
        """Return a float64 unit vector in the direction of ``self``.

        Raises:
            ZeroMagnitudeError: If the magnitude is at or below
                ``params.zero_norm_eps``
        """
        active: LinalgParams = params or DEFAULT_PARAMS
        norm: float = self.magnitude()
        if norm <= active.zero_norm_eps:
            raise ZeroMagnitudeError("cannot normalize a zero-magnitude vector")
        return Vector._from_buffer(self._data.astype(np.float64) / norm)

    def is_zero(self) -> bool:
        """Return True when every element equals 0."""
        return kernels.all_equal(self._data, 0)

    def is_one(self) -> bool:
        """Return True when every element equals 1."""
        return kernels.all_equal(self._data, 1)

    def allclose(self, other: Vector, params: LinalgParams | None = None) -> bool:
        """Return True when lengths match and elements agree within tolerance."""
        active: LinalgParams = params or DEFAULT_PARAMS
        if self.length() != other.length():
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

    def assign(self, other: Vector) -> None:
        """Replace the contents with a deep copy of ``other``."""
        self._data = other._data.copy()

    def cross_assign(self, other: Vector) -> None:
        """Replace the contents with ``self x other``."""
        self._data = self.cross(other)._data

    def concat_assign(self, other: Vector) -> None:
        """Replace the contents with ``self`` followed by ``other``."""
        self._data = self.concat(other)._data

    ############################################################################
    # Python protocol
    ############################################################################

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self.tolist()!r}, dtype={self.dtype})"

    def __neg__(self) -> Vector:
        return Vector._from_buffer(kernels.negate(self._data))

    def __add__(self, other: Vector | Scalar) -> Vector:
        if not isinstance(other, Vector) and not kernels.is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Scalar) -> Vector:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector | Scalar) -> Vector:
        if not isinstance(other, Vector) and not kernels.is_scalar(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Scalar) -> Vector:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Scalar) -> Vector:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Scalar) -> Vector:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, other: Scalar) -> Vector:
        if not kernels.is_scalar(other):
            return NotImplemented
        return self.power(other)

    def __matmul__(self, other: Vector) -> Scalar:
        # Row vector times matrix is handled by Matrix.__rmatmul__
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __iadd__(self, other: Vector | Scalar) -> Vector:
        self._data = self.add(other)._data
        return self

    def __isub__(self, other: Vector | Scalar) -> Vector:
        self._data = self.subtract(other)._data
        return self

    def __imul__(self, other: Scalar) -> Vector:
        self._data = self.multiply(other)._data
        return self

    def __itruediv__(self, other: Scalar) -> Vector:
        self._data = self.divide(other)._data
        return self

    def __ipow__(self, other: Scalar) -> Vector:
        self._data = self.power(other)._data
        return self


def dot(a: Vector, b: Vector) -> Scalar:
    """Return the dot product of two equal-length vectors."""
    return a.dot(b)


def cross(a: Vector, b: Vector) -> Vector:
    """Return the cross product of two 3D vectors."""
    return a.cross(b)


def concat(a: Vector, b: Vector) -> Vector:
    """Return ``a`` followed by ``b``."""
    return a.concat(b)
