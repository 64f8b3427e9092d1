################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Element types and elementwise scalar kernels for the containers."""

from __future__ import annotations

import numbers
from typing import Any
from typing import Union

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray


Scalar = Union[int, float, complex, np.number]

DEFAULT_DTYPE: np.dtype = np.dtype(np.float64)


def resolve_dtype(dtype: DTypeLike | None) -> np.dtype:
    """Return a numeric numpy dtype, defaulting to float64.

    Raises:
        TypeError: If the dtype is boolean or not numeric
    """
    if dtype is None:
        return DEFAULT_DTYPE
    resolved: np.dtype = np.dtype(dtype)
    if not np.issubdtype(resolved, np.number):
        raise TypeError(f"element type must be numeric, got {resolved}")
    return resolved


def is_scalar(value: object) -> bool:
    """Return True for numeric scalars usable in broadcast operations."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Number, np.number))


def require_scalar(value: object, name: str) -> None:
    """Raise TypeError unless ``value`` is a numeric scalar."""
    if not is_scalar(value):
        raise TypeError(f"{name} requires a numeric scalar, got {type(value).__name__}")


def to_buffer(values: Any, dtype: DTypeLike | None) -> NDArray[Any]:
    """Copy ``values`` into a fresh, contiguous 1-D buffer.

    When ``dtype`` is None, the element type is inferred from the values.
    """
    if dtype is None:
        array: NDArray[Any] = np.array(values)
        if array.size == 0:
            array = array.astype(DEFAULT_DTYPE)
        resolve_dtype(array.dtype)
    else:
        array = np.array(values, dtype=resolve_dtype(dtype))
    return np.ascontiguousarray(array.reshape(-1))


def to_python(value: Any) -> Scalar:
    """Return a numpy scalar as the matching Python scalar."""
    if isinstance(value, np.generic):
        return value.item()  # type: ignore[no-any-return]
    return value  # type: ignore[no-any-return]


def is_integer_dtype(dtype: np.dtype) -> bool:
    """Return True for signed or unsigned integer element types."""
    return bool(np.issubdtype(dtype, np.integer))


def _operand(scalar: Scalar) -> NDArray[Any]:
    # A 0-d array promotes the buffer instead of being cast into its type
    return np.asarray(scalar)


def negate(values: Any) -> Any:
    """Return ``-values`` in the same element type.

    Unsigned element types wrap modulo their range, so ``-1`` as uint8 is 255.
    """
    return np.negative(np.asarray(values))


def broadcast_add(buffer: NDArray[Any], scalar: Scalar) -> NDArray[Any]:
    """Add ``scalar`` to every element, keeping the element type.

    The sum is computed in the promoted type and cast back, so scalars outside
    the element type's range wrap instead of raising.
    """
    require_scalar(scalar, "add")
    return np.asarray(buffer + _operand(scalar)).astype(buffer.dtype)


def broadcast_subtract(buffer: NDArray[Any], scalar: Scalar) -> NDArray[Any]:
    """Subtract ``scalar`` from every element, keeping the element type."""
    require_scalar(scalar, "subtract")
    return np.asarray(buffer - _operand(scalar)).astype(buffer.dtype)


def broadcast_multiply(buffer: NDArray[Any], scalar: Scalar) -> NDArray[Any]:
    """Multiply every element by ``scalar``, keeping the element type."""
    require_scalar(scalar, "multiply")
    return np.asarray(buffer * _operand(scalar)).astype(buffer.dtype)


def broadcast_divide(buffer: NDArray[Any], scalar: Scalar) -> NDArray[Any]:
    """Divide every element by ``scalar``, keeping the element type.

    Integer elements divided by an integer scalar truncate toward zero, so
    ``-7 / 2`` yields ``-3``. Any other combination divides in floating point
    and casts back to the element type.

    Raises:
        ZeroDivisionError: If ``scalar`` is zero
    """
    require_scalar(scalar, "divide")
    if scalar == 0:
        raise ZeroDivisionError("divide by a zero scalar")
    if is_integer_dtype(buffer.dtype) and isinstance(
        scalar, (numbers.Integral, np.integer)
    ):
        divisor: int = int(scalar)
        quotient: NDArray[Any] = np.abs(buffer.astype(np.int64)) // abs(divisor)
        signs: NDArray[Any] = np.sign(buffer.astype(np.int64)) * (
            1 if divisor > 0 else -1
        )
        return np.asarray(quotient * signs).astype(buffer.dtype)
    return np.asarray(buffer / scalar).astype(buffer.dtype)


def broadcast_power(buffer: NDArray[Any], scalar: Scalar) -> NDArray[Any]:
    """Raise every element to ``scalar`` with the general power function.

    The power is evaluated in double precision (or complex double for complex
    elements) and cast back to the element type.
    """
    require_scalar(scalar, "power")
    return np.asarray(np.float_power(buffer, scalar)).astype(buffer.dtype)


def all_equal(buffer: NDArray[Any], value: Scalar) -> bool:
    """Return True when every element equals ``value``."""
    return bool(np.all(buffer == value))
