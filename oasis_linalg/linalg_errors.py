################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Precondition violations raised by the numeric containers.

Every error here signals caller misuse rather than a recoverable runtime
condition. Operations check their preconditions before computing anything, so
a raised error never leaves a partially updated container behind.
"""

from __future__ import annotations


class LinalgError(ValueError):
    """Raised when a matrix or vector precondition is violated."""


class ShapeMismatchError(LinalgError):
    """Raised when operand shapes or lengths are incompatible."""


class NotSquareError(LinalgError):
    """Raised when a square-only operation receives a non-square matrix."""


class IndexOutOfRangeError(LinalgError, IndexError):
    """Raised when an element index falls outside the container."""


class SingularMatrixError(LinalgError):
    """Raised when inverting a matrix with a zero determinant."""


class InvalidDimensionError(LinalgError):
    """Raised when a dimension is invalid for the requested operation."""


class ZeroMagnitudeError(LinalgError):
    """Raised when normalizing a vector with zero magnitude."""
