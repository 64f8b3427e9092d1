################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Generic matrix and vector containers for OASIS control math."""

from __future__ import annotations

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.config.linalg_params import LinalgParamsError
from oasis_linalg.containers.matrix import Matrix
from oasis_linalg.containers.shape import MatrixSize
from oasis_linalg.containers.vector import Vector
from oasis_linalg.containers.vector import cross
from oasis_linalg.containers.vector import dot
from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_errors import InvalidDimensionError
from oasis_linalg.linalg_errors import LinalgError
from oasis_linalg.linalg_errors import NotSquareError
from oasis_linalg.linalg_errors import ShapeMismatchError
from oasis_linalg.linalg_errors import SingularMatrixError
from oasis_linalg.linalg_errors import ZeroMagnitudeError


__all__ = [
    "IndexOutOfRangeError",
    "InvalidDimensionError",
    "LinalgError",
    "LinalgParams",
    "LinalgParamsError",
    "Matrix",
    "MatrixSize",
    "NotSquareError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "Vector",
    "ZeroMagnitudeError",
    "cross",
    "dot",
]
