################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from oasis_linalg.containers.matrix import Matrix
from oasis_linalg.containers.shape import MatrixSize
from oasis_linalg.containers.vector import Vector


__all__ = [
    "Matrix",
    "MatrixSize",
    "Vector",
]
