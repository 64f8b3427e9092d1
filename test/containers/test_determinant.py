################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for determinants, cofactors, adjugates and inverses."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from oasis_linalg.config.linalg_params import LinalgParams
from oasis_linalg.containers.matrix import Matrix
from oasis_linalg.linalg_errors import IndexOutOfRangeError
from oasis_linalg.linalg_errors import NotSquareError
from oasis_linalg.linalg_errors import SingularMatrixError


_MATRIX_LOGGER: str = "oasis_linalg.containers.matrix"

# Integer 4x4 matrix with determinant 24
_M4_ROWS: list[list[int]] = [
    [3, 2, 0, 1],
    [4, 0, 1, 2],
    [3, 0, 2, 1],
    [9, 2, 3, 1],
]


def test_base_cases() -> None:
    """Checks small determinants follow the closed forms."""
    assert Matrix(0, 0).determinant() == 1.0
    assert Matrix.from_rows([[7]]).determinant() == 7
    assert Matrix.from_rows([[1, 2], [3, 4]]).determinant() == -2


def test_known_3x3() -> None:
    """Checks a 3x3 integer determinant is exact."""
    matrix: Matrix = Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
    assert matrix.determinant() == -306


def test_known_4x4() -> None:
    """Checks the recursive determinant of a 4x4 integer matrix."""
    assert Matrix.from_rows(_M4_ROWS).determinant() == 24


def test_identity_determinant() -> None:
    """Checks identity matrices have determinant 1."""
    for n in range(1, 6):
        assert Matrix.identity(n).determinant() == 1.0
        assert Matrix.identity(n, dtype=int).determinant() == 1


def test_recursive_matches_lu() -> None:
    """Checks recursive and LU determinants agree on float matrices."""
    rng: np.random.Generator = np.random.default_rng(0)
    for n in range(1, 6):
        matrix: Matrix = Matrix.from_numpy(rng.normal(size=(n, n)))
        assert np.isclose(matrix.determinant(), matrix.determinant_lu(), rtol=1e-9)


def test_determinant_lu_integer_input() -> None:
    """Checks LU determinants accept integer matrices."""
    assert np.isclose(Matrix.from_rows(_M4_ROWS).determinant_lu(), 24.0)


def test_minor_removes_row_and_column() -> None:
    """Checks minors drop exactly one row and one column."""
    matrix: Matrix = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert matrix.minor(1, 1).tolist() == [[1, 3], [7, 9]]
    assert matrix.minor(0, 2).tolist() == [[4, 5], [7, 8]]
    with pytest.raises(IndexOutOfRangeError):
        matrix.minor(3, 0)


def test_cofactor_matches_signed_minor() -> None:
    """Checks each cofactor equals the signed determinant of its minor."""
    matrix: Matrix = Matrix.from_rows(_M4_ROWS)
    for i in range(4):
        for j in range(4):
            expected: int = (-1) ** (i + j) * matrix.minor(i, j).determinant()
            assert matrix.cofactor(i, j) == expected


def test_adjugate_is_cofactor_transpose() -> None:
    """Checks the adjugate holds the transposed cofactors."""
    matrix: Matrix = Matrix.from_rows(_M4_ROWS)
    adjugate: Matrix = matrix.adjugate()
    for i in range(4):
        for j in range(4):
            assert adjugate.get(i, j) == matrix.cofactor(j, i)


def test_adjugate_product_is_scaled_identity() -> None:
    """Checks A times adj(A) equals det(A) times the identity."""
    matrix: Matrix = Matrix.from_rows(_M4_ROWS)
    product: Matrix = matrix @ matrix.adjugate()
    assert product == Matrix.identity(4, dtype=int) * 24


def test_integer_inverse_truncates() -> None:
    """Checks integer inverses equal the adjugate divided by the determinant."""
    matrix: Matrix = Matrix.from_rows(_M4_ROWS)
    inverse: Matrix = matrix.inverse()
    assert inverse.dtype == matrix.dtype
    assert inverse == matrix.adjugate().divide(matrix.determinant())


def test_float_inverse() -> None:
    """Checks float inverses multiply back to the identity."""
    matrix: Matrix = Matrix.from_rows(_M4_ROWS, dtype=np.float64)
    inverse: Matrix = matrix.inverse()
    assert (matrix @ inverse).allclose(Matrix.identity(4))
    assert (inverse @ matrix).allclose(Matrix.identity(4))
    assert np.allclose(inverse.to_numpy(), np.linalg.inv(matrix.to_numpy()))


def test_one_by_one_inverse() -> None:
    """Checks a 1x1 inverse is the reciprocal."""
    assert Matrix.from_rows([[4.0]]).inverse().tolist() == [[0.25]]


def test_singular_inverse_raises() -> None:
    """Checks inverting a singular matrix raises."""
    with pytest.raises(SingularMatrixError):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()
    with pytest.raises(SingularMatrixError):
        Matrix(3, 3).inverse()


def test_singular_eps_widens_rejection() -> None:
    """Checks a positive singular epsilon rejects nearly singular matrices."""
    matrix: Matrix = Matrix.from_rows([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
    matrix.inverse()
    with pytest.raises(SingularMatrixError):
        matrix.inverse(LinalgParams(singular_eps=1e-9))


def test_singular_inverse_logs_debug(caplog: pytest.LogCaptureFixture) -> None:
    """Checks rejected inversions are logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger=_MATRIX_LOGGER):
        with pytest.raises(SingularMatrixError):
            Matrix(2, 2).inverse()
    assert any(record.levelno == logging.DEBUG for record in caplog.records)


def test_large_determinant_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Checks recursive determinants above the configured dimension warn."""
    params: LinalgParams = LinalgParams(cofactor_warn_dim=2)
    with caplog.at_level(logging.WARNING, logger=_MATRIX_LOGGER):
        assert Matrix.identity(3).determinant(params) == 1.0
    assert any(record.levelno == logging.WARNING for record in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger=_MATRIX_LOGGER):
        Matrix.identity(3).determinant()
    assert not caplog.records


def test_trace() -> None:
    """Checks trace sums the diagonal."""
    assert Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).trace() == 15
    assert Matrix(0, 0).trace() == 0.0


def test_square_only_operations_reject_rectangles() -> None:
    """Checks square-only operations raise on a rectangular matrix."""
    matrix: Matrix = Matrix(2, 3)
    with pytest.raises(NotSquareError):
        matrix.determinant()
    with pytest.raises(NotSquareError):
        matrix.determinant_lu()
    with pytest.raises(NotSquareError):
        matrix.inverse()
    with pytest.raises(NotSquareError):
        matrix.adjugate()
    with pytest.raises(NotSquareError):
        matrix.trace()
    with pytest.raises(NotSquareError):
        matrix.minor(0, 0)
    with pytest.raises(NotSquareError):
        matrix.cofactor(0, 0)


def test_shape_predicates() -> None:
    """Checks structural predicates are false for rectangular matrices."""
    rectangle: Matrix = Matrix(2, 3)
    rectangle.set(0, 0, 1.0)
    rectangle.set(1, 1, 1.0)
    assert not rectangle.is_square()
    assert not rectangle.is_diagonal()
    assert not rectangle.is_identity()
    assert not rectangle.is_symmetric()
    assert not rectangle.is_skew_symmetric()


def test_diagonal_and_identity_predicates() -> None:
    """Checks diagonal and identity predicates."""
    assert Matrix.identity(3).is_identity()
    assert Matrix.identity(3).is_diagonal()
    diagonal: Matrix = Matrix.from_rows([[2, 0], [0, 3]])
    assert diagonal.is_diagonal()
    assert not diagonal.is_identity()
    assert not Matrix.from_rows([[1, 1], [0, 1]]).is_diagonal()


def test_symmetric_predicates() -> None:
    """Checks symmetry predicates compare mirrored elements."""
    symmetric: Matrix = Matrix(4, 4, dtype=int)
    for i in range(4):
        for j in range(4):
            symmetric.set(i, j, i + j)
    assert symmetric.is_symmetric()
    assert not Matrix.from_rows([[1, 2], [3, 4]]).is_symmetric()

    # Diagonal entries are not constrained
    skew: Matrix = Matrix.from_rows([[5, 2, -3], [-2, 0, 4], [3, -4, 1]])
    assert skew.is_skew_symmetric()
    assert not symmetric.is_skew_symmetric()


def test_unsigned_determinant_and_adjugate() -> None:
    """Checks the determinant family on unsigned integer matrices."""
    matrix: Matrix = Matrix.from_rows(
        [[2, 0, 0], [0, 3, 0], [0, 0, 4]], dtype=np.uint32
    )
    assert matrix.determinant() == 24
    adjugate: Matrix = matrix.adjugate()
    assert adjugate.dtype == np.uint32
    assert adjugate.tolist() == [[12, 0, 0], [0, 8, 0], [0, 0, 6]]


def test_unsigned_cofactor_wraps() -> None:
    """Checks negative cofactors wrap in the unsigned element type."""
    matrix: Matrix = Matrix.from_rows([[1, 2], [3, 4]], dtype=np.uint8)
    assert matrix.cofactor(0, 0) == 4
    assert matrix.cofactor(0, 1) == 256 - 3
    adjugate: Matrix = Matrix.from_rows([[1, 2], [3, 4]], dtype=np.uint16).adjugate()
    assert adjugate.tolist() == [[4, 65536 - 2], [65536 - 3, 1]]
