################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Numeric parameters shared by the matrix and vector containers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import replace
from typing import Any
from typing import Mapping


# Inversion rejects matrices with |det| at or below this value
SINGULAR_EPS: float = 0.0
# Normalization rejects vectors with magnitude at or below this value
ZERO_NORM_EPS: float = 0.0
# Relative tolerance for approximate container comparison
ALLCLOSE_RTOL: float = 1e-9
# Absolute tolerance for approximate container comparison
ALLCLOSE_ATOL: float = 1e-12
# Recursive determinants above this dimension log a cost warning
COFACTOR_WARN_DIM: int = 8


class LinalgParamsError(Exception):
    """Raised when numeric parameter validation fails."""


def _require_finite_non_negative(value: float, name: str) -> None:
    """Require a finite, non-negative value."""
    if not math.isfinite(value):
        raise LinalgParamsError(f"{name} must be finite")
    if value < 0.0:
        raise LinalgParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class LinalgParams:
    """Tolerances and thresholds for container operations.

    The defaults keep exact semantics: a matrix is singular only when its
    determinant is exactly zero, and only an all-zero vector fails to
    normalize. Nonzero epsilons widen those rejections for floating-point
    element types.
    """

    # Inversion rejects |det| <= singular_eps
    singular_eps: float = SINGULAR_EPS
    # Normalization rejects magnitude <= zero_norm_eps
    zero_norm_eps: float = ZERO_NORM_EPS
    # Relative tolerance used by allclose()
    allclose_rtol: float = ALLCLOSE_RTOL
    # Absolute tolerance used by allclose()
    allclose_atol: float = ALLCLOSE_ATOL
    # Dimension above which the recursive determinant warns
    cofactor_warn_dim: int = COFACTOR_WARN_DIM

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameters."""
        return cls()

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> LinalgParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise LinalgParamsError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise LinalgParamsError(f"unknown parameter: {unknown_keys[0]}")
        defaults: LinalgParams = cls.defaults()
        result: LinalgParams = cls(
            singular_eps=cls._as_float(
                "singular_eps", params.get("singular_eps", defaults.singular_eps)
            ),
            zero_norm_eps=cls._as_float(
                "zero_norm_eps", params.get("zero_norm_eps", defaults.zero_norm_eps)
            ),
            allclose_rtol=cls._as_float(
                "allclose_rtol", params.get("allclose_rtol", defaults.allclose_rtol)
            ),
            allclose_atol=cls._as_float(
                "allclose_atol", params.get("allclose_atol", defaults.allclose_atol)
            ),
            cofactor_warn_dim=cls._as_int(
                "cofactor_warn_dim",
                params.get("cofactor_warn_dim", defaults.cofactor_warn_dim),
            ),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_finite_non_negative(self.singular_eps, "singular_eps")
        _require_finite_non_negative(self.zero_norm_eps, "zero_norm_eps")
        _require_finite_non_negative(self.allclose_rtol, "allclose_rtol")
        _require_finite_non_negative(self.allclose_atol, "allclose_atol")
        if isinstance(self.cofactor_warn_dim, bool) or not isinstance(
            self.cofactor_warn_dim, int
        ):
            raise LinalgParamsError("cofactor_warn_dim must be an int")
        if self.cofactor_warn_dim <= 0:
            raise LinalgParamsError("cofactor_warn_dim must be positive")

    def replace(self, **overrides: Any) -> LinalgParams:
        """Return a validated, modified copy of the parameters."""
        result: LinalgParams = replace(self, **overrides)
        result.validate()
        return result

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "singular_eps": self.singular_eps,
            "zero_norm_eps": self.zero_norm_eps,
            "allclose_rtol": self.allclose_rtol,
            "allclose_atol": self.allclose_atol,
            "cofactor_warn_dim": self.cofactor_warn_dim,
        }

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise LinalgParamsError(f"{name} must be a float")
        return float(value)

    @staticmethod
    def _as_int(name: str, value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise LinalgParamsError(f"{name} must be an int")
        return int(value)

    @staticmethod
    def _field_order() -> list[str]:
        return [
            "singular_eps",
            "zero_norm_eps",
            "allclose_rtol",
            "allclose_atol",
            "cofactor_warn_dim",
        ]


DEFAULT_PARAMS: LinalgParams = LinalgParams.defaults()
