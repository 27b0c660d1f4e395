"""Unit tests for public API."""

from __future__ import annotations

import hesskit
from hesskit import (
    DimensionMismatchError,
    EvaluationError,
    HessianKit,
    HessianSettings,
    InvalidStepError,
    SymmetricMatrix,
    build_hessian,
)


def test_public_names_importable_from_top_level():
    """Public names load from the top-level package."""
    assert callable(build_hessian)
    assert HessianKit is not None
    assert HessianSettings is not None
    assert SymmetricMatrix is not None


def test_public_all_contains_names():
    """__all__ lists the public API."""
    expected = {
        "build_hessian",
        "HessianKit",
        "HessianSettings",
        "SymmetricMatrix",
        "DimensionMismatchError",
        "EvaluationError",
        "InvalidStepError",
    }
    assert expected.issubset(set(hesskit.__all__))


def test_error_hierarchy():
    """Configuration errors are ValueErrors; evaluation failures are RuntimeErrors."""
    assert issubclass(DimensionMismatchError, ValueError)
    assert issubclass(InvalidStepError, ValueError)
    assert issubclass(EvaluationError, RuntimeError)
