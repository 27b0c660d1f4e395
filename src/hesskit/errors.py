"""Exceptions raised by HessKit."""

from __future__ import annotations

__all__ = [
    "DimensionMismatchError",
    "InvalidStepError",
    "EvaluationError",
]


class DimensionMismatchError(ValueError):
    """Raised when a result matrix does not match the dimension of the point."""


class InvalidStepError(ValueError):
    """Raised when a finite-difference step is negative or not finite."""


class EvaluationError(RuntimeError):
    """Raised when the user-supplied function fails during a Hessian computation.

    The original exception is available as ``__cause__``.
    """
