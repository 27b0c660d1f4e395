"""Validation utilities for HessKit."""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from hesskit.errors import DimensionMismatchError, InvalidStepError
from hesskit.utils.types import FloatArray

__all__ = [
    "as_point",
    "resolve_step",
    "validate_sink",
]


def as_point(x: ArrayLike) -> FloatArray:
    """Returns a private, read-only 1D float copy of an evaluation point.

    Args:
        x: Array-like of parameter values.

    Returns:
        A 1D ``float64`` array that is not shared with the caller.

    Raises:
        ValueError: If ``x`` is not one-dimensional.
    """
    point = np.array(x, dtype=np.float64, copy=True)
    if point.ndim != 1:
        raise ValueError(f"x must be a 1D array; got shape {point.shape}.")
    point.flags.writeable = False
    return point


def resolve_step(step: Any, default: float) -> float:
    """Resolves the finite-difference step size.

    A step of zero (or ``None``) selects ``default``.

    Args:
        step: Requested step size.
        default: Step used when ``step`` is zero or ``None``.

    Returns:
        A strictly positive, finite step size.

    Raises:
        InvalidStepError: If ``step`` is negative, NaN or infinite.
    """
    h = 0.0 if step is None else float(step)
    if h == 0.0:
        h = float(default)
    if not math.isfinite(h) or h <= 0.0:
        raise InvalidStepError(f"step must be positive and finite; got {step!r}.")
    return h


def validate_sink(dst: Any, n: int) -> None:
    """Checks that a result matrix has the dimension of the evaluation point.

    Args:
        dst: Symmetric result matrix exposing its dimension as ``symmetric``.
        n: Length of the evaluation point.

    Raises:
        DimensionMismatchError: If ``dst.symmetric != n``.
    """
    size = int(dst.symmetric)
    if size != n:
        raise DimensionMismatchError(
            f"hessian: mismatched matrix size; result is {size}x{size} "
            f"but the point has {n} parameters."
        )
