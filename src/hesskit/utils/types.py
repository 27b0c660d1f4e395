"""Shared typing aliases for HessKit."""

from __future__ import annotations

from typing import Callable, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

FloatArray: TypeAlias = NDArray[np.float64]
ArrayLike1D: TypeAlias = Sequence[float] | NDArray[np.floating]

#: A scalar-valued function of a 1D parameter vector.
ScalarFunction: TypeAlias = Callable[[FloatArray], float]
#: One Hessian entry (i, j) with i <= j.
Job: TypeAlias = tuple[int, int]
