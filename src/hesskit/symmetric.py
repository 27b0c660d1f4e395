"""Provides the SymmetricMatrix result container.

Only the upper triangle (``i <= j``) is ever stored; reads below the
diagonal are mirrored from the upper triangle, so the matrix is symmetric
by construction.

>>> from hesskit.symmetric import SymmetricMatrix
>>> m = SymmetricMatrix(2)
>>> m.set_sym(0, 1, 3.0)
>>> float(m[1, 0])
3.0
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from hesskit.utils.types import FloatArray

__all__ = ["SymmetricMatrix"]


class SymmetricMatrix:
    """A dense n x n symmetric matrix backed by its upper triangle."""

    def __init__(self, n: int, data: ArrayLike | None = None) -> None:
        """Initialises an n x n symmetric matrix.

        Args:
            n: Dimension of the matrix.
            data: Optional (n, n) array-like. Only its upper triangle is used.

        Raises:
            ValueError: If ``n`` is negative or ``data`` has the wrong shape.
        """
        n = int(n)
        if n < 0:
            raise ValueError(f"n must be non-negative; got {n}.")
        self._n = n
        self._data = np.zeros((n, n), dtype=np.float64)
        if data is not None:
            arr = np.asarray(data, dtype=np.float64)
            if arr.shape != (n, n):
                raise ValueError(f"data must have shape ({n}, {n}); got {arr.shape}.")
            iu = np.triu_indices(n)
            self._data[iu] = arr[iu]

    @property
    def symmetric(self) -> int:
        """Dimension of the matrix."""
        return self._n

    @property
    def shape(self) -> tuple[int, int]:
        return self._n, self._n

    def _upper(self, i: int, j: int) -> tuple[int, int]:
        i, j = int(i), int(j)
        if not (0 <= i < self._n and 0 <= j < self._n):
            raise IndexError(f"index ({i}, {j}) out of range for a {self._n}x{self._n} matrix.")
        return (i, j) if i <= j else (j, i)

    def set_sym(self, i: int, j: int, value: float) -> None:
        """Sets the entries (i, j) and (j, i) to ``value``.

        Writes to distinct cells never touch the same memory, so workers
        filling disjoint entries need no locking.
        """
        self._data[self._upper(i, j)] = value

    def __getitem__(self, index: tuple[int, int]) -> np.float64:
        i, j = index
        return self._data[self._upper(i, j)]

    def fill(self, value: float) -> None:
        """Sets every stored entry to ``value``."""
        self._data[np.triu_indices(self._n)] = value

    def to_array(self) -> FloatArray:
        """Returns the full symmetric matrix as a new dense array."""
        upper = np.triu(self._data)
        return upper + np.triu(upper, k=1).T

    def __array__(self, dtype=None, copy=None) -> FloatArray:
        if copy is False:
            raise ValueError("SymmetricMatrix cannot be converted to an array without a copy.")
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype, copy=False)

    def __repr__(self) -> str:
        return f"SymmetricMatrix({self._n}, data={self.to_array().tolist()!r})"
