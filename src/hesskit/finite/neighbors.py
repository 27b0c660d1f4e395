"""Function evaluations at single-axis neighbours of a point.

Every Hessian entry is anchored on ``f(x + h * e_i)`` for some axis ``i``.
These values are computed once per Hessian, before any entry is combined,
and are read-only afterwards.
"""

from __future__ import annotations

from functools import partial

import numpy as np

from hesskit.errors import EvaluationError
from hesskit.utils.concurrency import run_worker_pool
from hesskit.utils.types import FloatArray, ScalarFunction

__all__ = [
    "ScratchBuffer",
    "evaluate_at",
    "evaluate_neighbors",
]


class ScratchBuffer:
    """A private, mutable copy of an evaluation point.

    Each worker owns exactly one buffer for its lifetime. The buffer is reset
    from the point before every perturbation, so the caller's point is never
    modified.
    """

    def __init__(self, x: FloatArray) -> None:
        self._x = x
        self.values = np.array(x, dtype=np.float64, copy=True)

    def reset(self) -> FloatArray:
        """Copies the point back into the buffer and returns it."""
        np.copyto(self.values, self._x)
        return self.values

    def shift(self, i: int, delta: float) -> None:
        """Adds ``delta`` to coordinate ``i``."""
        self.values[i] += delta


def evaluate_at(function: ScalarFunction, values: FloatArray) -> float:
    """Evaluates a scalar function and returns its value as a float.

    Args:
        function: Scalar-valued function of a 1D parameter vector.
        values: Parameter vector passed to ``function``.

    Returns:
        The function value.

    Raises:
        EvaluationError: If ``function`` raises. The original exception is
            chained as ``__cause__``.
        TypeError: If ``function`` does not return a real scalar.
    """
    try:
        out = function(values)
    except Exception as exc:
        raise EvaluationError(
            f"function evaluation failed at x={values.tolist()}: {exc}"
        ) from exc

    try:
        arr = np.asarray(out, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"function must return a real scalar; got {type(out).__name__}."
        ) from exc
    if arr.size != 1:
        raise TypeError(
            f"function must return a scalar; got array with shape {arr.shape}."
        )
    return float(arr.item())


def _neighbor_value(
    function: ScalarFunction,
    scratch: ScratchBuffer,
    i: int,
    step: float,
) -> float:
    scratch.reset()
    scratch.shift(i, step)
    return evaluate_at(function, scratch.values)


def evaluate_neighbors(
    function: ScalarFunction,
    x: FloatArray,
    step: float,
    *,
    n_workers: int = 1,
    scratch: ScratchBuffer | None = None,
) -> FloatArray:
    """Returns ``f(x + step * e_i)`` for every axis ``i``.

    With one worker the axes are evaluated in order using a single scratch
    buffer. With more workers the axes are distributed over a pool of
    ``min(n_workers, n)`` threads, each owning its own buffer and writing a
    distinct entry of the table. The table is complete when this function
    returns.

    Args:
        function: Scalar-valued function of a 1D parameter vector.
        x: The point, as a 1D float array.
        step: Finite-difference step size.
        n_workers: Number of workers to use.
        scratch: Buffer to reuse on the serial path. A new one is created if
            not given.

    Returns:
        A read-only array of length ``n`` with the neighbour values.
    """
    n = int(x.size)
    neigh = np.empty(n, dtype=np.float64)

    if n_workers <= 1:
        if scratch is None:
            scratch = ScratchBuffer(x)
        for i in range(n):
            neigh[i] = _neighbor_value(function, scratch, i, step)
    else:
        def _handle(buf: ScratchBuffer, i: int) -> None:
            neigh[i] = _neighbor_value(function, buf, i, step)

        run_worker_pool(
            range(n),
            _handle,
            n_workers=min(n_workers, n),
            make_state=partial(ScratchBuffer, x),
        )

    neigh.flags.writeable = False
    return neigh
