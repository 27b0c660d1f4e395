"""Contains functions used in constructing the Hessian of a scalar-valued function."""

from __future__ import annotations

from collections.abc import Iterator
from functools import partial

import numpy as np
from numpy.typing import ArrayLike

from hesskit.calculus.hessian_config import HessianSettings
from hesskit.finite.neighbors import ScratchBuffer, evaluate_at, evaluate_neighbors
from hesskit.finite.stencil import CENTRAL_2ND_STEP, compute_entry
from hesskit.logger import hesskit_logger
from hesskit.symmetric import SymmetricMatrix
from hesskit.utils.concurrency import resolve_workers, run_worker_pool
from hesskit.utils.types import FloatArray, Job, ScalarFunction
from hesskit.utils.validate import as_point, resolve_step, validate_sink

__all__ = [
    "build_hessian",
    "hessian_jobs",
]


def build_hessian(
    function: ScalarFunction,
    x: ArrayLike,
    dst: SymmetricMatrix | None = None,
    settings: HessianSettings | None = None,
) -> SymmetricMatrix:
    """Returns a finite-difference approximation of the Hessian of a function.

    The Hessian is computed in two phases. First the function is evaluated at
    every single-axis neighbour ``x + h * e_i``. Then every entry of the upper
    triangle is combined from ``f(x)``, the neighbour values and one extra
    evaluation. With ``settings.concurrent`` both phases are spread over a
    pool of threads; the second phase starts only after the first one has
    finished. The values do not depend on the number of workers.

    Args:
        function: Scalar-valued function of a 1D parameter vector. It must be
            deterministic, must not modify its input and, on the concurrent
            path, must be safe to call from several threads at once.
        x: The point at which the Hessian is evaluated, with ``n`` entries.
        dst: Optional ``n x n`` result matrix that is overwritten. A new one
            is allocated if not given.
        settings: Step size, known origin value and concurrency options.
            Defaults to ``HessianSettings()``.

    Returns:
        The symmetric ``n x n`` Hessian approximation (``dst`` if given).

    Raises:
        DimensionMismatchError: If ``dst`` is not ``n x n``.
        InvalidStepError: If the step is negative, NaN or infinite.
        EvaluationError: If ``function`` raises. On the concurrent path the
            first failure is raised after all workers have stopped. The
            content of ``dst`` is undefined after a failure.
        TypeError: If ``function`` does not return a scalar.
        ValueError: If ``x`` is not one-dimensional.
    """
    point = as_point(x)
    n = int(point.size)

    if dst is None:
        dst = SymmetricMatrix(n)
    else:
        validate_sink(dst, n)

    if settings is None:
        settings = HessianSettings()
    step = resolve_step(settings.step, CENTRAL_2ND_STEP)

    if n == 0:
        hesskit_logger.debug("build_hessian: empty point, no evaluations performed.")
        return dst

    total_jobs = n + n * (n - 1) // 2
    n_workers = resolve_workers(settings.concurrent, total_jobs, settings.n_workers)
    hesskit_logger.debug(
        "build_hessian: n=%d step=%g jobs=%d workers=%d path=%s",
        n, step, total_jobs, n_workers, "serial" if n_workers == 1 else "concurrent",
    )

    scratch = ScratchBuffer(point)
    if settings.origin_known:
        origin = settings.origin_value
    else:
        origin = evaluate_at(function, scratch.reset())

    if n_workers == 1:
        _hessian_serial(dst, function, point, scratch, step, origin)
    else:
        _hessian_concurrent(dst, function, point, step, origin, n_workers)

    if not np.isfinite(dst.to_array()).all():
        hesskit_logger.warning("Non-finite values encountered in Hessian.")
    return dst


def hessian_jobs(n: int) -> Iterator[Job]:
    """Yields the (i, j) entries of the upper triangle of an n x n Hessian.

    Each row yields its diagonal entry first, followed by the entries to its
    right, so that ``n + n*(n-1)/2`` jobs are produced in total.
    """
    for i in range(n):
        yield i, i
        for j in range(i + 1, n):
            yield i, j


def _hessian_serial(
    dst: SymmetricMatrix,
    function: ScalarFunction,
    x: FloatArray,
    scratch: ScratchBuffer,
    step: float,
    origin: float,
) -> None:
    neigh = evaluate_neighbors(function, x, step, scratch=scratch)
    for i, j in hessian_jobs(x.size):
        dst.set_sym(i, j, compute_entry(function, scratch, i, j, origin, neigh, step))


def _hessian_concurrent(
    dst: SymmetricMatrix,
    function: ScalarFunction,
    x: FloatArray,
    step: float,
    origin: float,
    n_workers: int,
) -> None:
    # evaluate_neighbors joins its pool, so the table is complete here.
    neigh = evaluate_neighbors(function, x, step, n_workers=n_workers)

    def _handle(scratch: ScratchBuffer, job: Job) -> None:
        i, j = job
        dst.set_sym(i, j, compute_entry(function, scratch, i, j, origin, neigh, step))

    run_worker_pool(
        hessian_jobs(x.size),
        _handle,
        n_workers=n_workers,
        make_state=partial(ScratchBuffer, x),
    )
