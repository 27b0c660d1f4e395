"""Concurrency management for Hessian computations."""

from __future__ import annotations

import os
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, TypeVar

__all__ = [
    "detect_hw_threads",
    "normalize_workers",
    "resolve_workers",
    "run_worker_pool",
]

S = TypeVar("S")
J = TypeVar("J")

# Marks a closed job queue; one per worker is enqueued after the last job.
_CLOSED = object()


def _int_env(name: str) -> int | None:
    """Reads a positive integer from an environment variable, or None if unset/invalid.

    Args:
        name: Environment variable name.

    Returns:
        Positive integer value, or None.
    """
    v = os.getenv(name)
    if not v:
        return None
    try:
        i = int(v)
        return i if i > 0 else None
    except ValueError:
        return None


def detect_hw_threads() -> int:
    """Detects the number of hardware threads, capped by relevant environment variables.

    Returns:
        Number of hardware threads (at least 1).
    """
    hints = [
        _int_env("OMP_NUM_THREADS"),
        _int_env("MKL_NUM_THREADS"),
        _int_env("OPENBLAS_NUM_THREADS"),
        _int_env("VECLIB_MAXIMUM_THREADS"),
        _int_env("NUMEXPR_NUM_THREADS"),
    ]
    env_cap = min([h for h in hints if h is not None], default=None)
    hw = os.cpu_count() or 1
    return max(1, min(hw, env_cap) if env_cap else hw)


def normalize_workers(
    n_workers: Any
) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).

    Raises:
        None: Invalid inputs are coerced to 1.
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n


def resolve_workers(
    concurrent: bool,
    total_jobs: int,
    n_workers: int | None = None,
) -> int:
    """Decides how many workers compute the entries of one Hessian.

    A serial computation always uses one worker. A concurrent one uses the
    available parallelism, which is the detected number of hardware threads
    unless ``n_workers`` overrides it, clipped so that the pool never holds
    more workers than there are jobs.

    Args:
        concurrent: Whether the worker-pool path was requested.
        total_jobs: Number of independent Hessian entries, ``n + n*(n-1)/2``.
        n_workers: Optional override for the available parallelism.

    Returns:
        Number of workers, at least 1.
    """
    if not concurrent:
        return 1
    if n_workers is None:
        available = detect_hw_threads()
    else:
        available = normalize_workers(n_workers)
    return max(1, min(available, int(total_jobs)))


def run_worker_pool(
    jobs: Iterable[J],
    handle: Callable[[S, J], None],
    *,
    n_workers: int,
    make_state: Callable[[], S] | None = None,
) -> None:
    """Drains a bounded job queue with a fixed pool of threads.

    Every worker builds its own private state with ``make_state`` (for example
    a scratch copy of the evaluation point) and then calls
    ``handle(state, job)`` for each job it pulls from the queue. The caller
    thread produces the jobs and closes the queue once the last job has been
    enqueued. The function returns only after every worker has exited, so the
    side effects of all handled jobs are visible to the caller.

    If a job fails, workers stop handling new jobs and only drain the queue.
    This includes ``BaseException`` subclasses such as ``SystemExit``, so the
    producer never waits on a queue that nobody reads.
    Jobs already running are allowed to finish. The first observed exception
    is re-raised once the pool has shut down.

    Args:
        jobs: Jobs to process. Each job is handed to exactly one worker.
        handle: Callable processing one job with the worker's private state.
        n_workers: Upper bound on the number of workers. The pool never
            holds more workers than there are jobs.
        make_state: Factory for the per-worker state. If ``None``, ``handle``
            receives ``None`` as its state.

    Raises:
        BaseException: The first exception raised by ``make_state`` or ``handle``.
    """
    jobs = list(jobs)
    if not jobs:
        return
    workers = max(1, min(normalize_workers(n_workers), len(jobs)))

    job_queue: queue.Queue = queue.Queue(maxsize=workers)
    abort = threading.Event()
    failures: list[BaseException] = []
    failures_lock = threading.Lock()

    def _record(exc: BaseException) -> None:
        with failures_lock:
            failures.append(exc)
        abort.set()

    def _worker() -> None:
        state = None
        try:
            state = make_state() if make_state is not None else None
        except BaseException as exc:
            _record(exc)
        while True:
            job = job_queue.get()
            if job is _CLOSED:
                return
            if abort.is_set():
                continue
            try:
                handle(state, job)
            except BaseException as exc:
                _record(exc)

    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(_worker) for _ in range(workers)]
        for job in jobs:
            if abort.is_set():
                break
            job_queue.put(job)
        for _ in range(workers):
            job_queue.put(_CLOSED)

    for fut in futures:
        fut.result()
    if failures:
        raise failures[0]
