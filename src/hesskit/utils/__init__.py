"""Utility functions for HessKit package."""

from .concurrency import resolve_workers, run_worker_pool
from .validate import as_point, resolve_step, validate_sink

__all__ = [
    "as_point",
    "resolve_step",
    "resolve_workers",
    "run_worker_pool",
    "validate_sink",
]
