"""Calculus utilities.

Provides the finite-difference Hessian builder and its settings.
"""

from .hessian import build_hessian, hessian_jobs
from .hessian_config import HessianSettings

__all__ = ["build_hessian", "hessian_jobs", "HessianSettings"]
