"""Provides finite-difference Hessians of scalar functions."""

from importlib.metadata import PackageNotFoundError, version

from hesskit.calculus.hessian import build_hessian
from hesskit.calculus.hessian_config import HessianSettings
from hesskit.errors import DimensionMismatchError, EvaluationError, InvalidStepError
from hesskit.hessian_kit import HessianKit
from hesskit.symmetric import SymmetricMatrix

try:
    __version__ = version("hesskit")
except PackageNotFoundError:
    pass

__all__ = [
    "DimensionMismatchError",
    "EvaluationError",
    "HessianKit",
    "HessianSettings",
    "InvalidStepError",
    "SymmetricMatrix",
    "build_hessian",
]
