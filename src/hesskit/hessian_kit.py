"""Provides the HessianKit class.

A light wrapper around :func:`hesskit.calculus.hessian.build_hessian` that
binds a function to the point at which its Hessian is evaluated.

Typical usage examples:

>>> import numpy as np
>>> from hesskit.hessian_kit import HessianKit
>>>
>>> def saddle(x):
...     return x[0] ** 2 - x[1] ** 2
>>>
>>> kit = HessianKit(saddle, x0=np.array([0.5, -1.0]))
>>> hess = kit.hessian()
>>> hess_threads = kit.hessian(concurrent=True)
"""

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from hesskit.calculus import HessianSettings, build_hessian
from hesskit.symmetric import SymmetricMatrix
from hesskit.utils.types import ArrayLike1D


class HessianKit:
    """Provides finite-difference Hessians of a scalar function at a fixed point."""

    def __init__(
        self,
        function: Callable[[np.ndarray], float],
        x0: ArrayLike1D,
    ):
        """Initialise with function and evaluation point.

        Args:
            function: Maps a 1D parameter array of length P to a scalar.
            x0: Point at which to evaluate the Hessian (shape (P,)).
        """
        self.function = function
        self.x0 = np.asarray(x0, dtype=float)

    def hessian(
        self,
        *,
        step: float = 0.0,
        concurrent: bool = False,
        origin_value: float | None = None,
        n_workers: int | None = None,
        dst: SymmetricMatrix | None = None,
    ) -> NDArray[np.floating]:
        """Returns the Hessian at ``x0`` as a dense (P, P) array.

        Args:
            step: Finite-difference step size; zero selects the default.
            concurrent: Evaluate independent entries on a pool of threads.
            origin_value: Precomputed ``function(x0)``, if available.
            n_workers: Overrides the detected parallelism when ``concurrent``.
            dst: Optional result matrix to reuse.
        """
        settings = HessianSettings(
            step=step,
            origin_known=origin_value is not None,
            origin_value=0.0 if origin_value is None else origin_value,
            concurrent=concurrent,
            n_workers=n_workers,
        )
        return build_hessian(self.function, self.x0, dst=dst, settings=settings).to_array()
