"""Settings for the finite-difference Hessian."""

from __future__ import annotations


class HessianSettings:
    """Configuration for build_hessian."""

    def __init__(
        self,
        step: float = 0.0,
        origin_known: bool = False,
        origin_value: float = 0.0,
        concurrent: bool = False,
        n_workers: int | None = None,
    ):
        """
        Args:
            step:
                Finite-difference step size. Zero selects the library default
                (:data:`hesskit.finite.stencil.CENTRAL_2ND_STEP`).
            origin_known:
                If True, ``origin_value`` is used as ``f(x)`` and the function
                is not evaluated at the unperturbed point.
            origin_value:
                Precomputed ``f(x)``. Ignored unless ``origin_known`` is True.
            concurrent:
                If True, independent evaluations run on a pool of threads.
                The function must then be safe to call concurrently.
            n_workers:
                Overrides the detected parallelism of the concurrent path.
                Ignored when ``concurrent`` is False.
        """
        self.step = float(step)
        self.origin_known = bool(origin_known)
        self.origin_value = float(origin_value)
        self.concurrent = bool(concurrent)
        self.n_workers = None if n_workers is None else int(n_workers)

    def __repr__(self) -> str:
        return (
            f"HessianSettings(step={self.step!r}, origin_known={self.origin_known!r}, "
            f"origin_value={self.origin_value!r}, concurrent={self.concurrent!r}, "
            f"n_workers={self.n_workers!r})"
        )
