"""Central-difference stencils for the entries of a Hessian.

With ``h`` the step, ``f0 = f(x)`` and ``fi = f(x + h e_i)``, the entries are

* diagonal: ``((fi - f0)/h - (f0 - f(x - h e_i))/h) / h``
* mixed (``i < j``): ``((f(x + h e_i + h e_j) - fj)/h - (fi - f0)/h) / h``

The diagonal formula is the three-point central second difference. The mixed
formula is a forward difference of forward differences and carries an
``O(h)`` truncation error.
"""

from __future__ import annotations

from hesskit.finite.neighbors import ScratchBuffer, evaluate_at
from hesskit.utils.types import FloatArray, ScalarFunction

__all__ = [
    "CENTRAL_2ND_STEP",
    "compute_entry",
    "diagonal_entry",
    "mixed_entry",
]

#: Default step for the second-order central difference.
CENTRAL_2ND_STEP = 1e-4


def diagonal_entry(origin: float, f_plus: float, f_minus: float, step: float) -> float:
    """Returns the central second difference along one axis.

    Args:
        origin: ``f(x)``.
        f_plus: ``f(x + step * e_i)``.
        f_minus: ``f(x - step * e_i)``.
        step: Step size.

    Returns:
        The approximation of ``d^2 f / dx_i^2``.
    """
    return ((f_plus - origin) / step - (origin - f_minus) / step) / step


def mixed_entry(origin: float, f_i: float, f_j: float, f_ij: float, step: float) -> float:
    """Returns the mixed second difference for two distinct axes.

    Args:
        origin: ``f(x)``.
        f_i: ``f(x + step * e_i)``.
        f_j: ``f(x + step * e_j)``.
        f_ij: ``f(x + step * e_i + step * e_j)``.
        step: Step size.

    Returns:
        The approximation of ``d^2 f / dx_i dx_j``.
    """
    return ((f_ij - f_j) / step - (f_i - origin) / step) / step


def compute_entry(
    function: ScalarFunction,
    scratch: ScratchBuffer,
    i: int,
    j: int,
    origin: float,
    neigh: FloatArray,
    step: float,
) -> float:
    """Evaluates the extra stencil point for entry (i, j) and combines it.

    Diagonal entries need ``f(x - step * e_i)``; mixed entries need
    ``f(x + step * e_i + step * e_j)``. All other stencil values come from
    ``origin`` and the neighbour table.

    Args:
        function: Scalar-valued function of a 1D parameter vector.
        scratch: The calling worker's scratch buffer.
        i: Row index.
        j: Column index, ``j >= i``.
        origin: ``f(x)``.
        neigh: Neighbour table, ``neigh[k] = f(x + step * e_k)``.
        step: Step size.

    Returns:
        The Hessian entry (i, j).
    """
    scratch.reset()
    if i == j:
        scratch.shift(i, -step)
        f_minus = evaluate_at(function, scratch.values)
        return diagonal_entry(origin, float(neigh[i]), f_minus, step)

    scratch.shift(i, step)
    scratch.shift(j, step)
    f_ij = evaluate_at(function, scratch.values)
    return mixed_entry(origin, float(neigh[i]), float(neigh[j]), f_ij, step)
