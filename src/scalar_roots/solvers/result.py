from __future__ import annotations

from dataclasses import dataclass

from scalar_roots.typing import Scalar


@dataclass(frozen=True, slots=True)
class RootResult:
    """Outcome of an iterative solve.

    Parameters
    ----------
    root : Scalar
        Approximate root, in the working precision of the solve.
    converged : bool
        Always ``True`` for a returned result; failures raise instead.
    iterations : int
        Number of completed update steps.
    method : str
        Name of the method that produced the result.
    f_at_root : Scalar
        ``f(root)``.
    tolerance : Scalar
        Tolerance actually honored. Equal to the requested ``eps`` except for
        Brent-Dekker, which relaxes it to what the precision can resolve at
        ``root``.
    bracket : tuple[Scalar, Scalar] or None
        Final bracket, for the bracketing methods.
    function_calls : int
        Number of evaluations of ``f``.
    """

    root: Scalar
    converged: bool
    iterations: int
    method: str
    f_at_root: Scalar
    tolerance: Scalar
    bracket: tuple[Scalar, Scalar] | None = None
    function_calls: int = 0
