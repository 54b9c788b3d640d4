from __future__ import annotations

import logging

import numpy as np

from scalar_roots.exceptions import NoConvergenceError, StallError
from scalar_roots.numerics.convergence import DEFAULT_TOLERANCE, Convergence, as_convergence
from scalar_roots.numerics.precision import as_scalars
from scalar_roots.solvers._common import CountedFunction
from scalar_roots.solvers.result import RootResult
from scalar_roots.typing import Scalar, ScalarFn

logger = logging.getLogger(__name__)

METHOD = "secant"


def find_root_secant(
    x0: Scalar,
    x1: Scalar,
    f: ScalarFn,
    tolerance: float | Convergence = DEFAULT_TOLERANCE,
    *,
    max_iter: int | None = None,
) -> RootResult:
    """Find a root of ``f`` with the secant method.

    ``x0`` and ``x1`` are two starting estimates; they do not need to bracket
    a root. Stops when ``|f(x_n)| < eps`` or ``|x_{n+1} - x_n| < eps``.

    Raises
    ------
    StallError
        If ``f(x_n) == f(x_{n-1})`` (the secant is horizontal) or the step is
        not finite.
    NoConvergenceError
        If the iteration bound is spent.
    """
    conv = as_convergence(tolerance, max_iter)
    x_prev, x = as_scalars(x0, x1)
    dtype = type(x)
    fn = CountedFunction(f, dtype)

    f_prev = fn(x_prev)
    if conv.is_root_found(f_prev):
        return RootResult(
            root=x_prev,
            converged=True,
            iterations=0,
            method=METHOD,
            f_at_root=f_prev,
            tolerance=conv.eps,
            function_calls=fn.calls,
        )
    fx = fn(x)

    for it in range(1, conv.max_iter + 1):
        if conv.is_root_found(fx):
            logger.debug("secant: root %r found after %d steps", x, it - 1)
            return RootResult(
                root=x,
                converged=True,
                iterations=it - 1,
                method=METHOD,
                f_at_root=fx,
                tolerance=conv.eps,
                function_calls=fn.calls,
            )

        if fx == f_prev:
            logger.debug("secant: stalled at %r, f=%r", x, fx)
            raise StallError(
                f"Secant stalled: f({x_prev!r}) == f({x!r}) == {fx!r}."
            )

        x_new = x - fx * (x - x_prev) / (fx - f_prev)
        if not np.isfinite(x_new):
            raise StallError(f"Secant produced a non-finite iterate from x={x!r}.")

        if conv.is_converged(x_new, x):
            f_new = fn(x_new)
            logger.debug("secant: converged to %r in %d steps", x_new, it)
            return RootResult(
                root=x_new,
                converged=True,
                iterations=it,
                method=METHOD,
                f_at_root=f_new,
                tolerance=conv.eps,
                function_calls=fn.calls,
            )

        x_prev, f_prev = x, fx
        x, fx = x_new, fn(x_new)

    logger.debug("secant: no convergence, last iterate %r", x)
    raise NoConvergenceError(f"Secant did not converge within max_iter={conv.max_iter}.")
