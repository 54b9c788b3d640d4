from __future__ import annotations

import logging

import numpy as np

from scalar_roots.exceptions import NoConvergenceError, ZeroDerivativeError
from scalar_roots.numerics.convergence import DEFAULT_TOLERANCE, Convergence, as_convergence
from scalar_roots.numerics.precision import as_scalars, machine_epsilon
from scalar_roots.solvers._common import CountedFunction
from scalar_roots.solvers.result import RootResult
from scalar_roots.typing import Scalar, ScalarFn

logger = logging.getLogger(__name__)

METHOD = "newton_raphson"


def find_root_newton_raphson(
    x0: Scalar,
    f: ScalarFn,
    df: ScalarFn,
    tolerance: float | Convergence = DEFAULT_TOLERANCE,
    *,
    max_iter: int | None = None,
) -> RootResult:
    """Find a root of ``f`` with Newton-Raphson iteration.

    Iterates ``x_{n+1} = x_n - f(x_n) / f'(x_n)`` from ``x0`` until
    ``|f(x_n)| < eps`` or ``|x_{n+1} - x_n| < eps``. Convergence is local: from
    a poor starting point the iteration may cycle or diverge.

    Parameters
    ----------
    x0 : Scalar
        Initial estimate. Its dtype sets the working precision.
    f, df : Callable
        The function and its derivative.
    tolerance : float or Convergence, default 1e-10
        Absolute tolerance, or a full :class:`Convergence`.
    max_iter : int or None
        Overrides the iteration bound of ``tolerance``.

    Returns
    -------
    RootResult

    Raises
    ------
    ZeroDerivativeError
        If ``|f'(x_n)|`` is at or below machine epsilon.
    NoConvergenceError
        If the iteration bound is spent or an iterate becomes non-finite.
    """
    conv = as_convergence(tolerance, max_iter)
    (x,) = as_scalars(x0)
    dtype = type(x)
    tiny = machine_epsilon(dtype)
    fn = CountedFunction(f, dtype)

    for it in range(1, conv.max_iter + 1):
        fx = fn(x)
        if conv.is_root_found(fx):
            logger.debug("newton_raphson: root %r found after %d steps", x, it - 1)
            return RootResult(
                root=x,
                converged=True,
                iterations=it - 1,
                method=METHOD,
                f_at_root=fx,
                tolerance=conv.eps,
                function_calls=fn.calls,
            )

        dfx = dtype(df(x))
        if abs(dfx) <= tiny:
            logger.debug("newton_raphson: f'(%r) = %r", x, dfx)
            raise ZeroDerivativeError(
                f"Newton-Raphson failed: derivative vanished, f'({x!r}) = {dfx!r}."
            )

        x_new = x - fx / dfx
        if not np.isfinite(x_new):
            raise NoConvergenceError(
                f"Newton-Raphson produced a non-finite iterate from x={x!r}."
            )

        if conv.is_converged(x_new, x):
            f_new = fn(x_new)
            logger.debug("newton_raphson: converged to %r in %d steps", x_new, it)
            return RootResult(
                root=x_new,
                converged=True,
                iterations=it,
                method=METHOD,
                f_at_root=f_new,
                tolerance=conv.eps,
                function_calls=fn.calls,
            )

        x = x_new

    logger.debug("newton_raphson: no convergence, last iterate %r", x)
    raise NoConvergenceError(
        f"Newton-Raphson did not converge within max_iter={conv.max_iter}."
    )
