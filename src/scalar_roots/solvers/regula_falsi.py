from __future__ import annotations

import logging

from scalar_roots.exceptions import NoConvergenceError
from scalar_roots.numerics.convergence import DEFAULT_TOLERANCE, Convergence, as_convergence
from scalar_roots.numerics.precision import as_scalars
from scalar_roots.solvers._common import CountedFunction, check_bracket, same_sign
from scalar_roots.solvers.result import RootResult
from scalar_roots.typing import Scalar, ScalarFn

logger = logging.getLogger(__name__)

METHOD = "regula_falsi"


def find_root_regula_falsi(
    a: Scalar,
    b: Scalar,
    f: ScalarFn,
    tolerance: float | Convergence = DEFAULT_TOLERANCE,
    *,
    max_iter: int | None = None,
) -> RootResult:
    """Find a root of ``f`` in ``[a, b]`` by false position (Illinois variant).

    Each step takes ``c = b - f(b) (b - a) / (f(b) - f(a))`` and replaces the
    endpoint whose function value has the sign of ``f(c)``. When the same
    endpoint survives two steps in a row its stored function value is halved,
    which pulls the next secant towards it and avoids the one-sided stagnation
    of plain regula falsi.

    Stops when ``|f(c)| < eps`` or the bracket is narrower than ``eps``. The
    bracket only ever shrinks; the final one is returned in
    :attr:`RootResult.bracket`.

    Raises
    ------
    InvalidBracketError
        If ``f(a)`` and ``f(b)`` have the same sign.
    NoConvergenceError
        If the iteration bound is spent.
    """
    conv = as_convergence(tolerance, max_iter)
    a, b = as_scalars(a, b)
    if b < a:
        a, b = b, a
    dtype = type(a)
    fn = CountedFunction(f, dtype)

    fa = fn(a)
    fb = fn(b)
    for x, fx in ((a, fa), (b, fb)):
        if fx == 0:
            return RootResult(
                root=x,
                converged=True,
                iterations=0,
                method=METHOD,
                f_at_root=fx,
                tolerance=conv.eps,
                bracket=(a, b),
                function_calls=fn.calls,
            )
    check_bracket("Regula falsi", a, b, fa, fb)

    # -1: `a` was kept on the previous step, +1: `b` was kept.
    side = 0
    c, fc = a, fa
    for it in range(1, conv.max_iter + 1):
        c = b - fb * (b - a) / (fb - fa)
        fc = fn(c)
        if conv.is_root_found(fc):
            logger.debug("regula_falsi: root %r found in %d steps", c, it)
            return RootResult(
                root=c,
                converged=True,
                iterations=it,
                method=METHOD,
                f_at_root=fc,
                tolerance=conv.eps,
                bracket=(a, b),
                function_calls=fn.calls,
            )

        if same_sign(fc, fb):
            b, fb = c, fc
            if side == -1:
                fa /= 2
            side = -1
        else:
            a, fa = c, fc
            if side == 1:
                fb /= 2
            side = 1

        if conv.is_converged(a, b):
            logger.debug("regula_falsi: bracket closed around %r in %d steps", c, it)
            return RootResult(
                root=c,
                converged=True,
                iterations=it,
                method=METHOD,
                f_at_root=fc,
                tolerance=conv.eps,
                bracket=(a, b),
                function_calls=fn.calls,
            )

    logger.debug("regula_falsi: no convergence, bracket (%r, %r)", a, b)
    raise NoConvergenceError(
        f"Regula falsi did not converge within max_iter={conv.max_iter}; "
        f"last bracket ({a!r}, {b!r})."
    )
