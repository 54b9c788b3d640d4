from __future__ import annotations

import logging

import numpy as np

from scalar_roots.exceptions import NoConvergenceError
from scalar_roots.numerics.convergence import DEFAULT_TOLERANCE, Convergence, as_convergence
from scalar_roots.numerics.precision import as_scalars, machine_epsilon
from scalar_roots.solvers._common import CountedFunction, check_bracket, same_sign
from scalar_roots.solvers.result import RootResult
from scalar_roots.typing import Scalar, ScalarFn

logger = logging.getLogger(__name__)

METHOD = "brent"


def find_root_brent(
    a: Scalar,
    b: Scalar,
    f: ScalarFn,
    tolerance: float | Convergence = DEFAULT_TOLERANCE,
    *,
    max_iter: int | None = None,
) -> RootResult:
    """Find a root of ``f`` in ``[a, b]`` with the Brent-Dekker method.

    Combines bisection, the secant step and inverse quadratic interpolation.
    An interpolated step is taken only when it lands inside the bracket and
    shrinks it fast enough compared with the step before last; otherwise the
    method bisects. The bracket ``[b, c]`` always holds a sign change, so the
    worst case is no slower than bisection while simple roots converge
    superlinearly.

    The width tolerance is relaxed to ``eps + 4 * machine_eps * |x|``, so
    tolerances finer than the working precision can resolve still terminate.
    The relaxed value is reported in :attr:`RootResult.tolerance`.

    Parameters
    ----------
    a, b : Scalar
        Bracket endpoints, ``f(a)`` and ``f(b)`` of opposite sign.
    f : Callable
        Continuous function on ``[a, b]``.
    tolerance : float or Convergence, default 1e-10
        Absolute tolerance, or a full :class:`Convergence`.
    max_iter : int or None
        Overrides the iteration bound of ``tolerance``.

    Raises
    ------
    InvalidBracketError
        If ``f(a)`` and ``f(b)`` have the same sign.
    NoConvergenceError
        If the iteration bound is spent.
    """
    conv = as_convergence(tolerance, max_iter)
    a, b = as_scalars(a, b)
    dtype = type(a)
    mach = machine_epsilon(dtype)
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
                bracket=(min(a, b), max(a, b)),
                function_calls=fn.calls,
            )
    check_bracket("Brent", a, b, fa, fb)

    # b: best estimate, a: previous estimate, c: contrapoint (f(b), f(c) differ in sign)
    c, fc = a, fa
    d = e = b - a
    for it in range(1, conv.max_iter + 1):
        if same_sign(fb, fc):
            c, fc = a, fa
            d = e = b - a
        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol = conv.eps + 4 * mach * abs(b)
        m = (c - b) / 2
        if conv.is_root_found(fb) or conv.is_converged(b, c, eps=tol):
            logger.debug("brent: converged to %r in %d steps (tol=%r)", b, it - 1, tol)
            return RootResult(
                root=b,
                converged=True,
                iterations=it - 1,
                method=METHOD,
                f_at_root=fb,
                tolerance=dtype(tol),
                bracket=(min(b, c), max(b, c)),
                function_calls=fn.calls,
            )

        half_tol = tol / 2
        if abs(e) >= half_tol and abs(fa) > abs(fb):
            s = fb / fa
            if a == c:
                # secant
                p = 2 * m * s
                q = 1 - s
            else:
                # inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2 * m * q * (q - r) - (b - a) * (r - 1))
                q = (q - 1) * (r - 1) * (s - 1)
            if p > 0:
                q = -q
            else:
                p = -p

            if 2 * p < min(3 * m * q - abs(half_tol * q), abs(e * q)):
                e = d
                d = p / q
            else:
                d = e = m
        else:
            d = e = m

        a, fa = b, fb
        if abs(d) > half_tol:
            b = b + d
        else:
            b = b + np.copysign(half_tol, m)
        fb = fn(b)

    logger.debug("brent: no convergence, bracket (%r, %r)", b, c)
    raise NoConvergenceError(
        f"Brent did not converge within max_iter={conv.max_iter}; "
        f"last bracket ({min(b, c)!r}, {max(b, c)!r})."
    )
