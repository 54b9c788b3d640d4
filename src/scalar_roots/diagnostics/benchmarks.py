"""
scalar_roots.diagnostics.benchmarks

Tables for eyeballing solver behaviour:
- iterative methods on a small library of bracketed functions, checked
  against ``scipy.optimize.brentq``
- polynomial solvers, checked through residuals and against ``numpy.roots``
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd
from scipy import optimize

from scalar_roots.exceptions import RootFindingError
from scalar_roots.numerics.precision import horner
from scalar_roots.polynomial import find_roots_polynomial
from scalar_roots.solvers import RootMethod, find_root
from scalar_roots.typing import ScalarFn


@dataclass(frozen=True, slots=True)
class BenchmarkCase:
    name: str
    f: ScalarFn
    df: ScalarFn
    lo: float
    hi: float


STANDARD_CASES: tuple[BenchmarkCase, ...] = (
    BenchmarkCase("sqrt2", lambda x: x * x - 2.0, lambda x: 2.0 * x, 0.0, 2.0),
    BenchmarkCase(
        "wallis_cubic",
        lambda x: x**3 - 2.0 * x - 5.0,
        lambda x: 3.0 * x**2 - 2.0,
        2.0,
        3.0,
    ),
    BenchmarkCase(
        "cos_minus_x", lambda x: np.cos(x) - x, lambda x: -np.sin(x) - 1.0, 0.0, 1.0
    ),
    BenchmarkCase("exp_minus_3", lambda x: np.exp(x) - 3.0, np.exp, 0.0, 2.0),
    BenchmarkCase(
        "kepler",
        lambda x: x - 0.5 * np.sin(x) - 1.0,
        lambda x: 1.0 - 0.5 * np.cos(x),
        0.0,
        3.0,
    ),
)


def iterative_benchmark(
    cases: Iterable[BenchmarkCase] = STANDARD_CASES,
    methods: Iterable[RootMethod | str] = tuple(RootMethod),
    *,
    tolerance: float = 1e-10,
    max_iter: int = 100,
) -> pd.DataFrame:
    """
    Run every method on every case through :func:`find_root`.

    Returns a DataFrame with columns:
      case, method, root, iterations, function_calls, f_at_root, converged,
      error, abs_error

    ``abs_error`` is measured against ``scipy.optimize.brentq`` run to
    ``xtol=1e-14``. Failed solves keep a row with ``converged=False`` and the
    exception class name in ``error``.
    """
    methods = [RootMethod(m) for m in methods]
    rows = []
    for case in cases:
        reference = float(optimize.brentq(case.f, case.lo, case.hi, xtol=1e-14))
        for method in methods:
            try:
                rr = find_root(
                    case.f,
                    case.lo,
                    case.hi,
                    method=method,
                    df=case.df,
                    tolerance=tolerance,
                    max_iter=max_iter,
                )
            except RootFindingError as exc:
                rows.append(
                    dict(
                        case=case.name,
                        method=method.value,
                        root=np.nan,
                        iterations=np.nan,
                        function_calls=np.nan,
                        f_at_root=np.nan,
                        converged=False,
                        error=type(exc).__name__,
                        abs_error=np.nan,
                    )
                )
                continue

            rows.append(
                dict(
                    case=case.name,
                    method=method.value,
                    root=float(rr.root),
                    iterations=rr.iterations,
                    function_calls=rr.function_calls,
                    f_at_root=float(rr.f_at_root),
                    converged=bool(rr.converged),
                    error="",
                    abs_error=abs(float(rr.root) - reference),
                )
            )
    return pd.DataFrame(rows)


def _numpy_real_roots(coefficients: Sequence[float], imag_tol: float) -> np.ndarray:
    z = np.roots(np.asarray(coefficients, dtype=float))
    return np.sort(z[np.abs(z.imag) <= imag_tol].real)


def polynomial_residual_table(
    coefficient_sets: Iterable[Sequence[float]],
    *,
    imag_tol: float = 1e-7,
) -> pd.DataFrame:
    """
    Solve each polynomial (coefficients highest degree first) and report:
      coefficients, variant, roots, max_residual, numpy_count, max_abs_diff

    ``max_residual`` is the largest ``|P(x)|`` over the returned roots (NaN if
    there are none). ``max_abs_diff`` compares with the real roots of
    ``numpy.roots`` (imaginary part below ``imag_tol``) when both agree on the
    count, else NaN.
    """
    rows = []
    for coeffs in coefficient_sets:
        coeffs = tuple(float(c) for c in coeffs)
        result = find_roots_polynomial(coeffs)
        roots = np.array([float(x) for x in result.roots])

        residuals = [abs(float(horner(coeffs, x))) for x in roots]
        max_residual = max(residuals) if residuals else np.nan

        if result.is_infinite:
            numpy_count = np.nan
            max_abs_diff = np.nan
        else:
            ref = _numpy_real_roots(coeffs, imag_tol)
            numpy_count = len(ref)
            if len(ref) == len(roots) and len(roots) > 0:
                max_abs_diff = float(np.max(np.abs(ref - roots)))
            else:
                max_abs_diff = np.nan

        rows.append(
            dict(
                coefficients=coeffs,
                variant=type(result).__name__,
                roots=tuple(roots.tolist()),
                max_residual=max_residual,
                numpy_count=numpy_count,
                max_abs_diff=max_abs_diff,
            )
        )
    return pd.DataFrame(rows)
