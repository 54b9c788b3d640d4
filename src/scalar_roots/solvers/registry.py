from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from scalar_roots.numerics.convergence import Convergence
from scalar_roots.solvers.brent import find_root_brent
from scalar_roots.solvers.newton import find_root_newton_raphson
from scalar_roots.solvers.regula_falsi import find_root_regula_falsi
from scalar_roots.solvers.result import RootResult
from scalar_roots.solvers.secant import find_root_secant
from scalar_roots.typing import Scalar, ScalarFn

if TYPE_CHECKING:
    from scalar_roots.config import SolverConfig


class RootMethod(str, Enum):
    NEWTON_RAPHSON = "newton_raphson"
    SECANT = "secant"
    REGULA_FALSI = "regula_falsi"
    BRENT = "brent"


_ROOT_METHODS: dict[RootMethod, Callable[..., RootResult]] = {
    RootMethod.NEWTON_RAPHSON: find_root_newton_raphson,
    RootMethod.SECANT: find_root_secant,
    RootMethod.REGULA_FALSI: find_root_regula_falsi,
    RootMethod.BRENT: find_root_brent,
}


def get_root_method(method: RootMethod | str) -> Callable[..., RootResult]:
    """Return the solver function registered for ``method``."""
    try:
        key = RootMethod(method)
    except ValueError as exc:
        valid = ", ".join(m.value for m in RootMethod)
        raise ValueError(f"Unknown root method {method!r}; expected one of: {valid}") from exc
    return _ROOT_METHODS[key]


def _central_difference(f: ScalarFn) -> ScalarFn:
    def df(x: Scalar) -> Scalar:
        h = 1e-5 * max(1.0, abs(x))
        return (f(x + h) - f(x - h)) / (2.0 * h)

    return df


def find_root(
    f: ScalarFn,
    lo: Scalar,
    hi: Scalar,
    *,
    method: RootMethod | str | None = None,
    x0: Scalar | None = None,
    df: ScalarFn | None = None,
    tolerance: float | Convergence | None = None,
    max_iter: int | None = None,
    cfg: SolverConfig | None = None,
) -> RootResult:
    """Solve ``f(x) = 0`` with any registered method through one signature.

    - Newton-Raphson starts from ``x0`` (midpoint of ``(lo, hi)`` if omitted)
      and uses ``df`` when given, else a central finite difference.
    - Secant uses ``lo`` and ``hi`` as its two starting estimates.
    - Regula falsi and Brent use ``(lo, hi)`` as the bracket.

    Explicit ``method``/``tolerance``/``max_iter`` override the matching
    ``cfg`` field; fields left unset keep their ``cfg`` value. A
    :class:`Convergence` passed as ``tolerance`` carries its own ``max_iter``.
    """
    from scalar_roots.config import SolverConfig

    cfg = SolverConfig() if cfg is None else cfg
    key = RootMethod(cfg.method if method is None else method)
    tol = cfg.convergence() if tolerance is None else tolerance
    if max_iter is None and not isinstance(tol, Convergence):
        # a bare float tolerance keeps the configured iteration bound
        max_iter = cfg.max_iter
    solver = get_root_method(key)

    if key is RootMethod.NEWTON_RAPHSON:
        start = x0 if x0 is not None else lo + (hi - lo) / 2
        deriv = df if df is not None else _central_difference(f)
        return solver(start, f, deriv, tol, max_iter=max_iter)
    return solver(lo, hi, f, tol, max_iter=max_iter)
