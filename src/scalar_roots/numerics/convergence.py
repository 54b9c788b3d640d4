# src/scalar_roots/numerics/convergence.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import NamedTuple

from scalar_roots.typing import Scalar

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE: float = 1e-10
DEFAULT_MAX_ITER: int = 100


@dataclass(frozen=True, slots=True)
class Convergence:
    """Stopping rules shared by the iterative solvers.

    Parameters
    ----------
    eps : float, default 1e-10
        Absolute tolerance, used both on ``|f(x)|`` and on the step / bracket
        width ``|x1 - x2|``.
    max_iter : int, default 100
        Iteration bound. Every solver stops (and raises
        :class:`~scalar_roots.exceptions.NoConvergenceError`) once it is spent.
    """

    eps: float = DEFAULT_TOLERANCE
    max_iter: int = DEFAULT_MAX_ITER

    def __post_init__(self) -> None:
        if not self.eps > 0:
            raise ValueError("eps must be > 0")
        if self.max_iter <= 0:
            raise ValueError("max_iter must be > 0")

    def is_root_found(self, y: Scalar) -> bool:
        return bool(abs(y) < self.eps)

    def is_converged(self, x1: Scalar, x2: Scalar, eps: Scalar | None = None) -> bool:
        tol = self.eps if eps is None else eps
        return bool(abs(x1 - x2) < tol)


class ConvergenceCheck(NamedTuple):
    kind: str
    args: tuple[Scalar, ...]
    passed: bool


@dataclass(frozen=True, slots=True)
class DebugConvergence(Convergence):
    """:class:`Convergence` that logs and records every check.

    ``history`` is appended to on each call, so an instance must not be shared
    between concurrent solves.
    """

    history: list[ConvergenceCheck] = field(
        default_factory=list, compare=False, repr=False
    )

    def is_root_found(self, y: Scalar) -> bool:
        passed = Convergence.is_root_found(self, y)
        self.history.append(ConvergenceCheck("root", (y,), passed))
        logger.debug("is_root_found(f=%r) -> %s", y, passed)
        return passed

    def is_converged(self, x1: Scalar, x2: Scalar, eps: Scalar | None = None) -> bool:
        passed = Convergence.is_converged(self, x1, x2, eps)
        self.history.append(ConvergenceCheck("converged", (x1, x2), passed))
        logger.debug("is_converged(%r, %r) -> %s", x1, x2, passed)
        return passed

    def widths(self) -> list[Scalar]:
        """``|x1 - x2|`` of every recorded step/bracket check, in order."""
        return [abs(c.args[0] - c.args[1]) for c in self.history if c.kind == "converged"]


def as_convergence(
    tolerance: float | Convergence, max_iter: int | None = None
) -> Convergence:
    """Normalize a float tolerance (or a :class:`Convergence`) plus optional bound."""
    if isinstance(tolerance, Convergence):
        if max_iter is None or max_iter == tolerance.max_iter:
            return tolerance
        return replace(tolerance, max_iter=int(max_iter))
    return Convergence(
        eps=float(tolerance),
        max_iter=DEFAULT_MAX_ITER if max_iter is None else int(max_iter),
    )
