from __future__ import annotations

from dataclasses import dataclass

from scalar_roots.numerics.convergence import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    Convergence,
    DebugConvergence,
)
from scalar_roots.solvers.registry import RootMethod


@dataclass(frozen=True, slots=True)
class SolverConfig:
    tolerance: float = DEFAULT_TOLERANCE
    max_iter: int = DEFAULT_MAX_ITER
    method: RootMethod = RootMethod.BRENT
    debug: bool = False  # record/log every convergence check

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise ValueError("tolerance must be > 0")
        if self.max_iter <= 0:
            raise ValueError("max_iter must be > 0")
        # Accept plain strings, fail early on unknown names.
        object.__setattr__(self, "method", RootMethod(self.method))

    def convergence(self) -> Convergence:
        if self.debug:
            return DebugConvergence(eps=self.tolerance, max_iter=self.max_iter)
        return Convergence(eps=self.tolerance, max_iter=self.max_iter)
