# src/scalar_roots/numerics/__init__.py
"""
Numerical building blocks shared by both solver families.
"""

from .convergence import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    Convergence,
    ConvergenceCheck,
    DebugConvergence,
    as_convergence,
)
from .precision import as_scalars, horner, is_negligible, machine_epsilon, scalar_dtype

__all__ = [
    # Convergence
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOLERANCE",
    "Convergence",
    "ConvergenceCheck",
    "DebugConvergence",
    "as_convergence",
    # Precision
    "as_scalars",
    "horner",
    "is_negligible",
    "machine_epsilon",
    "scalar_dtype",
]
