"""
scalar_roots

Real roots of scalar functions and of polynomials up to degree four.

The main entry points are re-exported here, so you can write, for example:

    from scalar_roots import find_root_brent, find_roots_cubic
"""

from .config import SolverConfig
from .exceptions import (
    InvalidBracketError,
    NoConvergenceError,
    RootFindingError,
    StallError,
    ZeroDerivativeError,
)
from .numerics.convergence import Convergence, DebugConvergence
from .polynomial import (
    FourRoots,
    InfiniteRoots,
    NoRoots,
    OneRoot,
    RootSet,
    ThreeRoots,
    TwoRoots,
    find_roots_biquadratic,
    find_roots_cubic,
    find_roots_cubic_depressed,
    find_roots_cubic_normalized,
    find_roots_linear,
    find_roots_polynomial,
    find_roots_quadratic,
    find_roots_quartic,
    find_roots_quartic_depressed,
)
from .solvers import (
    RootMethod,
    RootResult,
    find_root,
    find_root_brent,
    find_root_newton_raphson,
    find_root_regula_falsi,
    find_root_secant,
    get_root_method,
)

__all__ = [
    # Config + convergence
    "SolverConfig",
    "Convergence",
    "DebugConvergence",
    # Errors
    "RootFindingError",
    "NoConvergenceError",
    "ZeroDerivativeError",
    "StallError",
    "InvalidBracketError",
    # Iterative solvers
    "RootResult",
    "RootMethod",
    "find_root",
    "get_root_method",
    "find_root_newton_raphson",
    "find_root_secant",
    "find_root_regula_falsi",
    "find_root_brent",
    # Polynomial solvers
    "RootSet",
    "NoRoots",
    "OneRoot",
    "TwoRoots",
    "ThreeRoots",
    "FourRoots",
    "InfiniteRoots",
    "find_roots_linear",
    "find_roots_quadratic",
    "find_roots_cubic",
    "find_roots_cubic_normalized",
    "find_roots_cubic_depressed",
    "find_roots_quartic",
    "find_roots_biquadratic",
    "find_roots_quartic_depressed",
    "find_roots_polynomial",
]
