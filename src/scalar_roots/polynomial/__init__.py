# src/scalar_roots/polynomial/__init__.py
"""
Closed-form real-root solvers for polynomials of degree one to four.

Solvers never raise for finite coefficients: every input maps to one
:class:`RootSet` variant, including :class:`InfiniteRoots` for the zero
polynomial.
"""

from .cubic import find_roots_cubic, find_roots_cubic_depressed, find_roots_cubic_normalized
from .dispatch import find_roots_polynomial
from .linear import find_roots_linear
from .quadratic import find_roots_quadratic
from .quartic import find_roots_biquadratic, find_roots_quartic, find_roots_quartic_depressed
from .root_set import (
    FourRoots,
    InfiniteRoots,
    NoRoots,
    OneRoot,
    RootSet,
    ThreeRoots,
    TwoRoots,
)

__all__ = [
    # Results
    "RootSet",
    "NoRoots",
    "OneRoot",
    "TwoRoots",
    "ThreeRoots",
    "FourRoots",
    "InfiniteRoots",
    # Solvers
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
