# src/scalar_roots/solvers/__init__.py
"""
Iterative root finders for scalar functions.

All solvers return :class:`RootResult` and raise a
:class:`~scalar_roots.exceptions.RootFindingError` subclass on failure.
Each call is independent; thread safety only depends on the caller's function.
"""

from .brent import find_root_brent
from .newton import find_root_newton_raphson
from .regula_falsi import find_root_regula_falsi
from .registry import RootMethod, find_root, get_root_method
from .result import RootResult
from .secant import find_root_secant

__all__ = [
    "RootResult",
    "RootMethod",
    "find_root",
    "get_root_method",
    "find_root_newton_raphson",
    "find_root_secant",
    "find_root_regula_falsi",
    "find_root_brent",
]
