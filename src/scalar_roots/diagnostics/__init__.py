"""
Diagnostics helpers (pandas tables). Not imported by the top-level package.
"""

from .benchmarks import (
    STANDARD_CASES,
    BenchmarkCase,
    iterative_benchmark,
    polynomial_residual_table,
)

__all__ = [
    "STANDARD_CASES",
    "BenchmarkCase",
    "iterative_benchmark",
    "polynomial_residual_table",
]
