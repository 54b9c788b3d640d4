# src/scalar_roots/numerics/precision.py
"""
Scalar precision helpers.

Every solver works in a single floating-point precision chosen by the caller:
numpy floating inputs decide the dtype (the widest one wins), plain Python
numbers fall back to float64. Arithmetic on numpy scalars keeps that dtype,
so a float32 solve stays float32 from coefficients to roots.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from scalar_roots.typing import FloatDType, Scalar

__all__ = [
    "scalar_dtype",
    "as_scalars",
    "machine_epsilon",
    "is_negligible",
    "horner",
]


def scalar_dtype(*values: Any) -> type[np.floating]:
    """Return the working dtype for ``values``.

    Parameters
    ----------
    *values
        Scalars supplied by the caller (coefficients, bracket endpoints, ...).

    Returns
    -------
    type[numpy.floating]
        ``numpy.result_type`` of the numpy floating inputs, or ``float64`` when
        none of the inputs is a numpy floating scalar.
    """
    dtypes = [np.dtype(type(v)) for v in values if isinstance(v, np.floating)]
    if not dtypes:
        return FloatDType
    return np.result_type(*dtypes).type


def as_scalars(*values: Any) -> tuple[np.floating, ...]:
    """Coerce ``values`` to numpy scalars of one common floating dtype."""
    dtype = scalar_dtype(*values)
    return tuple(dtype(v) for v in values)


def machine_epsilon(x: Scalar | type[np.floating]) -> np.floating:
    """Machine epsilon of the dtype of ``x`` (or of the dtype ``x`` itself)."""
    dtype = x if isinstance(x, type) else scalar_dtype(x)
    return np.finfo(dtype).eps


def is_negligible(value: Scalar, scale: Scalar, *, ulps: float = 8.0) -> bool:
    """Whether ``value`` is indistinguishable from zero at magnitude ``scale``.

    ``value`` is usually the result of a cancelling subtraction (a
    discriminant, a depressed coefficient) and ``scale`` an estimate of the
    magnitude of the terms that produced it. Rounding error in ``value`` is
    then a few ulps of ``scale``.
    """
    eps = machine_epsilon(value)
    return bool(abs(value) <= ulps * eps * abs(scale))


def horner(coefficients: Sequence[Scalar], x: Scalar) -> Scalar:
    """Evaluate a polynomial at ``x``; coefficients run from highest degree down."""
    acc = x * 0
    for c in coefficients:
        acc = acc * x + c
    return acc
