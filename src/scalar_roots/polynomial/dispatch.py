from __future__ import annotations

from collections.abc import Sequence

from scalar_roots.polynomial.cubic import find_roots_cubic
from scalar_roots.polynomial.linear import find_roots_linear
from scalar_roots.polynomial.quadratic import find_roots_quadratic
from scalar_roots.polynomial.quartic import find_roots_quartic
from scalar_roots.polynomial.root_set import RootSet
from scalar_roots.typing import Scalar

_BY_DEGREE = {
    1: find_roots_linear,
    2: find_roots_quadratic,
    3: find_roots_cubic,
    4: find_roots_quartic,
}


def find_roots_polynomial(coefficients: Sequence[Scalar]) -> RootSet:
    """Dispatch on ``len(coefficients) - 1``; coefficients run highest degree first."""
    degree = len(coefficients) - 1
    try:
        solver = _BY_DEGREE[degree]
    except KeyError:
        raise ValueError(
            f"Expected 2 to 5 coefficients (degree 1 to 4), got {len(coefficients)}"
        ) from None
    return solver(*coefficients)
