from __future__ import annotations

from scalar_roots.numerics.precision import as_scalars
from scalar_roots.polynomial.root_set import InfiniteRoots, NoRoots, OneRoot, RootSet
from scalar_roots.typing import Scalar


def find_roots_linear(a1: Scalar, a0: Scalar) -> RootSet:
    """Solve ``a1*x + a0 = 0``."""
    a1, a0 = as_scalars(a1, a0)
    if a1 == 0:
        return InfiniteRoots() if a0 == 0 else NoRoots()
    return OneRoot(-a0 / a1)
