from __future__ import annotations

import numpy as np

from scalar_roots.numerics.precision import as_scalars, is_negligible
from scalar_roots.polynomial.linear import find_roots_linear
from scalar_roots.polynomial.root_set import NoRoots, RootSet, TwoRoots
from scalar_roots.typing import Scalar


def find_roots_quadratic(a2: Scalar, a1: Scalar, a0: Scalar) -> RootSet:
    """Solve ``a2*x^2 + a1*x + a0 = 0``.

    Falls back to :func:`find_roots_linear` when ``a2 == 0``. A double root is
    returned twice, ``TwoRoots(r, r)``. A discriminant within four ulps of
    ``a1^2 + |4*a2*a0|`` is treated as zero, so two roots closer than about
    ``6 * sqrt(machine_eps) * |x|`` (roughly ``8e-8 * |x|`` in float64) are
    reported as one double root.

    Distinct roots use the cancellation-free pair ``q / a2`` and ``a0 / q``
    with ``q = -(a1 + sign(a1) * sqrt(D)) / 2``. The coefficients are first
    scaled by a power of two, so ``a1^2`` and ``4*a2*a0`` cannot overflow for
    finite input.

    Examples
    --------
    >>> find_roots_quadratic(1.0, 0.0, -4.0)
    TwoRoots(x0=np.float64(-2.0), x1=np.float64(2.0))
    """
    a2, a1, a0 = as_scalars(a2, a1, a0)
    if a2 == 0:
        return find_roots_linear(a1, a0)

    # exact in binary floating point: the roots are unchanged
    _, exp = np.frexp(max(abs(a2), abs(a1), abs(a0)))
    s2, s1, s0 = (np.ldexp(c, -exp) for c in (a2, a1, a0))

    b_sq = s1 * s1
    ac4 = 4 * s2 * s0
    discriminant = b_sq - ac4
    if is_negligible(discriminant, b_sq + abs(ac4), ulps=4.0):
        x = -s1 / (2 * s2)
        return TwoRoots(x, x)
    if discriminant < 0:
        return NoRoots()

    q = -(s1 + np.copysign(np.sqrt(discriminant), s1)) / 2
    return RootSet.from_roots((q / s2, s0 / q))
