from __future__ import annotations

import numpy as np

from scalar_roots.numerics.precision import as_scalars, is_negligible
from scalar_roots.polynomial.quadratic import find_roots_quadratic
from scalar_roots.polynomial.root_set import RootSet
from scalar_roots.typing import Scalar


def find_roots_cubic(a3: Scalar, a2: Scalar, a1: Scalar, a0: Scalar) -> RootSet:
    """Solve ``a3*x^3 + a2*x^2 + a1*x + a0 = 0``.

    Parameters
    ----------
    a3, a2, a1, a0 : Scalar
        Coefficients, highest degree first. Their dtype sets the precision.

    Returns
    -------
    RootSet
        Real roots, ascending, repeated roots listed with multiplicity.
        ``a3 == 0`` is delegated to :func:`find_roots_quadratic`.

    Notes
    -----
    The monic cubic is depressed with ``x = t - a2 / (3*a3)`` to
    ``t^3 + p*t + q = 0`` and then classified by the sign of
    ``(q/2)^2 + (p/3)^3`` (proportional to minus the discriminant):

    - negative: three distinct roots, trigonometric (Viete) form;
    - zero: a simple root ``3q/p`` and a double root ``-3q/(2p)``;
    - positive: one real root, Cardano's formula.

    ``p``, ``q`` and the discriminant count as zero when they are within
    rounding error of the terms they were computed from.
    """
    a3, a2, a1, a0 = as_scalars(a3, a2, a1, a0)
    if a3 == 0:
        return find_roots_quadratic(a2, a1, a0)
    if a0 == 0:
        # x * (a3*x^2 + a2*x + a1)
        return find_roots_quadratic(a3, a2, a1).add_root(a0)
    return find_roots_cubic_normalized(a2 / a3, a1 / a3, a0 / a3)


def find_roots_cubic_normalized(a2: Scalar, a1: Scalar, a0: Scalar) -> RootSet:
    """Solve the monic cubic ``x^3 + a2*x^2 + a1*x + a0 = 0``."""
    a, b, c = as_scalars(a2, a1, a0)
    a_sq = a * a
    p = b - a_sq / 3
    q = (2 * a_sq * a / 27 - a * b / 3) + c

    p_scale = abs(b) + a_sq / 3
    q_scale = abs(c) + abs(a * b) / 3 + 2 * abs(a_sq * a) / 27
    if is_negligible(p, p_scale):
        p = p * 0
    if is_negligible(q, q_scale):
        q = q * 0

    shift = -a / 3
    ts = _depressed_cubic_roots(p, q, p_scale, q_scale)
    return RootSet.from_roots(t + shift for t in ts)


def find_roots_cubic_depressed(p: Scalar, q: Scalar) -> RootSet:
    """Solve the depressed cubic ``t^3 + p*t + q = 0``."""
    p, q = as_scalars(p, q)
    return RootSet.from_roots(_depressed_cubic_roots(p, q, abs(p), abs(q)))


def _depressed_cubic_roots(
    p: Scalar, q: Scalar, p_scale: Scalar, q_scale: Scalar
) -> tuple[Scalar, ...]:
    if p == 0:
        # t^3 = -q
        if q == 0:
            return (q, q, q)
        return (np.cbrt(-q),)

    if q == 0:
        # t * (t^2 + p)
        if p < 0:
            s = np.sqrt(-p)
            return (-s, q, s)
        return (q,)

    half_q = q / 2
    third_p = p / 3
    d = half_q * half_q + third_p * third_p * third_p
    # Magnitude of the terms of d plus the error carried in from p and q.
    d_scale = (
        half_q * half_q
        + abs(third_p * third_p * third_p)
        + abs(half_q) * q_scale
        + third_p * third_p * p_scale
    )

    if is_negligible(d, d_scale):
        simple = 3 * q / p
        double = -simple / 2
        return (simple, double, double)

    if d < 0:
        # d < 0 implies p < 0
        r = 2 * np.sqrt(-third_p)
        cos_arg = np.clip(3 * q / (p * r), -1, 1)
        phi = np.arccos(cos_arg) / 3
        return tuple(r * np.cos(phi - 2 * np.pi * k / 3) for k in range(3))

    # u^3 = -q/2 - sign(q) sqrt(d), picking the sign that avoids cancellation
    u = -np.copysign(np.cbrt(abs(half_q) + np.sqrt(d)), q)
    return (u - third_p / u,)
