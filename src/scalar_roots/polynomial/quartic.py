from __future__ import annotations

import numpy as np

from scalar_roots.numerics.precision import as_scalars, is_negligible
from scalar_roots.polynomial.cubic import find_roots_cubic
from scalar_roots.polynomial.quadratic import find_roots_quadratic
from scalar_roots.polynomial.root_set import NoRoots, RootSet, TwoRoots
from scalar_roots.typing import Scalar


def find_roots_quartic(
    a4: Scalar, a3: Scalar, a2: Scalar, a1: Scalar, a0: Scalar
) -> RootSet:
    """Solve ``a4*x^4 + a3*x^3 + a2*x^2 + a1*x + a0 = 0``.

    Parameters
    ----------
    a4, a3, a2, a1, a0 : Scalar
        Coefficients, highest degree first. Their dtype sets the precision.

    Returns
    -------
    RootSet
        Real roots, ascending, repeated roots listed with multiplicity.

    Notes
    -----
    Degenerate and structured inputs are peeled off first:

    - ``a4 == 0``: cubic;
    - ``a0 == 0``: the root ``0`` times a cubic;
    - ``a3 == a1 == 0``: biquadratic, solved as a quadratic in ``x^2``.

    Otherwise ``x = y - a3 / (4*a4)`` gives the depressed quartic
    ``y^4 + p*y^2 + q*y + r``, solved by :func:`find_roots_quartic_depressed`.

    Examples
    --------
    >>> find_roots_quartic(1.0, -10.0, 35.0, -50.0, 24.0).roots
    (np.float64(1.0), np.float64(2.0), np.float64(3.0), np.float64(4.0))
    """
    a4, a3, a2, a1, a0 = as_scalars(a4, a3, a2, a1, a0)
    if a4 == 0:
        return find_roots_cubic(a3, a2, a1, a0)
    if a0 == 0:
        return find_roots_cubic(a4, a3, a2, a1).add_root(a0)
    if a3 == 0 and a1 == 0:
        return find_roots_biquadratic(a4, a2, a0)

    a, b, c, d = a3 / a4, a2 / a4, a1 / a4, a0 / a4
    a_sq = a * a
    p = (8 * b - 3 * a_sq) / 8
    q = (a_sq * a - 4 * a * b + 8 * c) / 8
    r = (256 * d - 3 * a_sq * a_sq - 64 * c * a + 16 * a_sq * b) / 256

    # magnitudes of the terms each of p, q, r was computed from
    p_scale = (8 * abs(b) + 3 * a_sq) / 8
    q_scale = (abs(a_sq * a) + abs(4 * a * b) + abs(8 * c)) / 8
    r_scale = (256 * abs(d) + 3 * a_sq * a_sq + abs(64 * c * a) + 16 * a_sq * abs(b)) / 256
    if is_negligible(q, q_scale):
        q = q * 0

    shift = -a / 4
    ys = _depressed_quartic_roots(p, q, r, (p_scale, q_scale, r_scale))
    return RootSet.from_roots(y + shift for y in ys)


def find_roots_biquadratic(a4: Scalar, a2: Scalar, a0: Scalar) -> RootSet:
    """Solve ``a4*x^4 + a2*x^2 + a0 = 0`` through the quadratic in ``z = x^2``."""
    a4, a2, a0 = as_scalars(a4, a2, a0)
    if a4 == 0:
        return find_roots_quadratic(a2, a4, a0)

    xs: list[Scalar] = []
    for z in find_roots_quadratic(a4, a2, a0).roots:
        if z > 0:
            s = np.sqrt(z)
            xs += [-s, s]
        elif z == 0:
            xs += [z, z]
    return RootSet.from_roots(xs)


def find_roots_quartic_depressed(p: Scalar, q: Scalar, r: Scalar) -> RootSet:
    """Solve the depressed quartic ``y^4 + p*y^2 + q*y + r = 0``."""
    p, q, r = as_scalars(p, q, r)
    return RootSet.from_roots(_depressed_quartic_roots(p, q, r, (abs(p), abs(q), abs(r))))


def _depressed_quartic_roots(
    p: Scalar, q: Scalar, r: Scalar, scales: tuple[Scalar, Scalar, Scalar]
) -> tuple[Scalar, ...]:
    one = p * 0 + 1
    if q == 0:
        return find_roots_biquadratic(one, p, r).roots

    # Ferrari: with m > 0 a root of the resolvent cubic
    #   8m^3 + 8p m^2 + (2p^2 - 8r) m - q^2 = 0
    # the quartic splits as (y^2 + p/2 + m)^2 - 2m (y - q/(4m))^2.
    resolvent = find_roots_cubic(8 * one, 8 * p, 2 * p * p - 8 * r, -q * q)
    m = max(resolvent.roots)
    if not m > 0:
        # q is nonzero but below what the resolvent can resolve
        return find_roots_biquadratic(one, p, r).roots

    s = np.sqrt(2 * m)
    half_p_m = p / 2 + m
    q_term = q / (2 * s)
    ys: tuple[Scalar, ...] = ()
    for sign in (-1, 1):
        # y^2 - s y + (p/2 + m + q/(2s)), then y^2 + s y + (p/2 + m - q/(2s))
        factor = find_roots_quadratic(one, sign * s, half_p_m - sign * q_term)
        if isinstance(factor, NoRoots):
            # The error in m can push a double root's discriminant below zero;
            # the vertex is then still a root of the quartic.
            vertex = -sign * s / 2
            residual = _residual(vertex, p, q, r)
            if is_negligible(residual, _residual_scale(vertex, *scales), ulps=32.0):
                factor = TwoRoots(vertex, vertex)
        ys += factor.roots
    return tuple(_polish(y, p, q, r) for y in ys)


def _residual(y: Scalar, p: Scalar, q: Scalar, r: Scalar) -> Scalar:
    y_sq = y * y
    return (y_sq + p) * y_sq + q * y + r


def _residual_scale(y: Scalar, p_scale: Scalar, q_scale: Scalar, r_scale: Scalar) -> Scalar:
    y_sq = y * y
    return (y_sq + p_scale) * y_sq + q_scale * abs(y) + r_scale


def _polish(y: Scalar, p: Scalar, q: Scalar, r: Scalar) -> Scalar:
    """One Newton step on the depressed quartic, kept only if it lowers the residual."""
    y_sq = y * y
    f = _residual(y, p, q, r)
    df = (4 * y_sq + 2 * p) * y + q
    if df == 0:
        return y
    y_new = y - f / df
    return y_new if abs(_residual(y_new, p, q, r)) < abs(f) else y
