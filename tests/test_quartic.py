import numpy as np
import pytest

from scalar_roots import (
    FourRoots,
    InfiniteRoots,
    NoRoots,
    ThreeRoots,
    TwoRoots,
    find_roots_biquadratic,
    find_roots_quartic,
    find_roots_quartic_depressed,
)
from scalar_roots.numerics.precision import horner


def test_quartic_four_integer_roots():
    rs = find_roots_quartic(1.0, -10.0, 35.0, -50.0, 24.0)
    assert rs == FourRoots(1.0, 2.0, 3.0, 4.0)


def test_quartic_general_case():
    rs = find_roots_quartic(3.0, 5.0, -5.0, -5.0, 2.0)
    assert isinstance(rs, FourRoots)
    assert rs.roots == pytest.approx((-2.0, -1.0, 1.0 / 3.0, 1.0), abs=1e-12)


def test_quartic_single_precision():
    rs = find_roots_quartic(np.float32(3.0), 5.0, -5.0, -5.0, 2.0)
    assert isinstance(rs, FourRoots)
    assert all(isinstance(x, np.float32) for x in rs.roots)
    assert [float(x) for x in rs.roots] == pytest.approx([-2.0, -1.0, 1.0 / 3.0, 1.0], abs=5e-6)


def test_quartic_degenerate_cases():
    assert find_roots_quartic(0.0, 1.0, -6.0, 11.0, -6.0) == ThreeRoots(1.0, 2.0, 3.0)
    assert find_roots_quartic(0.0, 0.0, 0.0, 0.0, 0.0) == InfiniteRoots()
    assert find_roots_quartic(0.0, 0.0, 0.0, 0.0, 5.0) == NoRoots()


def test_quartic_zero_constant_term():
    assert find_roots_quartic(1.0, -6.0, 11.0, -6.0, 0.0) == FourRoots(0.0, 1.0, 2.0, 3.0)


def test_quartic_multiplicity():
    assert find_roots_quartic(1.0, 0.0, 0.0, 0.0, 0.0) == FourRoots(0.0, 0.0, 0.0, 0.0)
    # (x^2 - 1)^2
    assert find_roots_quartic(1.0, 0.0, -2.0, 0.0, 1.0) == FourRoots(-1.0, -1.0, 1.0, 1.0)
    # (x - 1)^4
    assert find_roots_quartic(1.0, -4.0, 6.0, -4.0, 1.0) == FourRoots(1.0, 1.0, 1.0, 1.0)


def test_quartic_biquadratic():
    assert find_roots_quartic(1.0, 0.0, 0.0, 0.0, -1.0) == TwoRoots(-1.0, 1.0)
    assert find_roots_quartic(1.0, 0.0, 0.0, 0.0, 1.0) == NoRoots()
    assert find_roots_biquadratic(1.0, -5.0, 4.0) == FourRoots(-2.0, -1.0, 1.0, 2.0)
    assert find_roots_biquadratic(0.0, 1.0, -4.0) == TwoRoots(-2.0, 2.0)


def test_quartic_no_real_roots_general():
    assert find_roots_quartic(1.0, 0.0, 0.0, 1.0, 1.0) == NoRoots()


def test_quartic_two_real_two_complex():
    # (x^2 + 1)(x - 1)(x - 2)
    rs = find_roots_quartic(1.0, -3.0, 3.0, -3.0, 2.0)
    assert isinstance(rs, TwoRoots)
    assert rs.roots == pytest.approx((1.0, 2.0), abs=1e-10)


def test_quartic_depressed():
    # y^4 - 5y^2 + 4 = (y^2 - 1)(y^2 - 4)
    assert find_roots_quartic_depressed(-5.0, 0.0, 4.0) == FourRoots(-2.0, -1.0, 1.0, 2.0)


@pytest.mark.parametrize(
    "roots",
    [
        (-3.0, -1.0, 0.5, 2.0),
        (-2.5, 0.1, 0.7, 6.0),
        (1.0, 2.0, 4.0, 8.0),
        (-10.0, -4.0, 3.0, 9.0),
    ],
)
def test_quartic_from_factors(roots, poly_from_roots):
    coeffs = poly_from_roots(roots, leading=2.0)
    rs = find_roots_quartic(*coeffs)

    assert isinstance(rs, FourRoots)
    assert rs.roots == pytest.approx(roots, abs=1e-8)


def test_quartic_random_residuals(rng):
    g = rng(11)
    for _ in range(100):
        roots = np.sort(g.uniform(-5.0, 5.0, size=4))
        if np.min(np.diff(roots)) < 5e-2:
            continue
        coeffs = tuple(np.poly(roots))
        rs = find_roots_quartic(*coeffs)

        assert isinstance(rs, FourRoots)
        assert rs.roots == pytest.approx(tuple(roots), abs=1e-7)
        scale = max(abs(c) for c in coeffs)
        for x in rs.roots:
            assert abs(horner(coeffs, x)) <= 1e-9 * scale * max(1.0, abs(x)) ** 4


def test_quartic_double_root_from_rounded_coefficients():
    roots = (-4.144, -4.144, -2.632, 3.013)
    rs = find_roots_quartic(*np.poly(roots))

    assert isinstance(rs, FourRoots)
    assert rs.roots == pytest.approx(roots, abs=1e-5)


def test_quartic_random_double_roots(rng):
    g = rng(5)
    checked = 0
    for _ in range(300):
        r0, r1, r2 = np.round(g.uniform(-5.0, 5.0, size=3), 3)
        roots = np.sort([r0, r0, r1, r2])
        # well separated, and the doubled root away from the centre
        if np.min(np.diff(np.sort([r0, r1, r2]))) < 0.1 or abs(r0 - roots.mean()) < 0.1:
            continue
        rs = find_roots_quartic(*np.poly(roots))

        assert isinstance(rs, FourRoots), roots
        assert rs.roots == pytest.approx(tuple(roots), abs=1e-5)
        checked += 1
    assert checked > 100
