import math

import numpy as np
import pytest

from scalar_roots import (
    DebugConvergence,
    NoConvergenceError,
    ZeroDerivativeError,
    find_root_newton_raphson,
)


def test_newton_sqrt2():
    rr = find_root_newton_raphson(1.0, lambda x: x * x - 2, lambda x: 2 * x, 1e-10)

    assert rr.root == pytest.approx(1.41421356, abs=1e-8)
    assert abs(rr.f_at_root) < 1e-10
    assert rr.converged is True
    assert rr.method == "newton_raphson"
    assert rr.tolerance == 1e-10
    assert rr.bracket is None


@pytest.mark.parametrize(
    "f, df, x0, expected",
    [
        (lambda x: x**3 - 8.0, lambda x: 3.0 * x**2, 3.0, 2.0),
        (lambda x: np.cos(x) - x, lambda x: -np.sin(x) - 1.0, 0.5, 0.7390851332151607),
        (lambda x: np.exp(x) - 3.0, np.exp, 0.0, math.log(3.0)),
    ],
    ids=["cube", "cos_minus_x", "exp"],
)
def test_newton_converges(f, df, x0, expected):
    rr = find_root_newton_raphson(x0, f, df, 1e-12)
    assert rr.root == pytest.approx(expected, abs=1e-10)
    assert rr.iterations <= 20


def test_newton_starting_on_root_takes_no_steps():
    rr = find_root_newton_raphson(1.0, lambda x: x - 1.0, lambda x: 1.0)
    assert rr.root == 1.0
    assert rr.iterations == 0
    assert rr.function_calls == 1


def test_newton_zero_derivative():
    with pytest.raises(ZeroDerivativeError):
        find_root_newton_raphson(0.0, lambda x: x * x + 1.0, lambda x: 2.0 * x)


def test_newton_cycle_does_not_converge():
    # x^3 - 2x + 2 from 0 bounces between 0 and 1 forever
    with pytest.raises(NoConvergenceError):
        find_root_newton_raphson(
            0.0, lambda x: x**3 - 2 * x + 2, lambda x: 3 * x**2 - 2, 1e-12, max_iter=30
        )


def test_newton_non_finite_iterate_is_reported():
    # the step overflows to -inf
    with pytest.raises(NoConvergenceError):
        find_root_newton_raphson(1.0, lambda x: 1e308, lambda x: 1e-10)


def test_newton_single_precision():
    rr = find_root_newton_raphson(
        np.float32(1.0), lambda x: x * x - 2, lambda x: 2 * x, 1e-6
    )
    assert isinstance(rr.root, np.float32)
    assert float(rr.root) == pytest.approx(math.sqrt(2.0), abs=1e-6)


def test_newton_records_checks_with_debug_convergence():
    conv = DebugConvergence(eps=1e-12, max_iter=50)
    rr = find_root_newton_raphson(2.0, lambda x: x * x - 2, lambda x: 2 * x, conv)

    assert rr.root == pytest.approx(math.sqrt(2.0), abs=1e-12)
    assert conv.history
    assert {c.kind for c in conv.history} <= {"root", "converged"}
    # Newton steps shrink quadratically near the root
    widths = conv.widths()
    assert widths[-1] < widths[0]
