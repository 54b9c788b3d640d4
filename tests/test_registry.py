import math

import pytest

from scalar_roots import (
    DebugConvergence,
    RootMethod,
    SolverConfig,
    find_root,
    find_root_brent,
    find_root_newton_raphson,
    get_root_method,
)
from scalar_roots.exceptions import NoConvergenceError

SQRT2 = math.sqrt(2.0)


def f(x):
    return x * x - 2.0


def test_get_root_method_by_enum_and_string():
    assert get_root_method(RootMethod.BRENT) is find_root_brent
    assert get_root_method("newton_raphson") is find_root_newton_raphson


def test_get_root_method_unknown():
    with pytest.raises(ValueError, match="Unknown root method"):
        get_root_method("bisection")


@pytest.mark.parametrize("method", list(RootMethod), ids=lambda m: m.value)
def test_find_root_every_method(method):
    rr = find_root(f, 1.0, 2.0, method=method, df=lambda x: 2.0 * x, tolerance=1e-12)
    assert rr.root == pytest.approx(SQRT2, abs=1e-10)
    assert rr.method == method.value


def test_find_root_defaults_to_brent():
    rr = find_root(f, 0.0, 2.0)
    assert rr.method == "brent"


def test_find_root_newton_finite_difference():
    rr = find_root(f, 0.0, 2.0, method="newton_raphson", tolerance=1e-12)
    assert rr.root == pytest.approx(SQRT2, abs=1e-10)


def test_find_root_newton_uses_x0():
    rr = find_root(f, 0.0, 2.0, method="newton_raphson", x0=-1.0, df=lambda x: 2 * x)
    assert rr.root == pytest.approx(-SQRT2, abs=1e-9)


def test_find_root_uses_config():
    cfg = SolverConfig(tolerance=1e-12, max_iter=50, method="secant")
    rr = find_root(f, 1.0, 2.0, cfg=cfg)
    assert rr.method == "secant"
    assert rr.tolerance == 1e-12


def test_config_validation():
    with pytest.raises(ValueError):
        SolverConfig(tolerance=0.0)
    with pytest.raises(ValueError):
        SolverConfig(max_iter=0)
    with pytest.raises(ValueError):
        SolverConfig(method="bisection")


def test_config_debug_builds_debug_convergence():
    conv = SolverConfig(debug=True).convergence()
    assert isinstance(conv, DebugConvergence)
    assert conv.max_iter == SolverConfig().max_iter


def test_find_root_float_tolerance_keeps_config_max_iter():
    cfg = SolverConfig(max_iter=2)
    with pytest.raises(NoConvergenceError):
        find_root(lambda x: x**3 - 2.0 * x - 5.0, 2.0, 3.0, tolerance=1e-14, cfg=cfg)

    # an explicit bound still wins over the config
    rr = find_root(lambda x: x**3 - 2.0 * x - 5.0, 2.0, 3.0, tolerance=1e-14, max_iter=50, cfg=cfg)
    assert rr.root == pytest.approx(2.0945514815423265, abs=1e-12)
