from __future__ import annotations

from scalar_roots.exceptions import InvalidBracketError
from scalar_roots.typing import Scalar, ScalarFn


class CountedFunction:
    """Wrap a caller's callable: cast results to the working dtype and count calls."""

    __slots__ = ("fn", "dtype", "calls")

    def __init__(self, fn: ScalarFn, dtype: type) -> None:
        self.fn = fn
        self.dtype = dtype
        self.calls = 0

    def __call__(self, x: Scalar) -> Scalar:
        self.calls += 1
        return self.dtype(self.fn(x))


def same_sign(fa: Scalar, fb: Scalar) -> bool:
    # Compare signs directly; fa * fb can underflow to zero.
    return (fa > 0) == (fb > 0)


def check_bracket(method: str, a: Scalar, b: Scalar, fa: Scalar, fb: Scalar) -> None:
    if same_sign(fa, fb):
        raise InvalidBracketError(
            f"{method} requires f(a) and f(b) to have opposite signs: "
            f"f({a!r})={fa!r}, f({b!r})={fb!r}"
        )
