# src/scalar_roots/polynomial/root_set.py
"""
Closed family of results for the polynomial solvers.

Each variant is its own frozen dataclass, so callers can match on the shape
of the answer::

    match find_roots_quadratic(1.0, 0.0, -4.0):
        case TwoRoots(x0, x1):
            ...
        case NoRoots():
            ...

Roots are stored ascending and repeated roots occupy one slot per
multiplicity, so a variant never holds more roots than the degree.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from scalar_roots.typing import Scalar

__all__ = [
    "RootSet",
    "NoRoots",
    "OneRoot",
    "TwoRoots",
    "ThreeRoots",
    "FourRoots",
    "InfiniteRoots",
]


class RootSet:
    __slots__ = ()

    @property
    def roots(self) -> tuple[Scalar, ...]:
        """Finite roots, ascending (empty for :class:`NoRoots` and :class:`InfiniteRoots`)."""
        return ()

    @property
    def count(self) -> int | float:
        return len(self.roots)

    @property
    def is_infinite(self) -> bool:
        return False

    @staticmethod
    def from_roots(values: Iterable[Scalar]) -> RootSet:
        """Sort ``values`` and wrap them in the variant of matching size."""
        xs = sorted(values)
        n = len(xs)
        if n > len(_BY_COUNT) - 1:
            raise ValueError(f"At most {len(_BY_COUNT) - 1} roots supported, got {n}")
        return _BY_COUNT[n](*xs)

    def add_root(self, x: Scalar) -> RootSet:
        """Return a new set with ``x`` added as one more root."""
        return RootSet.from_roots((*self.roots, x))


@dataclass(frozen=True, slots=True)
class NoRoots(RootSet):
    pass


@dataclass(frozen=True, slots=True)
class OneRoot(RootSet):
    x0: Scalar

    @property
    def roots(self) -> tuple[Scalar, ...]:
        return (self.x0,)


@dataclass(frozen=True, slots=True)
class TwoRoots(RootSet):
    x0: Scalar
    x1: Scalar

    @property
    def roots(self) -> tuple[Scalar, ...]:
        return (self.x0, self.x1)


@dataclass(frozen=True, slots=True)
class ThreeRoots(RootSet):
    x0: Scalar
    x1: Scalar
    x2: Scalar

    @property
    def roots(self) -> tuple[Scalar, ...]:
        return (self.x0, self.x1, self.x2)


@dataclass(frozen=True, slots=True)
class FourRoots(RootSet):
    x0: Scalar
    x1: Scalar
    x2: Scalar
    x3: Scalar

    @property
    def roots(self) -> tuple[Scalar, ...]:
        return (self.x0, self.x1, self.x2, self.x3)


@dataclass(frozen=True, slots=True)
class InfiniteRoots(RootSet):
    """Every value is a root (all coefficients zero)."""

    @property
    def count(self) -> float:
        return math.inf

    @property
    def is_infinite(self) -> bool:
        return True

    def add_root(self, x: Scalar) -> RootSet:
        return self


_BY_COUNT: tuple[type[RootSet], ...] = (NoRoots, OneRoot, TwoRoots, ThreeRoots, FourRoots)
