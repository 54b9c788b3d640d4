"""Pytest helpers for the scalar_roots library."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pytest


@pytest.fixture
def poly_from_roots():
    """Factory: monic coefficients (highest degree first) with the given roots."""

    def _make(roots: Sequence[float], leading: float = 1.0) -> tuple[float, ...]:
        return tuple(float(c) for c in leading * np.poly(np.asarray(roots, dtype=float)))

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng
