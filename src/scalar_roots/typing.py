from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import numpy as np

# typing only
Scalar: TypeAlias = float | np.floating
ScalarFn: TypeAlias = Callable[[Scalar], Scalar]

# Runtime types
FloatDType = np.float64  # default working precision
