from __future__ import annotations

import argparse

import pandas as pd

from scalar_roots.diagnostics import iterative_benchmark, polynomial_residual_table
from scalar_roots.log import get_logger

POLYNOMIALS = [
    (1.0, -2.0),
    (1.0, 0.0, -4.0),
    (1.0, -2.0, 1.0),
    (1.0, -6.0, 11.0, -6.0),
    (1.0, -1.0, 1.0, -1.0),
    (1.0, -10.0, 35.0, -50.0, 24.0),
    (3.0, 5.0, -5.0, -5.0, 2.0),
    (1.0, 0.0, 0.0, 1.0, 1.0),
]


def main() -> int:
    p = argparse.ArgumentParser(
        description="Print iterative-solver and polynomial-solver diagnostic tables."
    )
    p.add_argument("--tolerance", type=float, default=1e-10)
    p.add_argument("--max-iter", type=int, default=100)
    p.add_argument("--verbose", action="store_true", help="Log at INFO level.")
    p.add_argument("--debug", action="store_true", help="Log every convergence check.")
    args = p.parse_args()

    logger = get_logger(verbose=args.verbose, debug=args.debug)
    logger.info("tolerance=%g max_iter=%d", args.tolerance, args.max_iter)

    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(iterative_benchmark(tolerance=args.tolerance, max_iter=args.max_iter))
        print()
        print(polynomial_residual_table(POLYNOMIALS))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
