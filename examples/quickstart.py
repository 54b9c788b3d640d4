from __future__ import annotations


def main() -> None:
    from scalar_roots import (
        TwoRoots,
        find_root_brent,
        find_root_newton_raphson,
        find_roots_cubic,
        find_roots_quadratic,
    )

    match find_roots_quadratic(1.0, 0.0, -4.0):
        case TwoRoots(x0, x1):
            print("quadratic roots:", x0, x1)
        case other:
            print("quadratic:", other)

    print("cubic roots:", find_roots_cubic(1.0, -6.0, 11.0, -6.0).roots)

    rr = find_root_newton_raphson(1.0, lambda x: x * x - 2.0, lambda x: 2.0 * x, 1e-10)
    print(f"sqrt(2) ~ {rr.root:.12f}  iters={rr.iterations}")

    rr = find_root_brent(0.0, 2.0, lambda x: x * x - 2.0, 1e-12)
    print(f"brent: {rr.root:.15f}  tol honored={rr.tolerance:.3e}  bracket={rr.bracket}")


if __name__ == "__main__":
    main()
