"""
Presolve a cubic in closed form, then refine each root with Brent on the
original polynomial using a small bracket around the closed-form estimate.
"""

from __future__ import annotations


def main() -> None:
    from scalar_roots import InvalidBracketError, find_root_brent, find_roots_cubic
    from scalar_roots.numerics.precision import horner

    coeffs = (1.0, -6.0, 11.0, -6.000001)

    def p(x: float) -> float:
        return horner(coeffs, x)

    for x in find_roots_cubic(*coeffs).roots:
        width = 1e-6 * max(1.0, abs(x))
        try:
            rr = find_root_brent(x - width, x + width, p, 1e-15)
        except InvalidBracketError:
            # Estimate already at the precision limit (or a double root).
            print(f"closed form {x!r}  p={p(x):.3e}")
            continue
        print(f"closed form {x!r} -> refined {rr.root!r}  p={rr.f_at_root:.3e}")


if __name__ == "__main__":
    main()
