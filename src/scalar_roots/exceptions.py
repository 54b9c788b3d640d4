class RootFindingError(Exception):
    """Base class for root-finding failures."""


class NoConvergenceError(RootFindingError):
    """Raised when a method exhausts its iteration budget without converging.

    Usually recoverable: retry with a looser tolerance, a larger ``max_iter``,
    or a different starting estimate / bracket.
    """


class ZeroDerivativeError(RootFindingError):
    """Raised when Newton-Raphson cannot proceed because ``f'(x)`` vanished."""


class StallError(RootFindingError):
    """Raised when the secant slope is undefined (``f(x_n) == f(x_{n-1})``)."""


class InvalidBracketError(RootFindingError, ValueError):
    """Raised when a bracketing method is called without a valid sign change.

    Notes
    -----
    Both Regula Falsi and Brent-Dekker require ``f(a)`` and ``f(b)`` to have
    opposite signs. An endpoint where ``f`` is exactly zero is accepted and
    returned immediately.
    """
