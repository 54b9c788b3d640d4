from __future__ import annotations

import logging


def get_logger(
    name: str = "scalar_roots",
    verbose: bool = False,
    debug: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure logging for scripts and return the named logger.

    Parameters
    ----------
    name : str, default "scalar_roots"
        Logger name. The package's module loggers are its children.
    verbose : bool, default False
        Log at INFO level.
    debug : bool, default False
        Log at DEBUG level (per-iteration convergence checks included).
    log_file : str or None
        Write to this file instead of stderr.
    """
    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(level=level, filename=log_file)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
