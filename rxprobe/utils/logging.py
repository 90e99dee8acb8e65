"""Logger configuration for RxProbe."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the global loguru logger.

    Args:
        verbose: Show INFO messages (progress, summaries)
        debug: Show DEBUG messages (per-tag tracing); implies verbose
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        fmt = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}: {message}"
    elif verbose:
        level = "INFO"
        fmt = "<level>{message}</level>"
    else:
        level = "WARNING"
        fmt = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=fmt, colorize=None)
