"""Logging setup built on loguru."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the global loguru logger.

    Removes the default handler and installs a single stderr sink. Debug mode
    shows DEBUG and above, verbose mode INFO and above, otherwise only
    warnings and errors are shown.

    Args:
        verbose: Show informational progress messages
        debug: Show debug tracing (implies verbose)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    logger.add(sys.stderr, level=level, format="{message}", colorize=False)
