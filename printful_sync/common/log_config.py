"""
Logging Configuration

All diagnostics (API response bodies, step progress, failures) go to
stderr through the `printful_sync` logger; stdout carries only the
final ERROR/completion line printed by the CLI.
"""

import logging
import sys

PACKAGE_LOGGER = "printful_sync"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    --verbose (DEBUG) adds the catalog and variant bodies; --quiet (WARNING)
    keeps rejections and failures only. verbose wins if both are set.

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running main() in one process must not stack handlers
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger
