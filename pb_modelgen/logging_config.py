"""
Logging configuration for pb_modelgen.

Usage in modules:
    from pb_modelgen.logging_config import get_logger
    logger = get_logger(__name__)

Every logger lives under the "pb_modelgen" hierarchy. Levels are set by
the CLI through configure_logging().
"""

import logging
import sys

_LOGGER_NAME = "pb_modelgen"

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger under the pb_modelgen hierarchy.

    Args:
        name: Module __name__, or None for the root pb_modelgen logger.
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the pb_modelgen logger hierarchy.

    Levels:
        --verbose  -> DEBUG
        (default)  -> INFO
        --quiet    -> WARNING

    Args:
        verbose: Enable DEBUG-level output.
        quiet: Suppress INFO output (WARNING and above only).
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)

    # Avoid duplicate handlers when called multiple times
    for handler in root_logger.handlers:
        handler.setLevel(level)
    if root_logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # Keep output out of the root logger
    root_logger.propagate = False
