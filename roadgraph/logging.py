"""Centralized logging configuration for roadgraph.

Every module obtains its logger through ``get_logger(__name__)``; all of them
hang below the single ``roadgraph`` logger, which owns the only handler.
Records go to stderr so stdout stays free for prompts and the graph listing.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "roadgraph"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single roadgraph handler, once.

    Later calls are no-ops until ``reset_logging`` runs.

    Args:
        level: Initial level of the roadgraph logger.
        format_string: Record format; defaults to ``LOG_FORMAT``.
        handler: Destination handler; defaults to a stderr ``StreamHandler``.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or LOG_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # pytest's caplog listens on the process root logger
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a roadgraph module.

    Args:
        name: Dotted module name, normally ``__name__``.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the roadgraph logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def level_for_verbosity(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level.

    ``verbose`` wins over ``quiet``; neither flag means INFO.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_verbosity(verbose: bool = False, quiet: bool = False) -> int:
    """Apply the CLI verbosity flags and return the level now in effect."""
    level = level_for_verbosity(verbose, quiet)
    set_global_log_level(level)
    return level


def reset_logging() -> None:
    """Drop the roadgraph handler and level (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
