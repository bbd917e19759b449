"""Centralized logging configuration for gsearch.

All package modules obtain loggers through :func:`get_logger`, so every record
flows through a single ``gsearch`` root logger with one handler. Search runs
log their progress at DEBUG; expansion traces go through the same channel when
requested (see :mod:`gsearch.trace`).
"""

import logging
import sys
from typing import Optional, Union

#: Name of the package root logger. Child loggers use ``__name__``.
LOGGER_NAME = "gsearch"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def _coerce_level(level: Union[int, str]) -> int:
    """Return a numeric logging level for an int or a level name."""
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{level}'")
    return numeric


def setup_root_logger(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``gsearch`` logger.

    Calling this more than once is a no-op until :func:`reset_logging` runs.

    Args:
        level: Logging level or level name (default: INFO).
        format_string: Custom record format (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(_coerce_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Keep propagation so pytest's caplog sees package records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a package logger.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.

    Returns:
        Logger inheriting level and handler from the ``gsearch`` root logger.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``gsearch`` logger and its handlers.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``) or level name.
    """
    setup_root_logger()

    numeric = _coerce_level(level)
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


def enable_debug_logging() -> None:
    """Turn on DEBUG output, including per-run search summaries."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the configuration (used by tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
