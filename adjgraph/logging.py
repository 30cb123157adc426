"""Centralized logging configuration for adjgraph.

Every module logs through ``get_logger(__name__)``, so all records land under
the ``adjgraph`` logger. Parsers and the source check log at ERROR before
raising; the solvers log per-pass and per-class detail at DEBUG.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "adjgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set once the package logger has a handler attached
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``adjgraph`` logger.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Destination handler; defaults to a stdout StreamHandler.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Propagate so pytest's caplog sees package records
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, deferring its level to ``adjgraph``.

    Args:
        name: Logger name, normally the calling module's ``__name__``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(
            f"Invalid log level '{level}'. "
            "Valid values are: debug, info, warning, error, critical"
        )
    return resolved


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the ``adjgraph`` logger and its handlers.

    Args:
        level: A ``logging`` level constant or a level name such as ``"debug"``.

    Raises:
        ValueError: If ``level`` is a string that names no logging level.
    """
    resolved = _resolve_level(level)
    setup_root_logger()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(resolved)
    for handler in package_logger.handlers:
        handler.setLevel(resolved)


def enable_debug_logging() -> None:
    """Show per-pass Bellman-Ford and per-class RLF detail."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so setup runs again (for tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
