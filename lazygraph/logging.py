"""Package-wide logging setup for lazygraph.

All modules log through children of the ``lazygraph`` logger. The package
logger gets exactly one handler, installed on first use, and its level can be
seeded from the ``LAZYGRAPH_LOG_LEVEL`` environment variable.
"""

import logging
import os
import sys
from typing import Optional, Union

#: Name of the package root logger.
ROOT_LOGGER_NAME = "lazygraph"

#: Environment variable consulted for the initial level (e.g. ``DEBUG``).
LOG_LEVEL_ENV = "LAZYGRAPH_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _level_from_env(default: int) -> int:
    raw = os.environ.get(LOG_LEVEL_ENV)
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single package handler to the ``lazygraph`` logger.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level. Defaults to ``LAZYGRAPH_LOG_LEVEL`` or INFO.
        format_string: Record format (optional).
        handler: Handler to install (optional, defaults to a stdout stream).
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(level if level is not None else _level_from_env(logging.INFO))

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog hooks the global root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger that inherits the package configuration.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger whose effective level follows the ``lazygraph`` logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Change the level of the package logger and its handlers.

    Args:
        level: Numeric level or level name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level name: {name!r}")

    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the whole package to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch the whole package back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next call reconfigures (for tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
