"""Utilities for consistent logging configuration across the registry.

Every module obtains its logger through :func:`get_logger` so the CLI, the
Streamlit page and the tests share one format. The level can be driven from
the ``logging.level`` entry of the registry configuration.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

# Example: 2026-10-19 10:30:00,123 INFO [employee_registry.store] Added employee EMP00000101
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Unknown names fall back to ``logging.INFO``.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO, *, log_format: Optional[str] = None) -> None:
    """Initialize or update the global logging configuration.

    If the root logger has no handlers, ``logging.basicConfig`` is called.
    Otherwise (e.g. under Streamlit, which installs its own handlers) only the
    level of the root logger and its handlers is updated.

    Parameters
    ----------
    level:
        A numeric logging level or a level name.
    log_format:
        The format string for log messages. Defaults to `DEFAULT_LOG_FORMAT`.
    """
    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT
    numeric_level = resolve_level(level)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=numeric_level, format=log_format)
        logging.debug("Initialized new logging configuration.")
    else:
        root_logger.setLevel(numeric_level)
        for handler in root_logger.handlers:
            handler.setLevel(numeric_level)
        logging.debug("Updated existing logging configuration to level %s.", logging.getLevelName(numeric_level))


def get_logger(name: str) -> logging.Logger:
    """Return a module-level logger configured with project defaults.

    Parameters
    ----------
    name:
        The name for the logger, typically `__name__` of the calling module.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        configure_logging()
    return logging.getLogger(name)
