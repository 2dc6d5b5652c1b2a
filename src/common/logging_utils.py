"""Logging helpers: root configuration and structured ``extra`` context."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from constants import Constants

# Console handler installed by configure_logging, replaced on reconfiguration.
_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None) -> None:
    """Install the console root handler using the project log format.

    The level comes from ``level`` when given, else from the
    ``BUMPGATE_LOG_LEVEL`` environment variable, else from the config file,
    else INFO.
    """
    level_name = (
        level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.LOG_LEVEL or "INFO"
    ).upper()
    level_value = getattr(logging, level_name, logging.INFO)

    global _handler  # pylint: disable=global-statement
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(level_value)


def add_file_handler(path: str) -> logging.Handler:
    """Mirror root log records into ``path``."""
    handler = logging.FileHandler(path, encoding=Constants.FILE_ENCODING)
    handler.setFormatter(logging.Formatter("%(asctime)s " + Constants.LOG_FORMAT))
    logging.getLogger().addHandler(handler)
    return handler


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an ``extra=`` mapping for structured log records, dropping None values."""
    return {key: value for key, value in kwargs.items() if value is not None}
