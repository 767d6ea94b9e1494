"""Process-wide logging setup for the API and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from adspot_admin.settings import get_settings

LOGGER_NAME = "adspot_admin"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def resolve_level(name: Optional[str]) -> int:
    """Map a level name such as "debug" to its numeric level; unknown names give INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Send log records to stdout and set the adspot_admin logger level.

    The level comes from the argument or LOG_LEVEL. The root handler is only
    installed once; calling again just adjusts the level.
    """
    requested = level or get_settings().log_level
    log_level = resolve_level(requested)
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stdout)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    if not isinstance(logging.getLevelName(requested.strip().upper()), int):
        logger.warning(f"Unknown log level {requested!r}, using INFO")
    return logger
