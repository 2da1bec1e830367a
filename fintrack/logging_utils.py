"""Mini README: Application-wide logging helpers for the finance tracker.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and adjusts the level.

Usage:
    Modules import ``get_logger`` at import time to obtain a contextual
    logger. The CLI later calls ``configure_root_logger`` with the level from
    settings; repeated calls only change the level so no duplicate handlers
    are attached to the root logger.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Configure the root logger once, updating the level on later calls."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring a handler is installed."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
