"""Logging setup for entry points."""

import logging
from typing import Optional

from .EnvironmentManager import EnvironmentManager, EnvironmentVariables

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """Configure root logging for a script run.

    Library modules only create module-level loggers; scripts call this once.

    Args:
        level: Level name; falls back to VDF_LOG_LEVEL, then INFO

    Returns:
        int: The numeric level that was applied
    """
    name = (level or EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL)).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    return numeric
