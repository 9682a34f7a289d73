"""Logging configuration."""

import logging
import sys
from typing import Optional

from importexport.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Chatty third-party loggers and the level they are capped at
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "multipart": logging.WARNING,
    "uvicorn": logging.INFO,
}


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging.

    Args:
        level: Level name overriding ``Settings.log_level``
    """
    level_name = (level or get_settings().log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # Backends log below the package logger
    logging.getLogger("importexport").setLevel(numeric_level)

    for name, cap in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(cap)
