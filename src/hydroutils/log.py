"""
Logging setup for hosts that want hydroutils to configure the root logger.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from hydroutils.common.constants import SystemConstants
from hydroutils.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to use, defaults to the cached settings

    Returns:
        The ``hydroutils`` package logger
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.system.log_level)

    handlers = [logging.StreamHandler()]
    if settings.system.log_file:
        handlers.append(
            RotatingFileHandler(
                settings.system.log_file,
                maxBytes=SystemConstants.LOG_FILE_MAX_BYTES,
                backupCount=SystemConstants.LOG_FILE_BACKUP_COUNT,
            )
        )

    logging.basicConfig(
        level=level,
        format=SystemConstants.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger("hydroutils")
    logger.setLevel(level)
    logger.debug(f"Logging configured at {settings.system.log_level}")
    return logger
