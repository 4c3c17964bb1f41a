"""
Users API - Logging
Loguru sinks for stdout and an optional rotating file
"""

import sys
from loguru import logger

from users_api.core.config import settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging() -> None:
    """Replace loguru's default sink with the service sinks"""
    logger.remove()
    logger.add(
        sys.stdout,
        format=LOG_FORMAT,
        level=settings.LOG_LEVEL,
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            compression="zip",
            level=settings.LOG_LEVEL,
        )
