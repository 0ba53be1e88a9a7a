# aiha/core/logs.py
import os
import sys
from typing import Optional

from loguru import logger

from .config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Route loguru output to stderr at the configured level and, when
    LOG_FILE is set, to a rotating log file as well.
    """
    s = settings or get_settings()

    logger.remove()
    logger.add(sys.stderr, level=s.LOG_LEVEL)

    if s.LOG_FILE:
        log_dir = os.path.dirname(os.path.abspath(s.LOG_FILE))
        os.makedirs(log_dir, exist_ok=True)
        logger.add(s.LOG_FILE, level=s.LOG_LEVEL, rotation="10 MB", retention="10 days")
        logger.debug("File logging enabled at {}", s.LOG_FILE)
