"""
Logger setup
"""
import logging
import sys

from .config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: str = None) -> logging.Logger:
    """
    Return a named logger writing to stdout

    Handlers are attached once per name, so calling this at import time in
    several modules does not duplicate output.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel((level or settings.LOG_LEVEL).upper())
    return logger


status_logger = setup_logger('application_status')
store_logger = setup_logger('supabase')
