"""
Logging setup

One call from the app factory; every module then uses
logging.getLogger(__name__).
"""

# Python Packages
import logging
import sys

# Constants
from ..base import constants


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = None):
    """
    Attach a stdout handler to the package logger (idempotent).
    """

    logger = logging.getLogger("feather")
    logger.setLevel((level or constants.APP_LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
