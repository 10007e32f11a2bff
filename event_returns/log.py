import logging
import sys
from typing import Union

from . import config

def setup_logging(name: str = "event_returns", level: Union[int, str] = config.LOG_LEVEL) -> logging.Logger:
    """
    Configure and return the package logger.

    Level names ("DEBUG", "INFO", ...) are accepted as well as ints; set
    EVENT_RETURNS_LOG_LEVEL to change the default.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger

logger = setup_logging()
