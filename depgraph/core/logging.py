"""Logging setup for the depgraph package."""
import logging
from typing import Optional, Union

from .config import settings

LOGGER_NAME = "depgraph"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call more than once; the handler is only added the first time,
    later calls just adjust the level.

    Args:
        level: Logging level name or number. Defaults to settings.LOG_LEVEL.

    Returns:
        The configured "depgraph" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if level is not None else settings.LOG_LEVEL)

    if not any(getattr(h, "_depgraph_handler", False) for h in logger.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(LOG_FORMAT))
        sh._depgraph_handler = True
        logger.addHandler(sh)

    return logger
