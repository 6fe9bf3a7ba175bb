"""
Logging setup shared by the service, the CLI and the routers.
"""
import logging
import sys

from lipsum.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str, level: str = None) -> logging.Logger:
    """
    Get a logger with a stream handler attached.

    Args:
        name: Logger name, usually the module's __name__
        level: Level name; defaults to settings.LOG_LEVEL

    Returns:
        Configured logger (handlers are attached only once)
    """
    logger = logging.getLogger(name)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
