"""Logging configuration."""

import logging
import sys
from config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level() -> int:
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def setup_logger(name: str = __name__) -> logging.Logger:
    """Set up a module logger writing to stdout at the configured level."""
    logger = logging.getLogger(name)
    logger.setLevel(_level())
    
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(_level())
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        # Single stdout handler per logger; root handlers would repeat lines
        logger.propagate = False
    
    return logger
