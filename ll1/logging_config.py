import logging
import os
from logging import Logger


def setup_logger(name: str, level: str = "INFO") -> Logger:
    """Attaches one stderr handler to `name`. LOG_LEVEL in the environment overrides `level`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(os.getenv("LOG_LEVEL", level).upper())
    return logger
