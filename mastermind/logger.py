import logging
from typing import Optional, Union

from .config import get_settings

LOGGER_NAME = "mastermind"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(module)s - %(message)s"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.
    Safe to call more than once: the handler is replaced, not duplicated.
    """
    if level is None:
        level = get_settings().log_level

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = []
    logger.addHandler(console_handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.debug("Mastermind logger initialized")
    return logger
