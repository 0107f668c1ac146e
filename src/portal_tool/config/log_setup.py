import logging
from typing import Optional

from .settings import get_settings


LOGGER_NAME = "portal_tool"


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Console output with timestamp and level. Safe to call more than once,
    handlers are only attached the first time.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level or get_settings().log_level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
