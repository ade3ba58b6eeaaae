"""Logging setup for the command line."""

import logging
from pathlib import Path

from config.settings import LoggingConfig

LOG_FORMAT = "%(asctime)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the ``holdem`` logger from config.

    Args:
        config: Level and optional log file

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("holdem")
    logger.setLevel(config.level.upper())
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="w")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
