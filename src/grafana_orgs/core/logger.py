"""
Logging configuration for the Grafana organization client.

Logs go to stderr; a log file is written only when one is requested.
"""

import logging
import os
from pathlib import Path
from typing import Optional, TextIO
from datetime import datetime

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_logger(
    name: str = "grafana_orgs",
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger.

    The console handler follows log_level. A file handler, always at DEBUG,
    is attached when log_file or the LOG_FILE environment variable is set.

    Args:
        name: Logger name
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: Optional path of a log file
        stream: Console stream (stderr when None)

    Returns:
        Configured logger

    Raises:
        ValueError: If log_level is not a known level
    """
    level = _level(log_level)
    log_file = log_file or os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(level)

    logger.propagate = False
    return logger


class LoggerContext:
    """Times an operation and logs its outcome."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.debug(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(f"Failed {self.operation} after {duration:.2f}s: {exc_val}")
        else:
            self.logger.info(f"Completed {self.operation} in {duration:.2f}s")
        return False
