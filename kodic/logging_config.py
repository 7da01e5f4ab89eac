"""Logging configuration for kodic"""

import logging
import sys

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    console: bool = False,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Setup logging configuration

    The watcher runs unattended, so diagnostics go to an append-mode log file.
    A console handler is only attached when asked for.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: File to append logs to. Opening it may raise OSError.
        console: Also echo records to stdout
        fmt: Record format for the file handler

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("kodic")
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    if console:
        if level.upper() == "DEBUG":
            console_fmt = logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            console_fmt = logging.Formatter(fmt="%(levelname)s - %(message)s")
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_fmt)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "kodic") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
