"""
Logging Configuration

Every module logs to a child of the 'pathbeam' logger. On import the package
only attaches a NullHandler, so nothing is printed until the embedding
application configures logging itself or calls `setup_logging`.
"""
import logging
import sys
from typing import List, Optional

LOGGER_NAME = "pathbeam"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def install_null_handler() -> logging.Logger:
    """Attach a single NullHandler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Sends the package's log records to stdout and, optionally, to a file.

    Handlers from a previous call (and the import-time NullHandler) are
    replaced, so calling this repeatedly never duplicates output.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path of a log file, overwritten on each call.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s.", ", ".join(type(h).__name__ for h in handlers))
    return logger
