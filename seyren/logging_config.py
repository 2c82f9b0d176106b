"""
Logging setup for Seyren notifications.

Every module logs through `get_logger(__name__)`, so all records land under
the "seyren" logger that `setup_logging` configures from SeyrenConfig.
"""

import logging
import logging.handlers
import sys

from seyren.config import SeyrenConfig

PACKAGE_LOGGER = "seyren"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation for config.log_file
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def setup_logging(config: SeyrenConfig, verbose: bool = False) -> logging.Logger:
    """
    Route package log records to stdout and, if configured, a rotating file.

    Args:
        config: Resolved configuration; supplies log_level and log_file
        verbose: Force DEBUG so request bodies and responses are logged

    Returns:
        The configured package logger
    """
    level_name = "DEBUG" if verbose else config.log_level.upper()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        handlers.append(logging.handlers.RotatingFileHandler(
            config.log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS
        ))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, always inside the "seyren" hierarchy."""
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
