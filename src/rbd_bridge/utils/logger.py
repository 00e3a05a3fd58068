"""
rbd-bridge logging utilities

All library modules log through children of the ``rbd_bridge`` logger and
never install handlers themselves. Applications call configure_logging
once to route those records somewhere.
"""

import logging
from typing import Optional, Union

from rbd_bridge.config import RBDConfig

PACKAGE_LOGGER = "rbd_bridge"

# Default logging format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format: str = DEFAULT_FORMAT,
    file_path: Optional[str] = None
) -> logging.Logger:
    """
    Configure the ``rbd_bridge`` package logger.

    Replaces any handlers previously attached to it, so calling this
    again reconfigures instead of duplicating output.

    Args:
        level: Log level
        format: Log format string
        file_path: Optional file path for file logging

    Returns:
        The package logger
    """
    formatter = logging.Formatter(format)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def configure_logging_from_config(
    config: RBDConfig,
    file_path: Optional[str] = None
) -> logging.Logger:
    """Configure the package logger at ``config.log_level``."""
    return configure_logging(level=config.log_level, file_path=file_path)
