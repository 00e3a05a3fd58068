"""
rbd-bridge utilities

Logging helpers.
"""

from rbd_bridge.utils.logger import (
    configure_logging,
    configure_logging_from_config,
    DEFAULT_FORMAT,
    PACKAGE_LOGGER,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_config",
    "DEFAULT_FORMAT",
    "PACKAGE_LOGGER",
]
