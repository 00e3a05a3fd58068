"""
Output parsers for rbd-bridge.
"""

from rbd_bridge.parsers.output import (
    parse_pools,
    parse_images,
    parse_info,
    parse_mapped,
    parse_status,
)
from rbd_bridge.parsers.watchers import has_watchers

__all__ = [
    "parse_pools",
    "parse_images",
    "parse_info",
    "parse_mapped",
    "parse_status",
    "has_watchers",
]
