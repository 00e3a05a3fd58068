"""
Volume identifiers.

A volume is identified cluster-wide as ``<pool>.<image>``. Names are not
escaped, so a pool or image name containing "." can collide with another
pair; callers are expected to avoid such names.
"""

from typing import Dict, Mapping

from rbd_bridge.types import RBDMappedEntry

VOLUME_ID_SEPARATOR = "."


def volume_id(pool: str, image: str) -> str:
    """Return the volume ID for ``image`` in ``pool``."""
    return f"{pool}{VOLUME_ID_SEPARATOR}{image}"


def invert_mapped(mapped: Mapping[str, RBDMappedEntry]) -> Dict[str, str]:
    """
    Re-key a showmapped table by volume ID.

    The tool's keys are dropped. When two entries produce the same
    volume ID the later one wins.

    Returns:
        Dict of volume ID -> local device path, in table order
    """
    devices: Dict[str, str] = {}
    for entry in mapped.values():
        devices[volume_id(entry.pool, entry.name)] = entry.device
    return devices
