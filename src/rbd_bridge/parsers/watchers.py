"""
Watcher detection for ``rbd status`` documents.

The "watchers" key has had two encodings across Ceph releases. Older
releases emit a map:

    {"watchers": {"watcher": {...}}}

newer ones emit a list:

    {"watchers": [{...}, {...}]}

No version field accompanies either, so the shape of the value decides.
"""

from typing import Any, Mapping

from rbd_bridge.errors import DecodeError


def has_watchers(status: Mapping[str, Any]) -> bool:
    """
    Report whether an image status document lists any watchers.

    Raises:
        DecodeError: If "watchers" is missing or neither a map nor a list.
    """
    watchers = status.get("watchers")
    if isinstance(watchers, dict):
        return len(watchers) > 0
    if isinstance(watchers, list):
        return len(watchers) > 0
    raise DecodeError("rbd status watchers", f"unexpected value {watchers!r}")
