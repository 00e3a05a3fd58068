"""
rbd-bridge: rbd/rados command-line integration for volume drivers

Runs the Ceph rbd and rados tools, classifies their outcomes and parses
their output into typed results.
"""

__version__ = "1.0.0"

from rbd_bridge.client import RBDClient
from rbd_bridge.config import RBDConfig
from rbd_bridge.commands import (
    CommandInvoker,
    CommandOutcome,
    CommandResult,
    OutcomeStatus,
    SubprocessRunner,
)
from rbd_bridge.identity import volume_id, invert_mapped
from rbd_bridge.monitors import parse_monitor_addresses
from rbd_bridge.parsers import has_watchers
from rbd_bridge.types import BYTES_PER_GIB, RBDImage, RBDInfo, RBDMappedEntry

from rbd_bridge.errors import (
    RBDError,
    CommandFailedError,
    DecodeError,
    InvalidMonitorAddressError,
    AddressResolutionError,
)

__all__ = [
    "RBDClient",
    "RBDConfig",
    # Command execution
    "CommandInvoker",
    "CommandOutcome",
    "CommandResult",
    "OutcomeStatus",
    "SubprocessRunner",
    # Helpers
    "volume_id",
    "invert_mapped",
    "parse_monitor_addresses",
    "has_watchers",
    # Types
    "BYTES_PER_GIB",
    "RBDImage",
    "RBDInfo",
    "RBDMappedEntry",
    # Exception classes
    "RBDError",
    "CommandFailedError",
    "DecodeError",
    "InvalidMonitorAddressError",
    "AddressResolutionError",
]
