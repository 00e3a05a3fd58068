"""
rbd-bridge client

RBDClient is the entry point used by volume drivers. Each operation runs
one rbd or rados command and returns typed results.

Operations are synchronous, hold no state between calls and never retry.
Callers serialize operations on the same image if they need to.
"""

import logging
from typing import Any, Dict, List, Optional

from rbd_bridge.commands.invoker import CommandInvoker
from rbd_bridge.config import RBDConfig
from rbd_bridge.identity import invert_mapped
from rbd_bridge.monitoring.metrics import InMemoryMetricsCollector
from rbd_bridge.monitors import IPAddress, parse_monitor_addresses
from rbd_bridge.parsers.output import (
    parse_images,
    parse_info,
    parse_mapped,
    parse_pools,
    parse_status,
)
from rbd_bridge.parsers.watchers import has_watchers
from rbd_bridge.types import RBDImage, RBDInfo, RBDMappedEntry

logger = logging.getLogger(__name__)

FORMAT_OPT = "--format"
JSON_ARG = "json"
POOL_OPT = "--pool"

# rbd info exits with this status when the image does not exist
RBD_INFO_NOT_FOUND_EXIT_CODE = 2


class RBDClient:
    """
    Volume operations backed by the rbd and rados command-line tools.

    Responsibilities:
    - Argument assembly for each tool call
    - Routing tool output to the matching decoder
    - Raising CommandFailedError / DecodeError on failure
    """

    def __init__(
        self,
        config: Optional[RBDConfig] = None,
        invoker: Optional[CommandInvoker] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Optional configuration. If not provided, uses defaults.
            invoker: Optional command invoker. If not provided, one backed
                     by a subprocess runner and an in-memory metrics
                     collector is created.
        """
        self.config = config or RBDConfig()
        self._metrics = InMemoryMetricsCollector()
        if invoker is None:
            invoker = CommandInvoker(metrics=self._metrics)
        elif invoker.metrics is None:
            invoker.metrics = self._metrics
        else:
            self._metrics = invoker.metrics
        self._invoker = invoker

    # ------------------------------------------------------------------
    # Pools and images
    # ------------------------------------------------------------------

    def list_pools(self) -> List[str]:
        """Return the names of all pools, in tool order."""
        outcome = self._invoker.invoke(self.config.rados_command, ["lspools"])
        return parse_pools(outcome.check("Unable to get pools"))

    def list_images(self, pool: str) -> List[RBDImage]:
        """Return every image in ``pool``."""
        outcome = self._invoker.invoke(
            self.config.rbd_command,
            ["ls", "-p", pool, "-l", FORMAT_OPT, JSON_ARG],
        )
        return parse_images(outcome.check("Unable to get rbd images"), pool)

    def get_image_info(self, pool: str, image: str) -> Optional[RBDInfo]:
        """
        Return low-level details about an image.

        Returns:
            RBDInfo, or None if the image does not exist
        """
        outcome = self._invoker.invoke(
            self.config.rbd_command,
            ["info", "-p", pool, image, FORMAT_OPT, JSON_ARG],
            not_found_exit_code=RBD_INFO_NOT_FOUND_EXIT_CODE,
        )
        if outcome.not_found:
            logger.debug(f"rbd image {pool}/{image} does not exist")
            return None
        return parse_info(outcome.check("Unable to get rbd info"), pool)

    def create_image(
        self,
        pool: str,
        image: str,
        size_gb: int,
        object_size: Optional[str] = None,
        features: Optional[List[str]] = None,
    ) -> None:
        """
        Create an image.

        Args:
            pool: Pool to create the image in
            image: Image name
            size_gb: Size in GiB
            object_size: Object size such as "4M"; defaults to
                         config.default_object_size
            features: Image features; None means config.default_features,
                      an empty list passes no feature flags
        """
        if object_size is None:
            object_size = self.config.default_object_size
        if features is None:
            features = self.config.default_features

        args = [
            "create", POOL_OPT, pool,
            "--object-size", object_size,
            "--size", f"{size_gb}G",
        ]
        for feature in features:
            args.extend(["--image-feature", feature])
        args.append(image)

        self._invoker.invoke(self.config.rbd_command, args).check("Unable to create RBD")
        logger.info(f"Created rbd image {pool}/{image} ({size_gb}G)")

    def remove_image(self, pool: str, image: str) -> None:
        """Delete an image."""
        outcome = self._invoker.invoke(
            self.config.rbd_command,
            ["rm", POOL_OPT, pool, "--no-progress", image],
        )
        outcome.check("Error deleting RBD")
        logger.info(f"Deleted rbd image {pool}/{image}")

    # ------------------------------------------------------------------
    # Local kernel mappings
    # ------------------------------------------------------------------

    def map_image(self, pool: str, image: str) -> str:
        """
        Map an image on the local host.

        Returns:
            Local device path, e.g. "/dev/rbd0"
        """
        outcome = self._invoker.invoke(
            self.config.rbd_command,
            ["map", POOL_OPT, pool, image],
        )
        outcome.check("Unable to map RBD")
        device = outcome.text().strip()
        logger.info(f"Mapped rbd image {pool}/{image} to {device}")
        return device

    def unmap_device(self, device: str) -> None:
        """Unmap a local rbd device."""
        self._invoker.invoke(self.config.rbd_command, ["unmap", device]).check("Unable to unmap RBD")
        logger.info(f"Unmapped rbd device {device}")

    def list_mapped(self) -> Dict[str, RBDMappedEntry]:
        """Return the raw showmapped table, keyed as the tool keys it."""
        outcome = self._invoker.invoke(
            self.config.rbd_command,
            ["showmapped", FORMAT_OPT, JSON_ARG],
        )
        return parse_mapped(outcome.check("Unable to get RBD map"))

    def get_mapped_devices(self) -> Dict[str, str]:
        """Return volume ID -> device path for images mapped on this host."""
        return invert_mapped(self.list_mapped())

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def get_status(self, pool: str, image: str) -> Dict[str, Any]:
        """Return the decoded ``rbd status`` document for an image."""
        outcome = self._invoker.invoke(
            self.config.rbd_command,
            ["status", POOL_OPT, pool, image, FORMAT_OPT, JSON_ARG],
        )
        return parse_status(outcome.check("Unable to get RBD status"))

    def has_watchers(self, pool: str, image: str) -> bool:
        """Return True if any client holds the image open."""
        return has_watchers(self.get_status(pool, image))

    # ------------------------------------------------------------------
    # Cluster configuration
    # ------------------------------------------------------------------

    def monitor_ips(self) -> List[IPAddress]:
        """Normalize the configured monitor addresses into IP addresses."""
        return parse_monitor_addresses(self.config.monitors)

    def metrics(self) -> Dict[str, Dict[str, Any]]:
        """Return invocation counters keyed by tool."""
        return self._metrics.snapshot()
