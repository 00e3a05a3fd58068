"""
rbd-bridge type definitions

Models for the JSON documents emitted by the ``rbd`` tool. Field names
follow the tool's own keys; ``pool`` is never part of the tool output and
is filled in from the request that produced the document.

Fields use strict types: a number sent as a string, or a count sent as a
float, is a decode failure rather than being coerced.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from typing import List

__all__ = [
    "BYTES_PER_GIB",
    "RBDImage",
    "RBDInfo",
    "RBDMappedEntry",
]

BYTES_PER_GIB = 1024 * 1024 * 1024


class RBDImage(BaseModel):
    """One entry of ``rbd ls -l --format json``"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: StrictStr = Field(default="", alias="image", description="Image name")

    size: StrictInt = Field(default=0, ge=0, description="Provisioned size in bytes")

    format: StrictInt = Field(default=0, ge=0, description="Image format")

    pool: StrictStr = Field(default="", description="Pool the image was listed from")

    def size_gib(self) -> float:
        return self.size / BYTES_PER_GIB


class RBDInfo(BaseModel):
    """Low-level details from ``rbd info --format json``"""

    model_config = ConfigDict(frozen=True)

    name: StrictStr = Field(default="", description="Image name")

    size: StrictInt = Field(default=0, ge=0, description="Provisioned size in bytes")

    objects: StrictInt = Field(default=0, description="Number of backing objects")

    order: StrictInt = Field(default=0, description="Object size as a power of two")

    object_size: StrictInt = Field(default=0, description="Backing object size in bytes")

    block_name_prefix: StrictStr = Field(default="", description="RADOS object name prefix")

    format: StrictInt = Field(default=0, description="Image format version")

    features: List[StrictStr] = Field(
        default_factory=list,
        description="Enabled image features, in tool order"
    )

    pool: StrictStr = Field(default="", description="Pool the image was inspected in")

    def size_gib(self) -> float:
        return self.size / BYTES_PER_GIB


class RBDMappedEntry(BaseModel):
    """One kernel mapping reported by ``rbd showmapped --format json``"""

    model_config = ConfigDict(frozen=True)

    device: StrictStr = Field(default="", description="Local block device path")

    name: StrictStr = Field(default="", description="Image name")

    pool: StrictStr = Field(default="", description="Pool of the mapped image")

    snap: StrictStr = Field(default="", description="Mapped snapshot, '-' for none")
