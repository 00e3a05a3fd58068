"""
Decoders for rbd and rados command output.

Pool listings are newline-delimited text; every other output is JSON.
Malformed payloads raise DecodeError carrying the decoder's message.
"""

import json
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from rbd_bridge.errors import DecodeError
from rbd_bridge.types import RBDImage, RBDInfo, RBDMappedEntry

_IMAGE_LIST = TypeAdapter(List[RBDImage])
_MAPPED_TABLE = TypeAdapter(Dict[str, RBDMappedEntry])


def _load_json(data: bytes, what: str) -> Any:
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(what, str(e)) from e


def parse_pools(data: bytes) -> List[str]:
    """Split ``rados lspools`` output into pool names, skipping blank lines."""
    text = data.decode("utf-8", errors="replace")
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_images(data: bytes, pool: str) -> List[RBDImage]:
    """Decode ``rbd ls -l --format json`` and tag every image with ``pool``."""
    raw = _load_json(data, "rbd ls")
    if raw is None:
        return []
    try:
        images = _IMAGE_LIST.validate_python(raw)
    except ValidationError as e:
        raise DecodeError("rbd ls", str(e)) from e
    return [image.model_copy(update={"pool": pool}) for image in images]


def parse_info(data: bytes, pool: str) -> RBDInfo:
    """Decode ``rbd info --format json`` and tag it with ``pool``.

    JSON null yields an RBDInfo with only ``pool`` set.
    """
    raw = _load_json(data, "rbd info")
    if raw is None:
        return RBDInfo(pool=pool)
    if not isinstance(raw, dict):
        raise DecodeError("rbd info", f"expected a JSON object, got {type(raw).__name__}")
    try:
        info = RBDInfo.model_validate(raw)
    except ValidationError as e:
        raise DecodeError("rbd info", str(e)) from e
    return info.model_copy(update={"pool": pool})


def parse_mapped(data: bytes) -> Dict[str, RBDMappedEntry]:
    """
    Decode ``rbd showmapped --format json``.

    The tool keys entries arbitrarily (by mapping id); keys are kept as
    emitted and entries keep their own pool and image names.
    """
    raw = _load_json(data, "rbd showmapped")
    if raw is None:
        return {}
    try:
        return _MAPPED_TABLE.validate_python(raw)
    except ValidationError as e:
        raise DecodeError("rbd showmapped", str(e)) from e


def parse_status(data: bytes) -> Dict[str, Any]:
    """Decode ``rbd status --format json`` into a plain dict."""
    raw = _load_json(data, "rbd status")
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DecodeError("rbd status", f"expected a JSON object, got {type(raw).__name__}")
    return raw
