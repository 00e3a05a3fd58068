"""
rbd-bridge error definitions

Standard exceptions used across the rbd-bridge project.

An image that does not exist is not an error: ``RBDClient.get_image_info``
returns ``None`` for it.
"""

from typing import Any, Dict, List, Optional


class RBDError(Exception):
    """Base exception for all rbd-bridge errors"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN"
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class CommandFailedError(RBDError):
    """External tool exited non-zero or could not be started"""

    def __init__(
        self,
        action: str,
        reason: str,
        tool: str = "",
        args: Optional[List[str]] = None,
        exit_code: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(
            message=f"{action}: {reason}",
            error_code="CMD_FAILED",
            details={"tool": tool, "args": list(args or []), "exit_code": exit_code},
        )
        self.action = action
        self.reason = reason
        self.tool = tool
        self.command_args = list(args or [])
        self.exit_code = exit_code
        self.stderr = stderr


class DecodeError(RBDError):
    """Tool succeeded but its output could not be parsed"""

    def __init__(self, what: str, reason: str):
        super().__init__(
            message=f"Unable to parse {what}: {reason}",
            error_code="DECODE_FAILED"
        )
        self.what = what
        self.reason = reason


class InvalidMonitorAddressError(RBDError):
    """Monitor address cannot be split into host and port"""

    def __init__(self, address: str, reason: str):
        super().__init__(
            message=f"Invalid monitor address '{address}': {reason}",
            error_code="ADDR_INVALID"
        )
        self.address = address
        self.reason = reason


class AddressResolutionError(RBDError):
    """Hostname lookup failed while normalizing monitor addresses"""

    def __init__(self, address: str, reason: str):
        super().__init__(
            message=f"Unable to resolve monitor address '{address}': {reason}",
            error_code="ADDR_RESOLVE_FAILED"
        )
        self.address = address
        self.reason = reason


# Error codes
ERROR_CODES = {
    # Command errors (CMD_xxx)
    "CMD_FAILED": "External command failed",

    # Output errors (DECODE_xxx)
    "DECODE_FAILED": "Command output could not be parsed",

    # Address errors (ADDR_xxx)
    "ADDR_INVALID": "Invalid monitor address",
    "ADDR_RESOLVE_FAILED": "Monitor address resolution failed",
}
