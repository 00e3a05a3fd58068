"""
External command execution for rbd-bridge.
"""

from rbd_bridge.commands.runner import CommandResult, SubprocessRunner
from rbd_bridge.commands.invoker import CommandInvoker, CommandOutcome, OutcomeStatus

__all__ = [
    "CommandResult",
    "SubprocessRunner",
    "CommandInvoker",
    "CommandOutcome",
    "OutcomeStatus",
]
