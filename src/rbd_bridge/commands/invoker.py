"""
Command invoker for the rbd and rados tools.

Every call is classified into exactly one of three outcomes:

- SUCCESS: exit status 0, stdout carried as bytes
- NOT_FOUND: the caller-designated "entity absent" exit status
- FAILED: anything else, including an executable that could not be started

NOT_FOUND is only produced when the caller passes ``not_found_exit_code``;
without it, every non-zero exit is a failure.
"""

import logging
import time
from enum import Enum
from typing import List, Optional

from rbd_bridge.commands.runner import CommandResult, SubprocessRunner
from rbd_bridge.errors import CommandFailedError
from rbd_bridge.monitoring.metrics import InMemoryMetricsCollector

logger = logging.getLogger(__name__)


class OutcomeStatus(str, Enum):
    """Classified result of one tool invocation"""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class CommandOutcome:
    """Classified result of one tool invocation."""

    def __init__(
        self,
        status: OutcomeStatus,
        tool: str,
        args: List[str],
        stdout: bytes = b"",
        stderr: str = "",
        exit_code: Optional[int] = None,
        message: str = "",
    ):
        self.status = status
        self.tool = tool
        self.args = args
        self.stdout = stdout
        self.stderr = stderr
        self.exit_code = exit_code
        self.message = message

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    @property
    def not_found(self) -> bool:
        return self.status == OutcomeStatus.NOT_FOUND

    def text(self) -> str:
        """Decoded stdout."""
        return self.stdout.decode("utf-8", errors="replace")

    def check(self, action: str) -> bytes:
        """
        Return stdout of a successful invocation.

        Args:
            action: Description of the operation, used as the error prefix
                    (e.g. "Unable to get pools")

        Raises:
            CommandFailedError: If the invocation did not succeed. A
                NOT_FOUND outcome is a failure here; callers that accept
                absence test ``not_found`` first.
        """
        if self.ok:
            return self.stdout

        logger.error(
            f"{action}: tool={self.tool} exit_code={self.exit_code} stderr={self.stderr!r}"
        )
        raise CommandFailedError(
            action=action,
            reason=self.message,
            tool=self.tool,
            args=self.args,
            exit_code=self.exit_code,
            stderr=self.stderr,
        )

    def __repr__(self) -> str:
        return (
            f"CommandOutcome(status={self.status.value!r}, tool={self.tool!r}, "
            f"exit_code={self.exit_code!r})"
        )


class CommandInvoker:
    """
    Runs one external tool call and classifies its outcome.

    Arguments are passed to the runner verbatim, never through a shell.
    """

    def __init__(
        self,
        runner: Optional[SubprocessRunner] = None,
        metrics: Optional[InMemoryMetricsCollector] = None,
    ):
        self.runner = runner or SubprocessRunner()
        self.metrics = metrics

    def invoke(
        self,
        tool: str,
        args: List[str],
        not_found_exit_code: Optional[int] = None,
    ) -> CommandOutcome:
        """
        Run ``tool`` with ``args`` and classify the result.

        Args:
            tool: Executable name or path
            args: Argument vector, excluding the executable
            not_found_exit_code: Exit status meaning "entity absent" for
                this call, or None if the call has no such status

        Returns:
            CommandOutcome
        """
        argv = [tool] + list(args)
        logger.debug(f"running command: cmd={tool} args={argv}")

        start_time = time.monotonic()
        try:
            result: CommandResult = self.runner.run(argv)
        except OSError as e:
            outcome = CommandOutcome(
                status=OutcomeStatus.FAILED,
                tool=tool,
                args=argv,
                message=str(e),
            )
        else:
            outcome = self._classify(tool, argv, result, not_found_exit_code)
        duration_ms = (time.monotonic() - start_time) * 1000

        if self.metrics is not None:
            self.metrics.record_invocation(tool, outcome.status.value, duration_ms)

        return outcome

    @staticmethod
    def _classify(
        tool: str,
        argv: List[str],
        result: CommandResult,
        not_found_exit_code: Optional[int],
    ) -> CommandOutcome:
        if result.exit_code == 0:
            return CommandOutcome(
                status=OutcomeStatus.SUCCESS,
                tool=tool,
                args=argv,
                stdout=result.stdout,
                stderr=result.stderr,
                exit_code=0,
            )

        if not_found_exit_code is not None and result.exit_code == not_found_exit_code:
            return CommandOutcome(
                status=OutcomeStatus.NOT_FOUND,
                tool=tool,
                args=argv,
                stdout=result.stdout,
                stderr=result.stderr,
                exit_code=result.exit_code,
            )

        message = result.stderr if result.stderr else f"exit status {result.exit_code}"
        return CommandOutcome(
            status=OutcomeStatus.FAILED,
            tool=tool,
            args=argv,
            stdout=result.stdout,
            stderr=result.stderr,
            exit_code=result.exit_code,
            message=message,
        )
