"""
Process execution primitive.

Runs an argument vector to completion without a shell and captures
stdout, stderr and the exit status.
"""

import subprocess
from typing import List, Optional


class CommandResult:
    """Result of a finished process."""

    def __init__(
        self,
        exit_code: int,
        stdout: bytes = b"",
        stderr: str = "",
    ):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr


class SubprocessRunner:
    """Runs commands with :func:`subprocess.run`.

    Raises ``OSError`` (e.g. ``FileNotFoundError``) when the executable
    cannot be started; a started process always yields a CommandResult.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, argv: List[str]) -> CommandResult:
        proc = subprocess.run(
            argv,
            shell=False,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=self.timeout,
        )
        return CommandResult(
            exit_code=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr.decode("utf-8", errors="replace"),
        )
