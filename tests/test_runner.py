"""
Tests for SubprocessRunner against a real child process.

The child is the current Python interpreter, so no storage tools are needed.
"""

import sys

import pytest

from rbd_bridge.commands.invoker import CommandInvoker, OutcomeStatus
from rbd_bridge.commands.runner import SubprocessRunner


@pytest.mark.subprocess
class TestSubprocessRunner:
    """Tests for SubprocessRunner.run."""

    def test_captures_stdout_as_bytes(self):
        result = SubprocessRunner().run([sys.executable, "-c", "print('/dev/rbd0')"])

        assert result.exit_code == 0
        assert result.stdout.strip() == b"/dev/rbd0"

    def test_captures_stderr_and_exit_code(self):
        code = "import sys; sys.stderr.write('no such image'); sys.exit(2)"
        result = SubprocessRunner().run([sys.executable, "-c", code])

        assert result.exit_code == 2
        assert result.stderr == "no such image"

    def test_no_shell_interpretation(self):
        code = "import sys; print(sys.argv[1])"
        result = SubprocessRunner().run([sys.executable, "-c", code, "$HOME; echo hi"])

        assert result.stdout.strip() == b"$HOME; echo hi"

    def test_missing_executable_raises(self):
        with pytest.raises(OSError):
            SubprocessRunner().run(["__missing_rbd_binary__"])


@pytest.mark.subprocess
class TestInvokerWithRealProcess:
    """Tests for CommandInvoker on top of SubprocessRunner."""

    def test_missing_executable_is_failure(self):
        outcome = CommandInvoker().invoke("__missing_rbd_binary__", ["ls"])

        assert outcome.status == OutcomeStatus.FAILED
        assert outcome.exit_code is None
        assert outcome.message

    def test_not_found_exit_code(self):
        outcome = CommandInvoker().invoke(
            sys.executable,
            ["-c", "import sys; sys.exit(2)"],
            not_found_exit_code=2,
        )

        assert outcome.status == OutcomeStatus.NOT_FOUND
