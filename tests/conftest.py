"""
Pytest configuration and fixtures for rbd-bridge tests.

No test spawns the real rbd or rados tools: FakeRunner records every
argument vector and replays canned results.
"""

import sys
from pathlib import Path
from typing import List, Optional, Union

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rbd_bridge.client import RBDClient
from rbd_bridge.commands.invoker import CommandInvoker
from rbd_bridge.commands.runner import CommandResult
from rbd_bridge.config import RBDConfig


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "subprocess: Tests that spawn a real child process"
    )


# =============================================================================
# Fake process runner
# =============================================================================

class FakeRunner:
    """Stand-in for SubprocessRunner that replays queued results."""

    def __init__(self, results: Optional[List[Union[CommandResult, BaseException]]] = None):
        self.results = list(results or [])
        self.calls: List[List[str]] = []

    def queue(self, exit_code: int = 0, stdout: bytes = b"", stderr: str = "") -> None:
        self.results.append(CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr))

    def queue_error(self, error: BaseException) -> None:
        self.results.append(error)

    def run(self, argv: List[str]) -> CommandResult:
        self.calls.append(list(argv))
        result = self.results.pop(0) if self.results else CommandResult(exit_code=0)
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Create an empty fake runner."""
    return FakeRunner()


@pytest.fixture
def invoker(fake_runner) -> CommandInvoker:
    """Create a CommandInvoker backed by the fake runner."""
    return CommandInvoker(runner=fake_runner)


@pytest.fixture
def rbd_config() -> RBDConfig:
    """Create a test configuration."""
    return RBDConfig(
        default_object_size="4M",
        default_features=["layering"],
        monitors=["10.0.0.1:6789", "[fd00::1]:6789"],
    )


@pytest.fixture
def client(rbd_config, invoker) -> RBDClient:
    """Create an RBDClient whose commands go to the fake runner."""
    return RBDClient(config=rbd_config, invoker=invoker)


# =============================================================================
# Sample tool output
# =============================================================================

@pytest.fixture
def rbd_ls_output() -> bytes:
    """Sample output of 'rbd ls -l --format json'."""
    return (
        b'[{"image":"vol1","size":10737418240,"format":2},'
        b'{"image":"vol2","size":1073741824,"format":2,"lock_type":"exclusive"}]'
    )


@pytest.fixture
def rbd_info_output() -> bytes:
    """Sample output of 'rbd info --format json'."""
    return (
        b'{"name":"vol1","size":10737418240,"objects":2560,"order":22,'
        b'"object_size":4194304,"block_name_prefix":"rbd_data.1234abcd",'
        b'"format":2,"features":["layering","exclusive-lock"],"flags":[]}'
    )


@pytest.fixture
def rbd_showmapped_output() -> bytes:
    """Sample output of 'rbd showmapped --format json'."""
    return (
        b'{"0":{"pool":"rbd","name":"vol1","snap":"-","device":"/dev/rbd0"},'
        b'"1":{"pool":"fast","name":"db","snap":"-","device":"/dev/rbd1"}}'
    )
