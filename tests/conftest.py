"""
Pytest configuration and shared fixtures for funcsetup tests.
"""

import pytest
from pathlib import Path

from tests.mocks.context import FakeContext


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def linux_context(tmp_path: Path) -> FakeContext:
    """Fake Linux X64 runner with a path file and a working directory."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    return FakeContext(
        env={"RUNNER_OS": "Linux", "RUNNER_ARCH": "X64"},
        search_path=["/usr/bin", "/bin"],
        workdir=workdir,
    )


@pytest.fixture
def windows_context(tmp_path: Path) -> FakeContext:
    """Fake Windows X64 runner."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    return FakeContext(
        env={"RUNNER_OS": "Windows", "RUNNER_ARCH": "X64"},
        search_path=["C:\\Windows"],
        workdir=workdir,
        pathsep=";",
    )


@pytest.fixture
def no_network(monkeypatch):
    """Disable network access for tests."""
    import socket

    def guard(*args, **kwargs):
        raise RuntimeError("Network access not allowed in this test")

    monkeypatch.setattr(socket, "socket", guard)
