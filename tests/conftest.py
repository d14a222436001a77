# topmark:header:start
#
#   project      : SSHMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SSHMark test suite.

Sets up TRACE logging for test runs, isolates the environment variables SSHMark
reads, and provides a temporary home directory with a status document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sshmark.config import logging
from sshmark.constants import ENV_LOG_LEVEL, ENV_STATUS_FILE

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_STATUS_TOML: str = """\
[self]
name = "laptop"
dns_name = "laptop.example.ts.net."

[tailnet]
magic_dns_suffix = "example.ts.net"

[[peers]]
name = "server"
dns_name = "server.example.ts.net."
addresses = ["100.64.0.2", "fd7a:115c:a1e0::2"]
host_keys = ["ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIServerKey"]

[[peers]]
name = "nas"
dns_name = "nas.example.ts.net."
addresses = ["100.64.0.3"]
host_keys = [
    "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAINasKey",
    "ecdsa-sha2-nistp256 AAAAE2VjZHNhLXNoYTItbmlzdHAyNTYAAAAINasKey",
]
"""

TEST_EXECUTABLE: str = "/opt/sshmark/bin/sshmark"


@pytest.fixture(autouse=True)
def clean_sshmark_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak SSHMark settings into tests."""
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_STATUS_FILE, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure TRACE logging for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at a temporary directory holding an empty ``.ssh`` directory.

    Returns:
        Path: The temporary home directory.
    """
    home_dir: Path = tmp_path / "home"
    (home_dir / ".ssh").mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def status_file(home: Path) -> Path:
    """Write the sample status document to its default location under ``home``."""
    path: Path = home / ".config" / "sshmark" / "status.toml"
    path.parent.mkdir(parents=True)
    path.write_text(SAMPLE_STATUS_TOML, encoding="utf-8")
    return path
