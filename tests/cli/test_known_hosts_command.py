# topmark:header:start
#
#   project      : SSHMark
#   file         : test_known_hosts_command.py
#   file_relpath : tests/cli/test_known_hosts_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `sshmark known-hosts`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, assert_exit, run_cli
from sshmark.cli.exit_codes import ExitCode
from sshmark.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from pathlib import Path


def test_known_hosts_for_peer(status_file: Path) -> None:
    result = run_cli(["--no-color", "known-hosts", "server.example.ts.net"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "server.example.ts.net,server,100.64.0.2,fd7a:115c:a1e0::2 "
        "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIServerKey",
    ]


def test_known_hosts_all_peers(status_file: Path) -> None:
    result = run_cli(["--no-color", "known-hosts"])
    assert_SUCCESS(result)
    assert len(result.output.splitlines()) == 3


def test_known_hosts_unknown_host(status_file: Path) -> None:
    result = run_cli(["--no-color", "known-hosts", "github.com"])
    assert_SUCCESS(result)
    assert result.output == ""


def test_known_hosts_explicit_status(tmp_path: Path, home: Path) -> None:
    status = tmp_path / "s.toml"
    status.write_text('[[peers]]\nname = "box"\nhost_keys = ["ssh-ed25519 AAAAbox"]\n')
    result = run_cli(["--no-color", "known-hosts", "box", "--status", str(status)])
    assert_SUCCESS(result)
    assert result.output == "box ssh-ed25519 AAAAbox\n"


def test_known_hosts_bad_status(tmp_path: Path, home: Path) -> None:
    status = tmp_path / "s.toml"
    status.write_text("peers = 3\n")
    result = run_cli(["known-hosts", "--status", str(status)])
    assert_exit(result, ExitCode.CONFIG_ERROR)


def test_known_hosts_stdout_has_no_log_lines(
    status_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(ENV_LOG_LEVEL, "INFO")

    result = run_cli(["--no-color", "known-hosts", "server"])

    assert_SUCCESS(result)
    assert result.stdout.splitlines() == [
        "server.example.ts.net,server,100.64.0.2,fd7a:115c:a1e0::2 "
        "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIServerKey",
    ]
    assert "[INFO]" in result.stderr
