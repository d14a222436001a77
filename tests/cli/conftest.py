# topmark:header:start
#
#   project      : SSHMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SSHMark through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from sshmark.cli.exit_codes import ExitCode
from sshmark.cli.main import cli
from sshmark.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with a fresh `CliRunner`.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall session logging; each invocation binds the root handler to the runner's stderr."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)
