# topmark:header:start
#
#   project      : SSHMark
#   file         : errors.py
#   file_relpath : src/sshmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SSHMark CLI.

Raise these in CLI commands to signal errors with standardized messages and exit
codes. They prefer the project console when one is present in the Click context
(see `show()`); otherwise Click's default styling is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from sshmark.cli.exit_codes import ExitCode


class SshmarkError(click.ClickException):
    """Base class for all SSHMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SshmarkUsageError(SshmarkError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class SshmarkConfigError(SshmarkError):
    """Error for configuration errors (status document, home directory)."""

    exit_code = ExitCode.CONFIG_ERROR


class SshmarkFileNotFoundError(SshmarkError):
    """Error when the target file or its directory does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SshmarkPermissionDeniedError(SshmarkError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class SshmarkIOError(SshmarkError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class SshmarkDataError(SshmarkError):
    """Error for undecodable files and malformed managed blocks."""

    exit_code = ExitCode.DATA_ERROR


class SshmarkPipelineError(SshmarkError):
    """Error for internal failures (splicer contract violation)."""

    exit_code = ExitCode.PIPELINE_ERROR
