# topmark:header:start
#
#   project      : SSHMark
#   file         : utils.py
#   file_relpath : src/sshmark/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for Click commands: config assembly and error translation."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from sshmark.block.editor import MarkerOrderError
from sshmark.block.splicer import InvalidSpanError
from sshmark.cli.errors import (
    SshmarkConfigError,
    SshmarkDataError,
    SshmarkFileNotFoundError,
    SshmarkIOError,
    SshmarkPermissionDeniedError,
    SshmarkPipelineError,
)
from sshmark.config.logging import get_logger
from sshmark.config.model import HomeDirectoryError, MutableConfig
from sshmark.status.provider import StatusError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sshmark.cli.console import ConsoleLike
    from sshmark.config.logging import SshmarkLogger

logger: SshmarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (0 if unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def base_config(ctx: click.Context) -> MutableConfig:
    """Return a builder holding defaults and environment overrides.

    Raises:
        SshmarkConfigError: If the home directory cannot be resolved.
    """
    try:
        mcfg: MutableConfig = MutableConfig.from_defaults().apply_env()
    except HomeDirectoryError as exc:
        raise SshmarkConfigError(str(exc)) from exc
    mcfg.verbosity_level = get_verbosity(ctx)
    return mcfg


@contextmanager
def translate_errors(path: Path | None = None) -> Iterator[None]:
    """Map library and OS exceptions to SSHMark CLI errors.

    Mapping:
        SshmarkConfigError → StatusError
        SshmarkDataError → UnicodeDecodeError, MarkerOrderError
        SshmarkPipelineError → InvalidSpanError
        SshmarkFileNotFoundError → FileNotFoundError
        SshmarkPermissionDeniedError → PermissionError
        SshmarkIOError → any other OSError
    """
    where: str = f"{path}: " if path is not None else ""
    try:
        yield
    except StatusError as exc:
        raise SshmarkConfigError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SshmarkDataError(f"{where}not valid UTF-8 ({exc.reason})") from exc
    except MarkerOrderError as exc:
        raise SshmarkDataError(f"{where}{exc}") from exc
    except InvalidSpanError as exc:
        logger.error("Splicer contract violated: %s", exc)
        raise SshmarkPipelineError(f"{where}internal error: {exc}") from exc
    except FileNotFoundError as exc:
        raise SshmarkFileNotFoundError(f"{where}{exc.strerror or exc}") from exc
    except PermissionError as exc:
        raise SshmarkPermissionDeniedError(f"{where}{exc.strerror or exc}") from exc
    except OSError as exc:
        raise SshmarkIOError(f"{where}{exc.strerror or exc}") from exc
