# topmark:header:start
#
#   project      : SSHMark
#   file         : options.py
#   file_relpath : src/sshmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, status document) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from sshmark.cli.errors import SshmarkUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        SshmarkUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SshmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output. Repeat for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print errors (and exported output).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-color`` to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def status_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--status PATH`` (the TOML status document) to a command."""
    return click.option(
        "--status",
        "status_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Status document to read (default: $SSHMARK_STATUS_FILE or "
        "~/.config/sshmark/status.toml).",
    )(f)
