# topmark:header:start
#
#   project      : SSHMark
#   file         : version.py
#   file_relpath : src/sshmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SSHMark `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sshmark.cli.utils import get_console, get_verbosity
from sshmark.constants import SSHMARK_VERSION

if TYPE_CHECKING:
    from sshmark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SSHMark.",
)
def version_command() -> None:
    """Print the SSHMark version as installed in the current Python environment."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if get_verbosity(ctx) > 0:
        console.print(console.styled("SSHMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(SSHMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(SSHMARK_VERSION, bold=True))
