# topmark:header:start
#
#   project      : SSHMark
#   file         : known_hosts.py
#   file_relpath : src/sshmark/cli/commands/known_hosts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SSHMark `known-hosts` command.

Prints known_hosts lines for the peers in the status document. The ssh_config
snippet points OpenSSH's ``KnownHostsCommand`` at this command, so its standard
output must contain nothing but known_hosts lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sshmark.cli.options import status_option
from sshmark.cli.utils import base_config, get_console, translate_errors
from sshmark.rendering.sshconfig import render_known_hosts
from sshmark.status.provider import TomlStatusProvider

if TYPE_CHECKING:
    from pathlib import Path

    from sshmark.cli.console import ConsoleLike
    from sshmark.config.model import Config, MutableConfig
    from sshmark.status.model import Status


@click.command(
    name="known-hosts",
    help="Print known_hosts lines for HOST (or for every peer when HOST is omitted).",
)
@click.argument("host", required=False)
@status_option
def known_hosts_command(*, host: str | None, status_path: Path | None) -> None:
    """Print known_hosts lines from the status document."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    mcfg: MutableConfig = base_config(ctx)
    if status_path is not None:
        mcfg.status_path = status_path
    config: Config = mcfg.freeze()

    with translate_errors():
        status: Status = TomlStatusProvider(config.status_path).status()

    for line in render_known_hosts(status, host):
        console.print(line)
