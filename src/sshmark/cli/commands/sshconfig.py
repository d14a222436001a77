# topmark:header:start
#
#   project      : SSHMark
#   file         : sshconfig.py
#   file_relpath : src/sshmark/cli/commands/sshconfig.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SSHMark `sshconfig` command.

Renders the ssh_config snippet from the status document and keeps it up to date
inside the managed block of ``~/.ssh/config``::

    ## BEGIN SSHMark ##
    # SSHMark ssh config
    Host *.example.ts.net ...
        KnownHostsCommand "/usr/local/bin/sshmark" known-hosts %H
        ...
    ## END SSHMark ##

With ``--export`` the snippet is printed instead, e.g.
``sshmark sshconfig --export >> ~/.ssh/config``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sshmark.cli.errors import SshmarkUsageError
from sshmark.cli.exit_codes import ExitCode
from sshmark.cli.options import status_option
from sshmark.cli.utils import base_config, get_console, translate_errors
from sshmark.config.logging import get_logger
from sshmark.pipeline.runner import update_file
from sshmark.pipeline.status import WriteStatus
from sshmark.rendering.sshconfig import render_ssh_config
from sshmark.status.provider import TomlStatusProvider
from sshmark.utils.diff import render_patch

if TYPE_CHECKING:
    from sshmark.cli.console import ConsoleLike
    from sshmark.config.logging import SshmarkLogger
    from sshmark.config.model import Config, MutableConfig
    from sshmark.pipeline.context import ProcessingContext
    from sshmark.status.model import Status

logger: SshmarkLogger = get_logger(__name__)


@click.command(
    name="sshconfig",
    short_help="Configure ~/.ssh/config to check SSHMark for known hosts.",
    help=(
        "Add or refresh the SSHMark snippet in your ssh config file. The snippet is kept "
        "between '## BEGIN SSHMark ##' and '## END SSHMark ##'; anything outside those "
        "markers is left untouched. Use --export to print the snippet instead "
        "(e.g. 'sshmark sshconfig --export >> ~/.ssh/config')."
    ),
)
@click.option(
    "--export",
    is_flag=True,
    default=False,
    help="Print the snippet to stdout instead of modifying the ssh config file.",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help=f"Do not write; exit with {int(ExitCode.WOULD_CHANGE)} if the file would change.",
)
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    default=False,
    help="Show a unified diff of the change.",
)
@click.option(
    "--ssh-config",
    "ssh_config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="ssh config file to update (default: ~/.ssh/config).",
)
@click.option(
    "--executable",
    type=str,
    default=None,
    help=(
        "Program the snippet runs as KnownHostsCommand "
        "(default: sshmark on PATH, else the current interpreter with -m sshmark)."
    ),
)
@status_option
def sshconfig_command(
    *,
    export: bool,
    check: bool,
    show_diff: bool,
    ssh_config_path: Path | None,
    executable: str | None,
    status_path: Path | None,
) -> None:
    """Add or refresh the SSHMark snippet in the ssh config file."""
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    enable_color: bool = bool(ctx.obj.get("color_enabled", False))

    if export and (check or show_diff):
        raise SshmarkUsageError("'--export' cannot be combined with '--check' or '--diff'.")

    mcfg: MutableConfig = base_config(ctx)
    if ssh_config_path is not None:
        mcfg.ssh_config_path = ssh_config_path
    if status_path is not None:
        mcfg.status_path = status_path
    if executable:
        mcfg.command = (executable,)
    mcfg.export = export
    mcfg.apply_changes = not check
    mcfg.show_diff = show_diff
    config: Config = mcfg.freeze()
    logger.debug("sshconfig config: %s", config.to_dict())

    with translate_errors():
        status: Status = TomlStatusProvider(config.status_path).status()
        snippet: str = render_ssh_config(status, config.command)

    if config.export:
        console.print(snippet)
        return

    path: Path = config.ssh_config_path
    if config.verbosity_level >= 0:
        console.print(str(path))

    with translate_errors(path):
        result: ProcessingContext = update_file(path, snippet, config)

    if result.diff:
        if enable_color:
            console.print(render_patch(result.diff), nl=False)
        else:
            console.print("\n".join(result.diff))

    _report(console, config, result, enable_color=enable_color)

    if check and result.would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)


def _report(
    console: ConsoleLike,
    config: Config,
    result: ProcessingContext,
    *,
    enable_color: bool,
) -> None:
    if config.verbosity_level < 0:
        return
    if config.verbosity_level > 0:
        console.print(f"  read:  {result.read_status.styled(enable_color)}")
        console.print(f"  block: {result.block_status.styled(enable_color)}")
        console.print(f"  write: {result.write_status.styled(enable_color)}")

    path: Path = result.path
    if result.write_status == WriteStatus.WRITTEN:
        console.print(console.styled(f"Updated {path}", fg="green"))
    elif result.write_status == WriteStatus.PREVIEWED:
        console.print(console.styled(f"Would update {path}", fg="yellow"))
    else:
        console.print(f"{path} is up to date")
