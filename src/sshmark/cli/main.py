# topmark:header:start
#
#   project      : SSHMark
#   file         : main.py
#   file_relpath : src/sshmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the SSHMark CLI.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sshmark.cli.commands.known_hosts import known_hosts_command
from sshmark.cli.commands.sshconfig import sshconfig_command
from sshmark.cli.commands.version import version_command
from sshmark.cli.console import ClickConsole
from sshmark.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from sshmark.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from sshmark.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = not no_color
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SSHMark CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the SSHMark CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'sshmark sshconfig' to update ~/.ssh/config.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(sshconfig_command)

cli.add_command(known_hosts_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
