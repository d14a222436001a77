# topmark:header:start
#
#   project      : SSHMark
#   file         : __main__.py
#   file_relpath : src/sshmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SSHMark via ``python -m sshmark``.

It delegates directly to :func:`sshmark.cli.main.cli`, so the module interface and
the ``sshmark`` console script behave the same.

Examples:
    Print the ssh_config snippet without touching any file::

        python -m sshmark sshconfig --export
"""

from __future__ import annotations

from sshmark.cli.main import cli

if __name__ == "__main__":
    cli()
