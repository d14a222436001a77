# topmark:header:start
#
#   project      : SSHMark
#   file         : sshconfig.py
#   file_relpath : src/sshmark/rendering/sshconfig.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the ssh_config snippet and known_hosts lines from a `Status`.

The snippet is what ends up inside the managed block::

    # SSHMark ssh config
    Host *.example.ts.net server.example.ts.net server 100.64.0.2
        KnownHostsCommand "/usr/local/bin/sshmark" known-hosts %H
        UpdateHostKeys no
        StrictHostKeyChecking yes

OpenSSH then runs ``sshmark known-hosts <host>`` whenever it connects to a
matching host, and `render_known_hosts` produces the answer. This node itself
(the ``[self]`` entry of the status) is never listed as a peer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sshmark.config.logging import get_logger
from sshmark.constants import SNIPPET_BANNER
from sshmark.status.provider import StatusError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sshmark.config.logging import SshmarkLogger
    from sshmark.status.model import Status

logger: SshmarkLogger = get_logger(__name__)

INDENT: str = "    "


def host_patterns(status: Status) -> list[str]:
    """Return the ``Host`` patterns for ``status``, de-duplicated in order."""
    patterns: list[str] = []
    suffix: str = status.magic_dns_suffix.strip(".")
    if suffix:
        patterns.append(f"*.{suffix}")
    for peer in status.remote_peers():
        for name in peer.host_names():
            if name not in patterns:
                patterns.append(name)
    return patterns


def known_hosts_command(command: Sequence[str]) -> str:
    """Return the ``KnownHostsCommand`` value running ``command known-hosts %H``.

    The program is always double-quoted; other arguments only when they contain
    whitespace.

    Raises:
        StatusError: If ``command`` is empty or an argument contains a double quote,
            which ssh_config cannot escape.
    """
    if not command:
        raise StatusError("No program configured for KnownHostsCommand")
    if any('"' in arg for arg in command):
        raise StatusError(f"Cannot quote {list(command)!r} for ssh_config")
    program, *args = command
    quoted: list[str] = [f'"{program}"']
    quoted.extend(f'"{arg}"' if any(c.isspace() for c in arg) else arg for arg in args)
    return " ".join([*quoted, "known-hosts", "%H"])


def render_ssh_config(status: Status, command: Sequence[str]) -> str:
    """Render the ssh_config snippet.

    Args:
        status (Status): Status to derive host patterns from.
        command (Sequence[str]): Program (and leading arguments) OpenSSH runs as
            ``KnownHostsCommand``.

    Returns:
        str: The snippet, without a trailing newline.

    Raises:
        StatusError: If the status yields no host pattern at all, or ``command``
            cannot be written as a ``KnownHostsCommand``.
    """
    patterns: list[str] = host_patterns(status)
    if not patterns:
        raise StatusError("Status has neither a DNS suffix nor peers: nothing to configure")

    lines: list[str] = [
        SNIPPET_BANNER,
        f"Host {' '.join(patterns)}",
        f"{INDENT}KnownHostsCommand {known_hosts_command(command)}",
        f"{INDENT}UpdateHostKeys no",
        f"{INDENT}StrictHostKeyChecking yes",
    ]
    logger.debug("Rendered ssh_config snippet with %d host pattern(s)", len(patterns))
    return "\n".join(lines)


def render_known_hosts(status: Status, host: str | None = None) -> list[str]:
    """Render known_hosts lines for the peers in ``status``.

    Args:
        status (Status): Status holding the peers and their host keys.
        host (str | None): Restrict the output to the peer named ``host``
            (short name, DNS name or address).

    Returns:
        list[str]: One ``"<names> <key>"`` line per host key.
    """
    out: list[str] = []
    for peer in status.remote_peers():
        if host is not None and not peer.matches(host):
            continue
        names: str = ",".join(peer.host_names())
        out.extend(f"{names} {key}" for key in peer.host_keys)
    logger.debug("render_known_hosts(host=%r): %d line(s)", host, len(out))
    return out
