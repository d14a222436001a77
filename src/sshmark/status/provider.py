# topmark:header:start
#
#   project      : SSHMark
#   file         : provider.py
#   file_relpath : src/sshmark/status/provider.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status providers.

The only provider shipped reads a TOML status document with tomlkit::

    [self]
    name = "laptop"
    dns_name = "laptop.example.ts.net."

    [tailnet]
    magic_dns_suffix = "example.ts.net"

    [[peers]]
    name = "server"
    dns_name = "server.example.ts.net."
    addresses = ["100.64.0.2"]
    host_keys = ["ssh-ed25519 AAAAC3Nza..."]

Every key is optional. Values of the wrong type raise `StatusError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from sshmark.config.logging import get_logger
from sshmark.status.model import PeerStatus, SelfStatus, Status

if TYPE_CHECKING:
    from pathlib import Path

    from sshmark.config.logging import SshmarkLogger

logger: SshmarkLogger = get_logger(__name__)


class StatusError(Exception):
    """Raised when the status document is missing or malformed."""


class StatusProvider(Protocol):
    """Source of the `Status` the snippet is rendered from."""

    def status(self) -> Status:
        """Return the current status."""
        ...


def _get_table(table: dict[str, Any], key: str, where: str) -> dict[str, Any]:
    value: Any = table.get(key, {})
    if not isinstance(value, dict):
        raise StatusError(f"{where}: '{key}' must be a table, got {type(value).__name__}")
    return value


def _get_str(table: dict[str, Any], key: str, where: str) -> str:
    value: Any = table.get(key, "")
    if not isinstance(value, str):
        raise StatusError(f"{where}: '{key}' must be a string, got {type(value).__name__}")
    return value


def _get_str_list(table: dict[str, Any], key: str, where: str) -> tuple[str, ...]:
    value: Any = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise StatusError(f"{where}: '{key}' must be a list of strings")
    return tuple(value)


def parse_status(data: dict[str, Any], *, source: str = "<status>") -> Status:
    """Build a `Status` from a plain TOML dict.

    Args:
        data (dict[str, Any]): Parsed TOML document (plain Python values).
        source (str): Name of the document, used in error messages.

    Returns:
        Status: The parsed status.

    Raises:
        StatusError: If a value has the wrong type or a peer has no name.
    """
    self_tbl: dict[str, Any] = _get_table(data, "self", source)
    tailnet_tbl: dict[str, Any] = _get_table(data, "tailnet", source)

    raw_peers: Any = data.get("peers", [])
    if not isinstance(raw_peers, list):
        raise StatusError(f"{source}: 'peers' must be an array of tables")

    peers: list[PeerStatus] = []
    for i, raw in enumerate(raw_peers):
        where: str = f"{source}: peers[{i}]"
        if not isinstance(raw, dict):
            raise StatusError(f"{where} must be a table")
        name: str = _get_str(raw, "name", where)
        if not name:
            raise StatusError(f"{where}: 'name' is required")
        peers.append(
            PeerStatus(
                name=name,
                dns_name=_get_str(raw, "dns_name", where),
                addresses=_get_str_list(raw, "addresses", where),
                host_keys=_get_str_list(raw, "host_keys", where),
            )
        )

    return Status(
        self_status=SelfStatus(
            name=_get_str(self_tbl, "name", f"{source}: self"),
            dns_name=_get_str(self_tbl, "dns_name", f"{source}: self"),
        ),
        magic_dns_suffix=_get_str(tailnet_tbl, "magic_dns_suffix", f"{source}: tailnet"),
        peers=tuple(peers),
    )


class TomlStatusProvider:
    """Read the status from a TOML document on disk.

    Args:
        path (Path): Location of the status document.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def status(self) -> Status:
        """Parse the status document.

        Returns:
            Status: The parsed status.

        Raises:
            StatusError: If the document is missing, unreadable or malformed.
        """
        logger.debug("Reading status from %s", self.path)
        try:
            text: str = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise StatusError(f"Status file not found: {self.path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise StatusError(f"Cannot read status file {self.path}: {exc}") from exc

        try:
            doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        except TomlkitParseError as exc:
            raise StatusError(f"Error parsing status file {self.path}: {exc}") from exc

        status: Status = parse_status(doc.unwrap(), source=str(self.path))
        logger.info("Loaded status with %d peer(s) from %s", len(status.peers), self.path)
        return status
