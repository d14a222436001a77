# topmark:header:start
#
#   project      : SSHMark
#   file         : model.py
#   file_relpath : src/sshmark/status/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable status shapes."""

from __future__ import annotations

from dataclasses import dataclass, field


def strip_root_dot(name: str) -> str:
    """Return a DNS name without its trailing root dot (``host.ts.net.`` -> ``host.ts.net``)."""
    return name[:-1] if name.endswith(".") else name


@dataclass(frozen=True, slots=True)
class SelfStatus:
    """This node."""

    name: str = ""
    dns_name: str = ""

    def is_peer(self, peer: PeerStatus) -> bool:
        """Return True if ``peer`` describes this node.

        DNS names are compared when both sides have one, short names otherwise.
        """
        if self.dns_name and peer.dns_name:
            return strip_root_dot(self.dns_name).lower() == strip_root_dot(peer.dns_name).lower()
        return bool(self.name) and self.name.lower() == peer.name.lower()


@dataclass(frozen=True, slots=True)
class PeerStatus:
    """A reachable peer and the SSH host keys it advertises.

    Attributes:
        name (str): Short host name.
        dns_name (str): Fully qualified DNS name, possibly with a trailing dot.
        addresses (tuple[str, ...]): IP addresses of the peer.
        host_keys (tuple[str, ...]): Public host keys as ``"<type> <base64>"``.
    """

    name: str
    dns_name: str = ""
    addresses: tuple[str, ...] = ()
    host_keys: tuple[str, ...] = ()

    def host_names(self) -> list[str]:
        """Return the names OpenSSH may use for this peer, de-duplicated in order."""
        names: list[str] = []
        for candidate in (strip_root_dot(self.dns_name), self.name, *self.addresses):
            if candidate and candidate not in names:
                names.append(candidate)
        return names

    def matches(self, host: str) -> bool:
        """Return True if ``host`` names this peer (case-insensitive, trailing dot ignored)."""
        wanted: str = strip_root_dot(host).lower()
        return any(wanted == name.lower() for name in self.host_names())


@dataclass(frozen=True, slots=True)
class Status:
    """Snapshot of this node, its network DNS suffix and its peers."""

    self_status: SelfStatus = field(default_factory=SelfStatus)
    magic_dns_suffix: str = ""
    peers: tuple[PeerStatus, ...] = ()

    def remote_peers(self) -> list[PeerStatus]:
        """Return the peers other than this node, in order."""
        return [peer for peer in self.peers if not self.self_status.is_peer(peer)]
