# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : src/sshmark/status/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node and peer status consumed by the snippet renderers."""

from __future__ import annotations

from sshmark.status.model import PeerStatus, SelfStatus, Status
from sshmark.status.provider import StatusError, StatusProvider, TomlStatusProvider

__all__ = [
    "PeerStatus",
    "SelfStatus",
    "Status",
    "StatusError",
    "StatusProvider",
    "TomlStatusProvider",
]
