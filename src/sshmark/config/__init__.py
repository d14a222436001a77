# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : src/sshmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SSHMark configuration: runtime `Config` snapshot, its builder, and logging setup."""

from __future__ import annotations

from sshmark.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
