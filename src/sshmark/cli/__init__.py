# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : src/sshmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for SSHMark."""

from __future__ import annotations
