# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : src/sshmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SSHMark package.

SSHMark keeps a generated ``ssh_config`` snippet inside a managed block of the
user's ``~/.ssh/config``. The block is delimited by two marker lines and is
regenerated in place on every run, leaving the rest of the file untouched.
"""

from __future__ import annotations
