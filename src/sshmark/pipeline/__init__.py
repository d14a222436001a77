# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : src/sshmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing pipeline that updates the managed block of one file.

Steps run in order over a shared `ProcessingContext`:
reader → updater → patcher → writer.
"""

from __future__ import annotations
