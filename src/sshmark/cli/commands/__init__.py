# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : src/sshmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SSHMark CLI commands."""
