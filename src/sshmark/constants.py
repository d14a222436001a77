# topmark:header:start
#
#   project      : SSHMark
#   file         : constants.py
#   file_relpath : src/sshmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SSHMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SSHMARK_VERSION: str = get_version("sshmark")

SSHMARK_BLOCK_NAME: str = "SSHMark"

# Relative to the user's home directory:
DEFAULT_SSH_CONFIG_RELPATH: str = ".ssh/config"
DEFAULT_STATUS_RELPATH: str = ".config/sshmark/status.toml"

ENV_LOG_LEVEL: str = "SSHMARK_LOG_LEVEL"
ENV_STATUS_FILE: str = "SSHMARK_STATUS_FILE"

SSH_CONFIG_FILE_MODE: int = 0o644

SNIPPET_BANNER: str = "# SSHMark ssh config"

