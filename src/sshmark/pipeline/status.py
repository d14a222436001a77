# topmark:header:start
#
#   project      : SSHMark
#   file         : status.py
#   file_relpath : src/sshmark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for the pipeline axes not covered by `BlockStatus`."""

from __future__ import annotations

from yachalk import chalk

from sshmark.rendering.colored_enum import ColoredStrEnum


class ReadStatus(ColoredStrEnum):
    """Outcome of the reader step."""

    PENDING = ("read pending", chalk.gray)
    OK = ("ok", chalk.green)
    CREATED = ("created empty file", chalk.green_bright)
    MISSING = ("missing, treated as empty", chalk.yellow)


class WriteStatus(ColoredStrEnum):
    """Outcome of the writer step."""

    PENDING = ("write pending", chalk.gray)
    WRITTEN = ("changes written to file", chalk.green)
    PREVIEWED = ("changes previewed, not written", chalk.blue)
    SKIPPED = ("write was skipped", chalk.yellow)
