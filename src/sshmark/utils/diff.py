# topmark:header:start
#
#   project      : SSHMark
#   file         : diff.py
#   file_relpath : src/sshmark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview rendering."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from sshmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def unified_diff(
    original: Sequence[str],
    updated: Sequence[str],
    path: str,
) -> list[str]:
    """Return a unified diff between two line lists.

    Lines are compared as they would be written, so a block element holding
    embedded newlines is expanded first.

    Args:
        original: Lines before the change (no terminators).
        updated: Lines after the change (no terminators).
        path: File name used in the ``---``/``+++`` headers.

    Returns:
        The diff lines without terminators; empty when both sides are equal.
    """
    before: list[str] = "\n".join(original).split("\n") if original else []
    after: list[str] = "\n".join(updated).split("\n") if updated else []
    diff: list[str] = list(
        difflib.unified_diff(
            before,
            after,
            fromfile=f"{path} (current)",
            tofile=f"{path} (updated)",
            lineterm="",
        )
    )
    logger.trace("unified_diff(): %d line(s)", len(diff))
    return diff


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list of lines **or** a single
            multiline string.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return "".join(f"{process_line(line)}\n" for line in lines)
