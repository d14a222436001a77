# topmark:header:start
#
#   project      : SSHMark
#   file         : editor.py
#   file_relpath : src/sshmark/block/editor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate-and-splice entry point for the managed block.

`update_lines` glues the locator and the splicer together and classifies the
outcome. It also turns the locator's raw index pair into a span the splicer
accepts:

- one marker present without the other counts as *no managed block yet*;
- a start marker located after the end marker raises `MarkerOrderError`
  rather than producing a reversed span.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yachalk import chalk

from sshmark.block.locator import NOT_FOUND, locate
from sshmark.block.markers import DEFAULT_MARKERS
from sshmark.block.splicer import splice
from sshmark.config.logging import get_logger
from sshmark.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sshmark.block.markers import MarkerPair
    from sshmark.config.logging import SshmarkLogger

logger: SshmarkLogger = get_logger(__name__)


class BlockStatus(ColoredStrEnum):
    """Outcome of updating the managed block in a line list."""

    PENDING = ("block pending", chalk.gray)
    INSERTED = ("block inserted", chalk.green_bright)
    REPLACED = ("block replaced", chalk.green)
    UNCHANGED = ("block up to date", chalk.blue)


class MarkerOrderError(ValueError):
    """Raised when the located start marker comes after the located end marker."""

    def __init__(self, start: int, end: int, markers: MarkerPair) -> None:
        super().__init__(
            f"'{markers.start}' (line {start + 1}) appears after "
            f"'{markers.end}' (line {end + 1}); fix the markers by hand"
        )
        self.start = start
        self.end = end


@dataclass(frozen=True, slots=True)
class BlockEdit:
    """Result of `update_lines`.

    Attributes:
        lines (list[str]): The updated line list.
        status (BlockStatus): What happened to the managed block.
        span (tuple[int, int]): Marker indices used for the splice; ``(-1, -1)``
            when the block was appended.
    """

    lines: list[str]
    status: BlockStatus
    span: tuple[int, int]


def update_lines(
    lines: Sequence[str],
    new_block: str,
    markers: MarkerPair = DEFAULT_MARKERS,
) -> BlockEdit:
    """Set the managed block of ``lines`` to ``new_block``.

    Args:
        lines (Sequence[str]): Lines of the file, without line terminators.
        new_block (str): Block content; may contain embedded newlines.
        markers (MarkerPair): Marker pair delimiting the block.

    Returns:
        BlockEdit: The updated lines and the outcome.

    Raises:
        MarkerOrderError: If the start marker is located after the end marker.
    """
    start, end = locate(lines, markers)

    if start == NOT_FOUND or end == NOT_FOUND:
        if start != end:
            logger.warning(
                "Only one of the block markers was found (start=%d, end=%d): appending a new block",
                start,
                end,
            )
        updated: list[str] = splice(lines, NOT_FOUND, NOT_FOUND, new_block, markers)
        return BlockEdit(lines=updated, status=BlockStatus.INSERTED, span=(NOT_FOUND, NOT_FOUND))

    if start > end:
        raise MarkerOrderError(start, end, markers)

    if start == end:
        logger.warning("Start and end markers share line %d: leaving the file as is", start + 1)

    updated = splice(lines, start, end, new_block, markers)
    status: BlockStatus = BlockStatus.UNCHANGED if updated == list(lines) else BlockStatus.REPLACED
    logger.debug("update_lines(): %s (span %d..%d)", status.value, start, end)
    return BlockEdit(lines=updated, status=status, span=(start, end))
