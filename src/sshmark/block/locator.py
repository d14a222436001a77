# topmark:header:start
#
#   project      : SSHMark
#   file         : locator.py
#   file_relpath : src/sshmark/block/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block locator: find the marker lines of the managed block."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sshmark.block.markers import DEFAULT_MARKERS
from sshmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sshmark.block.markers import MarkerPair
    from sshmark.config.logging import SshmarkLogger

logger: SshmarkLogger = get_logger(__name__)

NOT_FOUND: int = -1


def locate(lines: Sequence[str], markers: MarkerPair = DEFAULT_MARKERS) -> tuple[int, int]:
    """Return the indices of the start and end marker lines.

    The scan overwrites on every hit, so when a marker appears more than once the
    last occurrence wins for both markers. Callers must check the ordering of the
    returned pair themselves.

    Args:
        lines (Sequence[str]): Lines of the file, without line terminators.
        markers (MarkerPair): Marker pair to look for.

    Returns:
        tuple[int, int]: ``(start, end)``; each is ``-1`` when the marker is absent.
    """
    start: int = NOT_FOUND
    end: int = NOT_FOUND
    for i, line in enumerate(lines):
        if markers.is_start(line):
            start = i
        if markers.is_end(line):
            end = i
    logger.trace("locate(): start=%d end=%d (%d lines)", start, end, len(lines))
    return start, end
