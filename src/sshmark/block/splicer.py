# topmark:header:start
#
#   project      : SSHMark
#   file         : splicer.py
#   file_relpath : src/sshmark/block/splicer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block splicer: replace or append the managed block in a line list.

The splicer is a pure function. It never mutates its input and never performs
I/O; the caller owns the read-modify-write cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sshmark.block.locator import NOT_FOUND
from sshmark.block.markers import DEFAULT_MARKERS
from sshmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sshmark.block.markers import MarkerPair
    from sshmark.config.logging import SshmarkLogger

logger: SshmarkLogger = get_logger(__name__)


class InvalidSpanError(ValueError):
    """Raised when the splicer receives an index pair outside its contract.

    This signals a caller bug, not a problem with the file being edited.
    """

    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(f"invalid block span: start={start} end={end} length={length}")
        self.start = start
        self.end = end
        self.length = length


def _check_span(start: int, end: int, length: int) -> None:
    if start == NOT_FOUND and end == NOT_FOUND:
        return
    if start < 0 or end < 0 or start > end or end > length:
        raise InvalidSpanError(start, end, length)


def existing_block(lines: Sequence[str], start: int, end: int) -> str:
    """Return the managed content strictly between the marker lines, joined by newlines."""
    return "\n".join(lines[start + 1 : end])


def splice(
    lines: Sequence[str],
    start: int,
    end: int,
    new_block: str,
    markers: MarkerPair = DEFAULT_MARKERS,
) -> list[str]:
    """Return ``lines`` with the managed block set to ``new_block``.

    - ``start == end == -1``: the markers and the block are appended as three
      new elements (start marker, block, end marker).
    - Otherwise the lines between ``start`` and ``end`` (exclusive) are replaced by a
      single element holding ``new_block``, unless their newline-joined text already
      equals ``new_block``. The marker lines themselves are kept as they are.
    - ``start == end`` leaves the lines untouched.

    Args:
        lines (Sequence[str]): Lines of the file, without line terminators.
        start (int): Index of the start marker line, or ``-1``.
        end (int): Index of the end marker line, or ``-1``.
        new_block (str): Block content; may contain embedded newlines.
        markers (MarkerPair): Marker pair written when the block is appended.

    Returns:
        list[str]: A new list; equal to ``lines`` when nothing had to change.

    Raises:
        InvalidSpanError: If only one index is ``-1``, if ``start > end``, or if
            ``end`` lies past the end of ``lines``.
    """
    _check_span(start, end, len(lines))

    if start == NOT_FOUND:
        logger.debug("No managed block found: appending %d marker+block lines", 3)
        return [*lines, markers.start, new_block, markers.end]

    if start == end:
        logger.debug("Zero-width block span at line %d: nothing to splice", start)
        return list(lines)

    if existing_block(lines, start, end) == new_block:
        logger.debug("Managed block at lines %d..%d is up to date", start, end)
        return list(lines)

    logger.debug("Replacing managed block lines %d..%d", start + 1, end - 1)
    return [*lines[: start + 1], new_block, *lines[end:]]
