# topmark:header:start
#
#   project      : SSHMark
#   file         : markers.py
#   file_relpath : src/sshmark/block/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker pair delimiting the managed block.

A managed block looks like this inside an otherwise arbitrary text file::

    <arbitrary preceding lines>
    ## BEGIN SSHMark ##
    <managed block lines>
    ## END SSHMark ##
    <arbitrary following lines>

Matching is substring-based: a line *contains* a marker, it does not have to be
equal to it.
"""

from __future__ import annotations

from dataclasses import dataclass

from sshmark.constants import SSHMARK_BLOCK_NAME


@dataclass(frozen=True, slots=True)
class MarkerPair:
    """Start and end sentinel strings of a managed block.

    Attributes:
        start (str): Text of the start marker line.
        end (str): Text of the end marker line.
    """

    start: str
    end: str

    @classmethod
    def for_name(cls, name: str) -> MarkerPair:
        """Return the ``## BEGIN <name> ##`` / ``## END <name> ##`` pair.

        Args:
            name (str): Marker name embedded in both sentinel lines.

        Returns:
            MarkerPair: The marker pair for ``name``.
        """
        return cls(start=f"## BEGIN {name} ##", end=f"## END {name} ##")

    def is_start(self, line: str) -> bool:
        """Return True if ``line`` contains the start marker."""
        return self.start in line

    def is_end(self, line: str) -> bool:
        """Return True if ``line`` contains the end marker."""
        return self.end in line


DEFAULT_MARKERS: MarkerPair = MarkerPair.for_name(SSHMARK_BLOCK_NAME)
