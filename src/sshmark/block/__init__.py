# topmark:header:start
#
#   project      : SSHMark
#   file         : __init__.py
#   file_relpath : src/sshmark/block/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Managed block editing: locate the marker lines and splice in a new block.

Public surface:
    - `MarkerPair`, `DEFAULT_MARKERS`
    - `locate` (block locator)
    - `splice`, `InvalidSpanError` (block splicer)
    - `update_lines`, `BlockEdit`, `BlockStatus`, `MarkerOrderError`
"""

from __future__ import annotations

from sshmark.block.editor import BlockEdit, BlockStatus, MarkerOrderError, update_lines
from sshmark.block.locator import NOT_FOUND, locate
from sshmark.block.markers import DEFAULT_MARKERS, MarkerPair
from sshmark.block.splicer import InvalidSpanError, splice

__all__ = [
    "DEFAULT_MARKERS",
    "NOT_FOUND",
    "BlockEdit",
    "BlockStatus",
    "InvalidSpanError",
    "MarkerOrderError",
    "MarkerPair",
    "locate",
    "splice",
    "update_lines",
]
