# topmark:header:start
#
#   project      : SSHMark
#   file         : test_block_property.py
#   file_relpath : tests/block/test_block_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for the managed block editor.

Generates arbitrary surrounding content and blocks, and asserts:
1) updating twice with the same block is a fixed point, and
2) content outside the managed region is preserved exactly.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sshmark.block import BlockStatus, MarkerPair, locate, splice, update_lines

X: MarkerPair = MarkerPair.for_name("X")

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

# Plain lines never contain a marker or a newline.
s_line: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n\r#"),
    max_size=20,
)
s_lines: st.SearchStrategy[list[str]] = st.lists(s_line, max_size=8)
s_block: st.SearchStrategy[str] = st.lists(s_line, min_size=1, max_size=5).map("\n".join)


def _reread(lines: list[str]) -> list[str]:
    """Return what reading the written file back would yield."""
    return "\n".join(lines).split("\n") if lines else []


@settings(max_examples=200, deadline=None)
@given(before=s_lines, region=s_lines, after=s_lines, block=s_block)
def test_update_is_idempotent(
    before: list[str], region: list[str], after: list[str], block: str
) -> None:
    lines = [*before, X.start, *region, X.end, *after]

    first = update_lines(lines, block, X)
    second = update_lines(first.lines, block, X)

    assert second.status == BlockStatus.UNCHANGED
    assert second.lines == first.lines

    third = update_lines(_reread(first.lines), block, X)
    assert third.status == BlockStatus.UNCHANGED


@settings(max_examples=200, deadline=None)
@given(before=s_lines, region=s_lines, after=s_lines, block=s_block)
def test_surroundings_are_preserved(
    before: list[str], region: list[str], after: list[str], block: str
) -> None:
    lines = [*before, X.start, *region, X.end, *after]
    start, end = locate(lines, X)

    result = splice(lines, start, end, block, X)

    assert result[: len(before)] == before
    assert result[len(before)] == X.start
    assert result[len(result) - len(after) :] == after
    assert result[len(result) - len(after) - 1] == X.end


@settings(max_examples=100, deadline=None)
@given(lines=s_lines, block=s_block)
def test_append_adds_exactly_three_lines(lines: list[str], block: str) -> None:
    result = splice(lines, -1, -1, block, X)
    assert result == [*lines, X.start, block, X.end]
