# topmark:header:start
#
#   project      : SSHMark
#   file         : test_splicer.py
#   file_relpath : tests/block/test_splicer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the block splicer."""

from __future__ import annotations

import pytest

from sshmark.block import InvalidSpanError, MarkerPair, locate, splice

X: MarkerPair = MarkerPair.for_name("X")


def _apply(lines: list[str], block: str) -> list[str]:
    start, end = locate(lines, X)
    return splice(lines, start, end, block, X)


def test_replace_multi_line_region() -> None:
    lines = ["a", "## BEGIN X ##", "old1", "old2", "## END X ##", "b"]
    assert _apply(lines, "new1\nnew2") == ["a", "## BEGIN X ##", "new1\nnew2", "## END X ##", "b"]


def test_append_when_absent() -> None:
    assert _apply(["a", "b"], "new1") == ["a", "b", "## BEGIN X ##", "new1", "## END X ##"]


def test_append_to_empty_file() -> None:
    assert _apply([], "block") == ["## BEGIN X ##", "block", "## END X ##"]


def test_no_change_returns_equal_list() -> None:
    lines = ["## BEGIN X ##", "same", "## END X ##"]
    result = _apply(lines, "same")
    assert result == lines


def test_no_change_multi_line_block() -> None:
    """Existing lines are compared joined with newlines against the block."""
    lines = ["head", "## BEGIN X ##", "l1", "l2", "## END X ##", "tail"]
    assert _apply(lines, "l1\nl2") == lines


def test_result_is_a_new_list() -> None:
    lines = ["## BEGIN X ##", "same", "## END X ##"]
    result = _apply(lines, "same")
    assert result is not lines
    result.append("extra")
    assert lines == ["## BEGIN X ##", "same", "## END X ##"]


def test_input_is_not_mutated_on_replace() -> None:
    lines = ["## BEGIN X ##", "old", "## END X ##"]
    snapshot = list(lines)
    _apply(lines, "new")
    assert lines == snapshot


def test_empty_region_is_filled() -> None:
    lines = ["a", "## BEGIN X ##", "## END X ##", "b"]
    assert _apply(lines, "new") == ["a", "## BEGIN X ##", "new", "## END X ##", "b"]


def test_empty_region_matches_empty_block() -> None:
    lines = ["## BEGIN X ##", "## END X ##"]
    assert _apply(lines, "") == lines


def test_replacement_changes_line_count() -> None:
    lines = ["p", "## BEGIN X ##", "1", "2", "3", "## END X ##", "q"]
    result = _apply(lines, "only")
    assert len(result) == len(lines) - 2
    assert result[0] == "p"
    assert result[-1] == "q"


def test_marker_lines_are_kept_verbatim() -> None:
    lines = ["  ## BEGIN X ## keep me", "old", "# ## END X ## and me"]
    assert _apply(lines, "new") == ["  ## BEGIN X ## keep me", "new", "# ## END X ## and me"]


def test_zero_width_span_is_a_no_op() -> None:
    lines = ["## BEGIN X ## ## END X ##", "a"]
    assert splice(lines, 0, 0, "new", X) == lines


def test_end_may_equal_length() -> None:
    lines = ["## BEGIN X ##", "old"]
    assert splice(lines, 0, 2, "new", X) == ["## BEGIN X ##", "new"]


@pytest.mark.parametrize(
    "start, end",
    [
        (-1, 2),
        (0, -1),
        (-2, -2),
        (2, 1),
        (0, 4),
    ],
)
def test_invalid_span_raises(start: int, end: int) -> None:
    lines = ["## BEGIN X ##", "a", "## END X ##"]
    with pytest.raises(InvalidSpanError) as excinfo:
        splice(lines, start, end, "new", X)
    assert excinfo.value.start == start
    assert excinfo.value.end == end
    assert excinfo.value.length == 3


def test_invalid_span_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="invalid block span"):
        splice(["a"], 1, 0, "new", X)
