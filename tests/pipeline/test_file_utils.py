# topmark:header:start
#
#   project      : SSHMark
#   file         : test_file_utils.py
#   file_relpath : tests/pipeline/test_file_utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the line-oriented file helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sshmark.utils.file import ensure_file, read_lines, render_text, split_lines, write_lines

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("\n", [""]),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\nb", ["a", "b"]),
        ("a\n\nb\n", ["a", "", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\r\nb", ["a", "b"]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


def test_render_text_terminates_every_line() -> None:
    assert render_text([]) == ""
    assert render_text(["a", "b"]) == "a\nb\n"
    assert render_text(["x", "l1\nl2"]) == "x\nl1\nl2\n"


def test_read_lines_normalizes_crlf(tmp_path: Path) -> None:
    f: Path = tmp_path / "config"
    f.write_bytes(b"Host a\r\n  User b\r\n")
    assert read_lines(f) == ["Host a", "  User b"]


def test_write_lines_uses_lf(tmp_path: Path) -> None:
    f: Path = tmp_path / "config"
    written = write_lines(f, ["a", "b"])
    assert f.read_bytes() == b"a\nb\n"
    assert written == 4


def test_read_lines_rejects_invalid_utf8(tmp_path: Path) -> None:
    f: Path = tmp_path / "config"
    f.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(UnicodeDecodeError):
        read_lines(f)


def test_ensure_file_creates_once(tmp_path: Path) -> None:
    f: Path = tmp_path / "config"
    assert ensure_file(f) is True
    assert f.read_text() == ""
    f.write_text("keep\n")
    assert ensure_file(f) is False
    assert f.read_text() == "keep\n"


def test_ensure_file_does_not_create_parent(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ensure_file(tmp_path / "missing" / "config")
