# topmark:header:start
#
#   project      : SSHMark
#   file         : file.py
#   file_relpath : src/sshmark/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented text file helpers.

Files are read as UTF-8 and split into lines without terminators. Writing always
emits one ``"\\n"`` per line, including the last one, whatever the original
newline convention was.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from sshmark.config.logging import get_logger
from sshmark.constants import SSH_CONFIG_FILE_MODE

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from sshmark.config.logging import SshmarkLogger

logger: SshmarkLogger = get_logger(__name__)


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` on ``"\n"``, dropping a trailing ``"\r"`` from each line.

    A final newline does not produce an empty last element; ``""`` yields ``[]``.
    """
    if not text:
        return []
    parts: list[str] = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def render_text(lines: Iterable[str]) -> str:
    """Join ``lines`` with a newline after every line."""
    return "".join(f"{line}\n" for line in lines)


def ensure_file(path: Path, mode: int = SSH_CONFIG_FILE_MODE) -> bool:
    """Create ``path`` as an empty file if it does not exist yet.

    The parent directory is not created.

    Returns:
        bool: True if the file was created.

    Raises:
        OSError: If the file cannot be created (e.g. missing parent directory).
    """
    try:
        fd: int = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    except FileExistsError:
        return False
    os.close(fd)
    logger.info("Created empty file %s", path)
    return True


def read_lines(path: Path) -> list[str]:
    """Read ``path`` as UTF-8 and return its lines without terminators.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    # newline="" keeps "\r\n" intact so that split_lines() sees it
    with path.open("r", encoding="utf-8", newline="") as fh:
        text: str = fh.read()
    lines: list[str] = split_lines(text)
    logger.debug("Read %d line(s) from %s", len(lines), path)
    return lines


def write_lines(path: Path, lines: Iterable[str]) -> int:
    """Overwrite ``path`` with ``lines``, one ``"\\n"`` after each.

    Returns:
        int: Number of UTF-8 bytes written.
    """
    text: str = render_text(lines)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    bytes_written: int = len(text.encode("utf-8"))
    logger.debug("Wrote %d bytes to %s", bytes_written, path)
    return bytes_written
