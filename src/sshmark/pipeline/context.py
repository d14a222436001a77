# topmark:header:start
#
#   project      : SSHMark
#   file         : context.py
#   file_relpath : src/sshmark/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file processing context shared by the pipeline steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sshmark.block.editor import BlockStatus
from sshmark.pipeline.status import ReadStatus, WriteStatus

if TYPE_CHECKING:
    from pathlib import Path

    from sshmark.config.model import Config


@dataclass
class ProcessingContext:
    """Mutable state carried through the pipeline for one file.

    Attributes:
        path (Path): File holding the managed block.
        config (Config): Runtime configuration.
        block (str): Freshly generated block content.
        original_lines (list[str] | None): Lines as read (reader step).
        updated_lines (list[str] | None): Lines after the splice (updater step).
        span (tuple[int, int] | None): Marker indices used by the splice.
        diff (list[str]): Unified diff of the change (patcher step).
        bytes_written (int): Bytes written by the writer step.
        read_status (ReadStatus): Reader outcome.
        block_status (BlockStatus): Updater outcome.
        write_status (WriteStatus): Writer outcome.
    """

    path: Path
    config: Config
    block: str
    original_lines: list[str] | None = None
    updated_lines: list[str] | None = None
    span: tuple[int, int] | None = None
    diff: list[str] = field(default_factory=list)
    bytes_written: int = 0
    read_status: ReadStatus = ReadStatus.PENDING
    block_status: BlockStatus = BlockStatus.PENDING
    write_status: WriteStatus = WriteStatus.PENDING

    @property
    def would_change(self) -> bool:
        """Whether the updated lines differ from the file on disk."""
        return self.block_status in (BlockStatus.INSERTED, BlockStatus.REPLACED)

    def to_dict(self) -> dict[str, Any]:
        """Return a compact, log-friendly summary (no line buffers)."""
        return {
            "path": str(self.path),
            "read": self.read_status.value,
            "block": self.block_status.value,
            "write": self.write_status.value,
            "span": self.span,
            "original_lines": None if self.original_lines is None else len(self.original_lines),
            "updated_lines": None if self.updated_lines is None else len(self.updated_lines),
            "diff_lines": len(self.diff),
        }
