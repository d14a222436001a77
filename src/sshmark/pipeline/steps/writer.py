# topmark:header:start
#
#   project      : SSHMark
#   file         : writer.py
#   file_relpath : src/sshmark/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step for committing updated content to a sink.

Sinks
-----
- FileSystemSink: rewrites the file in place (not atomic).
- NullSink: no-op (check / dry-run).

Unchanged content is never rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from sshmark.config.logging import get_logger
from sshmark.pipeline.status import WriteStatus
from sshmark.utils.file import write_lines

if TYPE_CHECKING:
    from sshmark.config.logging import SshmarkLogger
    from sshmark.pipeline.context import ProcessingContext

logger: SshmarkLogger = get_logger(__name__)


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for write sinks used by the writer step."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Write ``ctx.updated_lines`` to the target sink."""
        ...


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Report the pending change without writing it."""
        return WriteResult(status=WriteStatus.PREVIEWED)


class FileSystemSink:
    """Filesystem sink that writes in-place to ``ctx.path``."""

    def write(self, *, ctx: ProcessingContext) -> WriteResult:
        """Overwrite ``ctx.path`` with the updated lines.

        Raises:
            OSError: If the file cannot be written.
        """
        assert ctx.updated_lines is not None
        written: int = write_lines(ctx.path, ctx.updated_lines)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=written)


def _select_sink(ctx: ProcessingContext) -> WriteSink:
    if not ctx.config.apply_changes:
        logger.debug("Selected NULL sink (config.apply_changes is False)")
        return NullSink()
    logger.debug("Selected file system sink")
    return FileSystemSink()


def write(ctx: ProcessingContext) -> ProcessingContext:
    """Writer step: commit updates to the selected sink.

    Args:
        ctx (ProcessingContext): The processing context with update intent.

    Returns:
        ProcessingContext: The same context, with ``write_status`` finalized.
    """
    if not ctx.would_change or ctx.updated_lines is None:
        logger.debug("%s unchanged - nothing to write", ctx.path)
        ctx.write_status = WriteStatus.SKIPPED
        return ctx

    result: WriteResult = _select_sink(ctx).write(ctx=ctx)
    ctx.write_status = result.status
    ctx.bytes_written = result.bytes_written
    return ctx
