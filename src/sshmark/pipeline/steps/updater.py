# topmark:header:start
#
#   project      : SSHMark
#   file         : updater.py
#   file_relpath : src/sshmark/pipeline/steps/updater.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Updater step: splice the generated block into the line list."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sshmark.block.editor import update_lines
from sshmark.config.logging import get_logger

if TYPE_CHECKING:
    from sshmark.block.editor import BlockEdit
    from sshmark.config.logging import SshmarkLogger
    from sshmark.pipeline.context import ProcessingContext

logger: SshmarkLogger = get_logger(__name__)


def update(ctx: ProcessingContext) -> ProcessingContext:
    """Compute ``ctx.updated_lines`` and ``ctx.block_status``.

    Raises:
        MarkerOrderError: If the start marker is located after the end marker.
    """
    assert ctx.original_lines is not None, "reader step must run before the updater"
    edit: BlockEdit = update_lines(ctx.original_lines, ctx.block)
    ctx.updated_lines = edit.lines
    ctx.block_status = edit.status
    ctx.span = edit.span
    logger.info("%s: %s", ctx.path, edit.status.value)
    return ctx
