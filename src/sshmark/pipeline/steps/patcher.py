# topmark:header:start
#
#   project      : SSHMark
#   file         : patcher.py
#   file_relpath : src/sshmark/pipeline/steps/patcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Patcher step: unified diff of the pending change, when requested."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sshmark.config.logging import get_logger
from sshmark.utils.diff import unified_diff

if TYPE_CHECKING:
    from sshmark.config.logging import SshmarkLogger
    from sshmark.pipeline.context import ProcessingContext

logger: SshmarkLogger = get_logger(__name__)


def patch(ctx: ProcessingContext) -> ProcessingContext:
    """Fill ``ctx.diff`` when ``config.show_diff`` is set and the file would change."""
    if not ctx.config.show_diff or not ctx.would_change:
        return ctx
    assert ctx.original_lines is not None and ctx.updated_lines is not None
    ctx.diff = unified_diff(ctx.original_lines, ctx.updated_lines, str(ctx.path))
    logger.debug("Generated %d diff line(s) for %s", len(ctx.diff), ctx.path)
    return ctx
