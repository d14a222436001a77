# topmark:header:start
#
#   project      : SSHMark
#   file         : reader.py
#   file_relpath : src/sshmark/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reader step: load the target file as a line list.

When changes are applied, a missing file is created empty first, the way the
snippet is expected to land in a fresh ``~/.ssh/config``. In preview mode nothing
is created and a missing file reads as empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sshmark.config.logging import get_logger
from sshmark.pipeline.status import ReadStatus
from sshmark.utils.file import ensure_file, read_lines

if TYPE_CHECKING:
    from sshmark.config.logging import SshmarkLogger
    from sshmark.pipeline.context import ProcessingContext

logger: SshmarkLogger = get_logger(__name__)


def read(ctx: ProcessingContext) -> ProcessingContext:
    """Fill ``ctx.original_lines``.

    Raises:
        OSError: If the file cannot be created or read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if ctx.config.apply_changes:
        created: bool = ensure_file(ctx.path)
        ctx.read_status = ReadStatus.CREATED if created else ReadStatus.OK
    elif not ctx.path.exists():
        logger.info("%s does not exist: treating it as empty", ctx.path)
        ctx.original_lines = []
        ctx.read_status = ReadStatus.MISSING
        return ctx
    else:
        ctx.read_status = ReadStatus.OK

    ctx.original_lines = read_lines(ctx.path)
    return ctx
