# topmark:header:start
#
#   project      : SSHMark
#   file         : runner.py
#   file_relpath : src/sshmark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the pipeline steps for a single file."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from sshmark.config.logging import get_logger
from sshmark.pipeline.context import ProcessingContext
from sshmark.pipeline.steps import patcher, reader, updater, writer

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from sshmark.config.logging import SshmarkLogger
    from sshmark.config.model import Config

logger: SshmarkLogger = get_logger(__name__)

Step = Callable[[ProcessingContext], ProcessingContext]

DEFAULT_STEPS: tuple[Step, ...] = (
    reader.read,
    updater.update,
    patcher.patch,
    writer.write,
)


def run(ctx: ProcessingContext, steps: Sequence[Step] = DEFAULT_STEPS) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[Step]): Ordered steps; each takes and returns a context.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    for step in steps:
        logger.trace("Running step %s on %s", step.__module__, ctx.path)
        ctx = step(ctx)
    logger.debug("Pipeline finished: %s", ctx.to_dict())
    return ctx


def update_file(path: Path, block: str, config: Config) -> ProcessingContext:
    """Update the managed block of ``path`` with ``block`` following ``config``.

    Raises:
        OSError: On read or write failures.
        UnicodeDecodeError: If the file is not valid UTF-8.
        MarkerOrderError: If the markers are out of order.
    """
    return run(ProcessingContext(path=path, config=config, block=block))
