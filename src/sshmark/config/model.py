# topmark:header:start
#
#   project      : SSHMark
#   file         : model.py
#   file_relpath : src/sshmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for SSHMark.

This module defines:
    - `Config`: an immutable, runtime snapshot passed explicitly to the pipeline
      and the CLI commands.
    - `MutableConfig`: a mutable builder used while layering defaults, environment
      and CLI overrides; it is frozen into `Config` once all layers are applied.

Precedence (lowest to highest):
    1. Defaults (`MutableConfig.from_defaults`), derived from the home directory.
    2. Environment (`MutableConfig.apply_env`), e.g. ``SSHMARK_STATUS_FILE``.
    3. CLI overrides, assigned on the builder by the command before `freeze`.
"""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sshmark.config.logging import get_logger
from sshmark.constants import (
    DEFAULT_SSH_CONFIG_RELPATH,
    DEFAULT_STATUS_RELPATH,
    ENV_STATUS_FILE,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sshmark.config.logging import SshmarkLogger

logger: SshmarkLogger = get_logger(__name__)


class HomeDirectoryError(RuntimeError):
    """Raised when the user's home directory cannot be determined."""


def resolve_home() -> Path:
    """Return the user's home directory.

    Raises:
        HomeDirectoryError: If neither the environment nor the password database
            yields a home directory.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError(f"Cannot determine the home directory: {exc}") from exc


def default_command() -> tuple[str, ...]:
    """Return the command OpenSSH should run to query known hosts.

    Prefers the ``sshmark`` console script on ``PATH``, then the running program
    when it is an executable file. Otherwise (e.g. under ``python -m sshmark``,
    where ``argv[0]`` is ``__main__.py``) the current interpreter runs the module.

    Returns:
        tuple[str, ...]: Program followed by its leading arguments.
    """
    found: str | None = shutil.which("sshmark")
    if found:
        return (found,)
    program: Path = Path(sys.argv[0]).resolve()
    if program.is_file() and os.access(program, os.X_OK):
        return (str(program),)
    logger.debug("%s is not executable: running the module with %s", program, sys.executable)
    return (sys.executable, "-m", "sshmark")


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for SSHMark.

    Attributes:
        ssh_config_path (Path): File holding the managed block.
        status_path (Path): TOML status document the snippet is rendered from.
        command (tuple[str, ...]): Program (and leading arguments) the snippet runs as
            ``KnownHostsCommand``.
        export (bool): Emit the snippet to stdout instead of editing the file.
        apply_changes (bool): Write changes (True) or only report them (False).
        show_diff (bool): Produce a unified diff of the pending change.
        verbosity_level (int): 0 = terse, higher = more program output.
    """

    ssh_config_path: Path
    status_path: Path
    command: tuple[str, ...]
    export: bool = False
    apply_changes: bool = True
    show_diff: bool = False
    verbosity_level: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON-friendly representation (paths as strings)."""
        return {
            "ssh_config_path": str(self.ssh_config_path),
            "status_path": str(self.status_path),
            "command": list(self.command),
            "export": self.export,
            "apply_changes": self.apply_changes,
            "show_diff": self.show_diff,
            "verbosity_level": self.verbosity_level,
        }


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields mirror `Config`. Path fields are expanded (``~``) when frozen.
    """

    ssh_config_path: Path
    status_path: Path
    command: tuple[str, ...] = field(default_factory=default_command)
    export: bool = False
    apply_changes: bool = True
    show_diff: bool = False
    verbosity_level: int = 0

    @classmethod
    def from_defaults(cls, home: Path | None = None) -> MutableConfig:
        """Return a builder holding the built-in defaults.

        Args:
            home (Path | None): Home directory to derive default paths from;
                resolved with `resolve_home` when None.

        Returns:
            MutableConfig: A builder with default paths under ``home``.
        """
        base: Path = home if home is not None else resolve_home()
        return cls(
            ssh_config_path=base / DEFAULT_SSH_CONFIG_RELPATH,
            status_path=base / DEFAULT_STATUS_RELPATH,
        )

    def apply_env(self, environ: Mapping[str, str] | None = None) -> MutableConfig:
        """Apply environment overrides in place and return ``self``.

        Args:
            environ (Mapping[str, str] | None): Environment to read; defaults to ``os.environ``.

        Returns:
            MutableConfig: This builder, for chaining.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        status_file: str | None = env.get(ENV_STATUS_FILE)
        if status_file:
            logger.debug("%s overrides status path: %s", ENV_STATUS_FILE, status_file)
            self.status_path = Path(status_file)
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot of this builder."""
        return Config(
            ssh_config_path=self.ssh_config_path.expanduser(),
            status_path=self.status_path.expanduser(),
            command=self.command,
            export=self.export,
            apply_changes=self.apply_changes,
            show_diff=self.show_diff,
            verbosity_level=self.verbosity_level,
        )
