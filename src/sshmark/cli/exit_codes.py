# topmark:header:start
#
#   project      : SSHMark
#   file         : exit_codes.py
#   file_relpath : src/sshmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SSHMark CLI.

SSHMark aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`WOULD_CHANGE=2`, used by ``sshconfig --check`` when the managed block is out of
date. Click's own usage errors also exit with 2; tests must assert
``result.exception is None`` to tell them apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SSHMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Check mode: the file would change if written.
        USAGE_ERROR: Invalid flag combination. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Undecodable file or malformed managed block. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path or its directory does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: Internal contract violation. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid status document or unresolvable home
            directory. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
