"""Exit codes for CLI error paths.

Every ``SystemExit`` raised by a librope command carries one of these values,
so shell scripts and CI jobs can tell a bad argument from a broken
configuration or a stale generated header.

Signal codes (130, 141, 143) are listed for reference only; librope never
raises them itself, ``lib_cli_exit_tools`` translates signals.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes used by the ``librope`` command.

    Values follow errno and sysexits.h where one applies:

    * 0-1: success / generic failure
    * 2: usage error, raised by click itself
    * 13, 22: EACCES, EINVAL
    * 3: export header differs from the generated one (``--check``)
    * 78: EX_CONFIG
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
        >>> ExitCode.HEADER_DRIFT
        <ExitCode.HEADER_DRIFT: 3>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    HEADER_DRIFT = 3
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
