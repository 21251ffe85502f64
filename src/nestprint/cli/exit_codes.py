# topmark:header:start
#
#   project      : Nestprint
#   file         : exit_codes.py
#   file_relpath : src/nestprint/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Nestprint CLI, aligned with BSD `sysexits` where practical."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Nestprint CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; also used when ``classify --expect`` does not match.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input could not be parsed as the requested format. Mirrors
            BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_VALUE: The value (or a nested element) cannot be rendered.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading input. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_VALUE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
