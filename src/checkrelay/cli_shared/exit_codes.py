# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : exit_codes.py
#   file_relpath : src/checkrelay/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Exit codes for the CheckRelay CLI.

Values follow the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CheckRelay CLI.

    Attributes:
        SUCCESS: Successful execution, no error-level diagnostics.
        FAILURE: At least one error-level diagnostic was reported.
        USAGE_ERROR: Invalid flags or arguments. Mirrors ``EX_USAGE (64)``.
        DATA_ERROR: Diagnostics input could not be decoded. Mirrors ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors ``EX_NOINPUT (66)``.
        IO_ERROR: Input could not be read. Mirrors ``EX_IOERR (74)``.
        PERMISSION_DENIED: Input is not readable. Mirrors ``EX_NOPERM (77)``.
        CONFIG_ERROR: Malformed configuration file. Mirrors ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
