# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : errors.py
#   file_relpath : src/checkrelay/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Exceptions for the CheckRelay CLI.

Raise these in commands to exit with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's own error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from checkrelay.cli_shared.exit_codes import ExitCode


class CheckRelayError(click.ClickException):
    """Base class for all CheckRelay CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class CheckRelayUsageError(CheckRelayError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CheckRelayConfigError(CheckRelayError):
    """Error for missing or malformed configuration files."""

    exit_code = ExitCode.CONFIG_ERROR


class CheckRelayFileNotFoundError(CheckRelayError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CheckRelayDataError(CheckRelayError):
    """Error when diagnostics input cannot be decoded."""

    exit_code = ExitCode.DATA_ERROR
