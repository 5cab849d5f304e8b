# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : console_api.py
#   file_relpath : src/checkrelay/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by reporters and CLI commands to
emit user-facing output, separate from internal logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by reporters and CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(
        self,
        text: str,
        *,
        bold: bool = False,
        dim: bool = False,
        underline: bool = False,
    ) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
