# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : console.py
#   file_relpath : src/checkrelay/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Click-backed console for user-facing program output.

Diagnostics, frames and summaries arrive already ANSI-styled (frames are
always rendered in color). `click.echo` strips the styling again when color is
disabled, so one rendering serves both modes and nothing here re-renders text.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

from checkrelay.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing reports to stdout and input problems to stderr.

    Args:
        enable_color (bool): Keep ANSI styling in the output.
        out (TextIO | None): Report stream; ``sys.stdout`` at construction time by default.
        err (TextIO | None): Error stream; ``sys.stderr`` at construction time by default.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write pre-rendered report text to stdout, unstyled when color is off."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an input or configuration problem to stderr in red."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(
        self,
        text: str,
        *,
        bold: bool = False,
        dim: bool = False,
        underline: bool = False,
    ) -> str:
        """Return ``text`` styled as a heading or annotation.

        Only the emphasis used by CheckRelay's own headings (``version -v``)
        and annotations (``config dump -v``) is supported.

        Args:
            text (str): Text to style.
            bold (bool): Bold text.
            dim (bool): Dimmed text.
            underline (bool): Underlined text.

        Returns:
            str: The styled text, or ``text`` unchanged when color is disabled.
        """
        if not self.enable_color:
            return text
        # False would emit reset codes; None leaves the attribute alone.
        return click.style(text, bold=bold or None, dim=dim or None, underline=underline or None)
