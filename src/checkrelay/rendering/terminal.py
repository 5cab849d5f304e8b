# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : terminal.py
#   file_relpath : src/checkrelay/rendering/terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Human-readable terminal rendering of normalized diagnostics."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import click

from checkrelay.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from checkrelay.diagnostic.model import NormalizedDiagnostic


def _level_label(level: DiagnosticLevel, name: str | None) -> str:
    name_in_label: str = f"({name})" if name else ""
    return level.badge(f" {level.label}{name_in_label} ")


def _position(d: NormalizedDiagnostic) -> str:
    if d.loc is None:
        return ""
    line: str = click.style(str(d.loc.start.line), fg="yellow")
    if d.loc.start.column is None:
        return line
    column: str = click.style(str(d.loc.start.column), fg="yellow")
    return f"{line}:{column}"


def diagnostic_to_terminal_log(d: NormalizedDiagnostic, name: str | None = None) -> str:
    """Render a diagnostic as a multi-line, colorized string for the console.

    Components, in order and joined with `os.linesep`:

    1. severity badge (with the optional checker display ``name``) and message,
    2. ``FILE`` badge, file id and ``line:column`` position,
    3. the code frame,
    4. the conclusion.

    Empty components are left out. A diagnostic without a level is shown as an
    error.

    Args:
        d: Diagnostic to render.
        name: Checker display name appended to the severity badge, e.g. ``"ESLint"``.

    Returns:
        The rendered text (ANSI-styled).
    """
    level: DiagnosticLevel = d.level if d.level is not None else DiagnosticLevel.ERROR
    file_label: str = DiagnosticLevel.MESSAGE.badge(" FILE ") + " "

    parts: list[str | None] = [
        f"{_level_label(level, name)} {d.message or ''}",
        f"{file_label}{d.id or ''}:{_position(d)}",
        d.code_frame,
        d.conclusion,
    ]
    return os.linesep.join(p for p in parts if p)
