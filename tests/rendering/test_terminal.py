# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : test_terminal.py
#   file_relpath : tests/rendering/test_terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Tests for terminal rendering of single diagnostics."""

from __future__ import annotations

import os

import click

from checkrelay.diagnostic import DiagnosticLevel, strip_ansi
from checkrelay.rendering import diagnostic_to_terminal_log
from tests.conftest import make_diagnostic


def test_two_segments_without_frame_or_conclusion() -> None:
    """Badge + message, then file + position."""
    out = diagnostic_to_terminal_log(make_diagnostic(), "ESLint")
    assert strip_ansi(out).split(os.linesep) == [
        " ERROR(ESLint)  Unexpected token",
        " FILE  src/main.ts:2:14",
    ]


def test_all_segments_in_order() -> None:
    """Frame and conclusion follow the file line."""
    d = make_diagnostic(code_frame="  > 2 | x", conclusion="1 problem")
    out = strip_ansi(diagnostic_to_terminal_log(d))
    assert out.split(os.linesep) == [
        " ERROR  Unexpected token",
        " FILE  src/main.ts:2:14",
        "  > 2 | x",
        "1 problem",
    ]


def test_badge_uses_level_colors() -> None:
    """The severity badge is styled with the level's background."""
    out = diagnostic_to_terminal_log(make_diagnostic(level=DiagnosticLevel.WARNING), "tsc")
    assert out.startswith(DiagnosticLevel.WARNING.badge(" WARNING(tsc) "))
    assert DiagnosticLevel.MESSAGE.badge(" FILE ") in out


def test_position_is_yellow() -> None:
    """Line and column are highlighted."""
    out = diagnostic_to_terminal_log(make_diagnostic(line=7, column=3))
    assert f"{click.style('7', fg='yellow')}:{click.style('3', fg='yellow')}" in out


def test_missing_level_renders_as_error() -> None:
    """A diagnostic without level is labelled ERROR."""
    out = strip_ansi(diagnostic_to_terminal_log(make_diagnostic(level=None)))
    assert out.startswith(" ERROR ")


def test_missing_location_and_column() -> None:
    """Without a location the position is empty; without a column only the line shows."""
    no_loc = strip_ansi(diagnostic_to_terminal_log(make_diagnostic(line=None)))
    assert no_loc.split(os.linesep)[1] == " FILE  src/main.ts:"

    no_col = strip_ansi(diagnostic_to_terminal_log(make_diagnostic(line=4, column=None)))
    assert no_col.split(os.linesep)[1] == " FILE  src/main.ts:4"
