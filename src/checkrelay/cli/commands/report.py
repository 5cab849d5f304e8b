# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : report.py
#   file_relpath : src/checkrelay/cli/commands/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay `report` command.

Reads checker diagnostics (JSON files, or STDIN with ``-``) and prints, per
checker, the selected diagnostics followed by a one-line summary. Output is
deferred through `ensure_call` and reported through the installed reporter,
so it is emitted in scheduling order once loading is done.

Exit codes: ``0`` when no error-level diagnostic is reported, ``1``
otherwise; input problems map to ``FILE_NOT_FOUND`` or ``DATA_ERROR``.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

import click

from checkrelay.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_reports,
    resolve_command_config,
)
from checkrelay.cli.options import common_config_options, common_level_options
from checkrelay.cli_shared.exit_codes import ExitCode
from checkrelay.config.logging import get_logger
from checkrelay.rendering.report import render_terminal_report
from checkrelay.reporting.deferred import ensure_call, wait_for_deferred
from checkrelay.reporting.reporter import console_log, get_reporter

if TYPE_CHECKING:
    from pathlib import Path

    from checkrelay.cli_shared.console_api import ConsoleLike
    from checkrelay.config.logging import CheckRelayLogger
    from checkrelay.config.model import ReporterConfig
    from checkrelay.diagnostic.model import DiagnosticLevel
    from checkrelay.rendering.report import CheckerReport
    from checkrelay.reporting.reporter import Reporter

logger: CheckRelayLogger = get_logger(__name__)


@click.command(
    name="report",
    help="Render checker diagnostics for the terminal.",
)
@click.argument("inputs", nargs=-1, type=str)
@common_config_options
@common_level_options
@click.option(
    "--terminal/--no-terminal",
    "terminal",
    default=None,
    help="Print full diagnostics (default) or only the per-checker summaries.",
)
@click.option(
    "--frames/--no-frames",
    "frames",
    default=True,
    help="Build missing code frames from the referenced source files.",
)
def report_command(
    *,
    inputs: tuple[str, ...],
    config_path: Path | None,
    levels: tuple[DiagnosticLevel, ...],
    terminal: bool | None,
    frames: bool,
) -> None:
    """Render diagnostics and summaries for each checker.

    Args:
        inputs (tuple[str, ...]): Diagnostics JSON files; ``-`` (the default) reads STDIN.
        config_path (Path | None): Explicit config file.
        levels (tuple[DiagnosticLevel, ...]): Level override (empty: use config).
        terminal (bool | None): Override of the ``terminal`` setting.
        frames (bool): Build missing code frames from source files.
    """
    ctx: click.Context = click.get_current_context()
    config: ReporterConfig = resolve_command_config(
        ctx,
        config_path=config_path,
        levels=levels,
        terminal=terminal,
    )
    console: ConsoleLike = get_console(ctx)

    reports: list[CheckerReport]
    error_code: ExitCode | None
    reports, error_code = load_reports(inputs or ("-",), console=console, frames=frames)

    reporter: Reporter = get_reporter()
    quiet: bool = get_effective_verbosity(ctx) < 0
    has_errors: bool = False
    for report in reports:
        if report.stats(config.log_levels).n_error > 0:
            has_errors = True
        if quiet:
            continue
        text: str = (
            render_terminal_report(report, config.log_levels)
            if config.terminal
            else report.summary(config.log_levels)
        )
        ensure_call(partial(console_log, text, reporter))
    wait_for_deferred()

    if error_code is not None:
        ctx.exit(error_code)
    if has_errors:
        ctx.exit(ExitCode.FAILURE)
