# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : payload.py
#   file_relpath : src/checkrelay/cli/commands/payload.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay `payload` command.

Reads checker diagnostics and prints one client payload per checker, in the
JSON shape the overlay client consumes. One payload per line unless
``--indent`` is given. Nothing is printed when the ``overlay`` setting is off.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from checkrelay.cli.cmd_common import get_console, load_reports, resolve_command_config
from checkrelay.cli.options import common_config_options, common_level_options
from checkrelay.config.logging import get_logger
from checkrelay.diagnostic.machine.serializers import serialize_client_payload

if TYPE_CHECKING:
    from pathlib import Path

    from checkrelay.cli_shared.console_api import ConsoleLike
    from checkrelay.cli_shared.exit_codes import ExitCode
    from checkrelay.config.logging import CheckRelayLogger
    from checkrelay.config.model import ReporterConfig
    from checkrelay.diagnostic.model import DiagnosticLevel
    from checkrelay.rendering.report import CheckerReport

logger: CheckRelayLogger = get_logger(__name__)


@click.command(
    name="payload",
    help="Emit the client payload JSON for each checker.",
)
@click.argument("inputs", nargs=-1, type=str)
@common_config_options
@common_level_options
@click.option(
    "--overlay/--no-overlay",
    "overlay",
    default=None,
    help="Override the overlay setting (payloads are only emitted when enabled).",
)
@click.option(
    "--frames/--no-frames",
    "frames",
    default=True,
    help="Build missing code frames from the referenced source files.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Pretty-print JSON with this indentation.",
)
def payload_command(
    *,
    inputs: tuple[str, ...],
    config_path: Path | None,
    levels: tuple[DiagnosticLevel, ...],
    overlay: bool | None,
    frames: bool,
    indent: int | None,
) -> None:
    """Print client payloads for each checker.

    Args:
        inputs (tuple[str, ...]): Diagnostics JSON files; ``-`` (the default) reads STDIN.
        config_path (Path | None): Explicit config file.
        levels (tuple[DiagnosticLevel, ...]): Level override (empty: use config).
        overlay (bool | None): Override of the ``overlay`` setting.
        frames (bool): Build missing code frames from source files.
        indent (int | None): JSON indentation.
    """
    ctx: click.Context = click.get_current_context()
    config: ReporterConfig = resolve_command_config(
        ctx,
        config_path=config_path,
        levels=levels,
        overlay=overlay,
        output_format="json",
    )
    console: ConsoleLike = get_console(ctx)

    if not config.overlay:
        logger.info("Overlay disabled; no payloads emitted")
        return

    reports: list[CheckerReport]
    error_code: ExitCode | None
    reports, error_code = load_reports(inputs or ("-",), console=console, frames=frames)
    for report in reports:
        console.print(serialize_client_payload(report.to_client_payload(config.log_levels), indent=indent))

    if error_code is not None:
        ctx.exit(error_code)
