# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : cmd_common.py
#   file_relpath : src/checkrelay/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: settings resolution, console
refresh once the configured color mode is known, and loading diagnostics
input with per-file error mapping.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from checkrelay.cli.console import ClickConsole
from checkrelay.cli.errors import CheckRelayConfigError
from checkrelay.cli.io import attach_code_frames, parse_reports, read_input_text
from checkrelay.cli_shared.color import ColorMode, resolve_color_mode
from checkrelay.cli_shared.exit_codes import ExitCode
from checkrelay.config.logging import get_logger
from checkrelay.config.model import MutableReporterConfig
from checkrelay.diagnostic.model import DiagnosticDecodeError
from checkrelay.reporting.reporter import ConsoleReporter, install_reporter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from checkrelay.cli_shared.console_api import ConsoleLike
    from checkrelay.config.logging import CheckRelayLogger
    from checkrelay.config.model import ReporterConfig
    from checkrelay.diagnostic.model import DiagnosticLevel
    from checkrelay.rendering.report import CheckerReport

logger: CheckRelayLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (``0`` when unset)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a default one if needed."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole()
        ctx.obj["console"] = console
    return console


def resolve_command_config(
    ctx: click.Context,
    *,
    config_path: Path | None,
    levels: Sequence[DiagnosticLevel] = (),
    terminal: bool | None = None,
    overlay: bool | None = None,
    output_format: str | None = None,
) -> ReporterConfig:
    """Build the effective settings for a command and refresh the console color.

    Precedence: defaults, then the config file, then CLI options.

    Raises:
        CheckRelayConfigError: If an explicit ``--config`` file does not exist.
    """
    ctx.ensure_object(dict)
    if config_path is not None and not config_path.is_file():
        raise CheckRelayConfigError(f"Config file not found: {config_path}")

    draft: MutableReporterConfig = MutableReporterConfig.load(config_path=config_path)
    cli_color: ColorMode | None = ctx.obj.get("color_mode")
    draft.apply_cli_args(
        log_levels=levels or None,
        color_mode=cli_color,
        terminal=terminal,
        overlay=overlay,
    )
    config: ReporterConfig = draft.freeze()
    ctx.obj["config"] = config
    logger.debug("Effective config: %s", config)

    enable_color: bool = resolve_color_mode(
        color_mode_override=config.color_mode,
        output_format=output_format,
    )
    if enable_color != ctx.obj.get("color_enabled"):
        console = ClickConsole(enable_color=enable_color)
        ctx.obj["console"] = console
        ctx.obj["color_enabled"] = enable_color
        ctx.color = enable_color
        install_reporter(ConsoleReporter(console))
    return config


def _read_error_code(exc: OSError) -> ExitCode:
    if isinstance(exc, (FileNotFoundError, NotADirectoryError, IsADirectoryError)):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ExitCode.PERMISSION_DENIED
    return ExitCode.IO_ERROR


def load_reports(
    inputs: Sequence[str],
    *,
    console: ConsoleLike,
    frames: bool,
) -> tuple[list[CheckerReport], ExitCode | None]:
    """Load every input and return ``(reports, first_error_code)``.

    Inputs that fail are reported on the console and skipped so the remaining
    ones are still processed.

    Exit code mapping:
        FILE_NOT_FOUND: missing input path (or a path through a regular file).
        PERMISSION_DENIED: unreadable input file.
        IO_ERROR: any other read failure.
        DATA_ERROR: undecodable input (bad UTF-8, bad JSON or wrong shape).
    """
    reports: list[CheckerReport] = []
    error_code: ExitCode | None = None
    base_dir: Path = Path.cwd()
    for source in inputs:
        try:
            text, default_checker = read_input_text(source)
            loaded: list[CheckerReport] = parse_reports(text, default_checker=default_checker)
        except OSError as exc:
            logger.error("Cannot read %s: %s", source, exc)
            console.error(f"Cannot read {source}: {exc}")
            error_code = error_code or _read_error_code(exc)
            continue
        except (UnicodeDecodeError, DiagnosticDecodeError) as exc:
            logger.error("Cannot decode %s: %s", source, exc)
            console.error(f"Cannot decode {source}: {exc}")
            error_code = error_code or ExitCode.DATA_ERROR
            continue
        if frames:
            loaded = [attach_code_frames(r, base_dir=base_dir) for r in loaded]
        reports.extend(loaded)
    return reports, error_code
