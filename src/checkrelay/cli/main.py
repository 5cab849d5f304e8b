# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : main.py
#   file_relpath : src/checkrelay/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:
``verbosity_level``, ``log_level``, ``color_mode`` (the CLI override, if
any), ``color_enabled`` and ``console``. Subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from checkrelay.cli.commands.config import config_command
from checkrelay.cli.commands.payload import payload_command
from checkrelay.cli.commands.report import report_command
from checkrelay.cli.commands.version import version_command
from checkrelay.cli.console import ClickConsole
from checkrelay.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_log_level,
    resolve_verbosity,
)
from checkrelay.cli_shared.color import ColorMode, resolve_color_mode
from checkrelay.config.logging import get_logger, resolve_env_log_level, setup_logging
from checkrelay.reporting.reporter import ConsoleReporter, install_reporter

if TYPE_CHECKING:
    from checkrelay.cli_shared.console_api import ConsoleLike
    from checkrelay.config.logging import CheckRelayLogger

logger: CheckRelayLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    vlevel: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = vlevel

    # The environment wins over -vv/-vvv for internal logging.
    log_level: int | None = resolve_env_log_level()
    if log_level is None:
        log_level = resolve_log_level(vlevel)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    override: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    ctx.obj["color_mode"] = override
    enable_color: bool = resolve_color_mode(color_mode_override=override, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    install_reporter(ConsoleReporter(console))


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CheckRelay: render checker diagnostics for terminals and overlay clients.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the CheckRelay CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'checkrelay report FILE...' to render diagnostics.")


cli.add_command(report_command)
cli.add_command(payload_command)
cli.add_command(config_command)
cli.add_command(version_command)
