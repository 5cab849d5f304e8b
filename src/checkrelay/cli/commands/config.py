# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : config.py
#   file_relpath : src/checkrelay/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay `config` command group.

Subcommands:
    init: print an annotated starter ``checkrelay.toml`` (or a
        ``[tool.checkrelay]`` block with ``--pyproject``).
    dump: print the effective settings after defaults, config file and CLI
        options are merged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from checkrelay.cli.cmd_common import get_console, get_effective_verbosity, resolve_command_config
from checkrelay.cli.options import common_config_options, common_level_options
from checkrelay.config.io import default_config_toml, to_toml
from checkrelay.config.model import ReporterConfig

if TYPE_CHECKING:
    from pathlib import Path

    from checkrelay.cli_shared.console_api import ConsoleLike
    from checkrelay.diagnostic.model import DiagnosticLevel


@click.group(
    name="config",
    help="Inspect and scaffold CheckRelay configuration.",
)
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(
    name="init",
    help="Display an initial CheckRelay configuration file.",
)
@click.option(
    "--pyproject",
    is_flag=True,
    help="Generate config for inclusion in pyproject.toml.",
)
def config_init_command(*, pyproject: bool) -> None:
    """Print a starter config file to stdout.

    Args:
        pyproject (bool): If True, render under ``[tool.checkrelay]``.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    console.print(default_config_toml(ReporterConfig().to_toml_dict(), pyproject=pyproject), nl=False)


@config_command.command(
    name="dump",
    help="Display the effective CheckRelay configuration.",
)
@common_config_options
@common_level_options
def config_dump_command(
    *,
    config_path: Path | None,
    levels: tuple[DiagnosticLevel, ...],
) -> None:
    """Print the merged configuration as TOML.

    With ``-v`` the files the settings came from are listed first.
    """
    ctx: click.Context = click.get_current_context()
    config: ReporterConfig = resolve_command_config(ctx, config_path=config_path, levels=levels)
    console: ConsoleLike = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "(defaults only)"
        console.print(console.styled(f"# Config files: {sources}", dim=True))
    console.print(to_toml(config.to_toml_dict()), nl=False)
