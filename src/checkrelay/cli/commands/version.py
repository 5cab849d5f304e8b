# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : version.py
#   file_relpath : src/checkrelay/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay `version` command.

Prints the CheckRelay version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from checkrelay.cli.cli_types import EnumChoiceParam, OutputFormat
from checkrelay.cli.cmd_common import get_console, get_effective_verbosity
from checkrelay.constants import CHECKRELAY_VERSION

if TYPE_CHECKING:
    from checkrelay.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of CheckRelay.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of CheckRelay.

    Args:
        output_format (OutputFormat | None): Optional output format (text or json).
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": CHECKRELAY_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("CheckRelay version:", bold=True, underline=True))
        console.print(f"    {console.styled(CHECKRELAY_VERSION, bold=True)}")
    else:
        console.print(console.styled(CHECKRELAY_VERSION, bold=True))
