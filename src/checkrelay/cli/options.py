# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : options.py
#   file_relpath : src/checkrelay/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Reusable Click option decorators and their resolution helpers."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from checkrelay.cli.cli_types import EnumChoiceParam
from checkrelay.cli.errors import CheckRelayUsageError
from checkrelay.cli_shared.color import ColorMode
from checkrelay.config.logging import LOG_LEVELS
from checkrelay.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        CheckRelayUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CheckRelayUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def resolve_log_level(verbosity_level: int) -> int | None:
    """Return the internal logging level implied by verbosity (``None``: leave to env).

    ``-vv`` enables DEBUG and ``-vvv`` enables TRACE logging.
    """
    if verbosity_level >= 3:
        return LOG_LEVELS["TRACE"]
    if verbosity_level == 2:
        return LOG_LEVELS["DEBUG"]
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet (mutually exclusive, counted)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for debug (-vv) and trace (-vvv) logging.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color (auto, always, never) and --no-color."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --config PATH (explicit config file, disables discovery)."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this TOML file instead of discovering one.",
    )(f)


def common_level_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add repeatable --level NAME to override the configured log levels."""
    return click.option(
        "--level",
        "levels",
        type=EnumChoiceParam(DiagnosticLevel),
        multiple=True,
        help="Diagnostic level to report (repeatable); overrides log_levels.",
    )(f)
