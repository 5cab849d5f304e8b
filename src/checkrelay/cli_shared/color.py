# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : color.py
#   file_relpath : src/checkrelay/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Click-independent color helpers for CheckRelay.

Provides the `ColorMode` enum and the resolution of the final color decision
from CLI flags, configuration, environment and output format.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from checkrelay.config.logging import get_logger

if TYPE_CHECKING:
    from checkrelay.config.logging import CheckRelayLogger


logger: CheckRelayLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, value: str | None) -> ColorMode | None:
        """Parse a (case-insensitive) color mode name; return None if unknown."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            logger.warning("Unknown color mode %r (expected auto, always or never)", value)
            return None


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,  # "text" | "json" | None
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: `output_format == "json"` returns False.
        2. **Override**: `ALWAYS` returns True, `NEVER` returns False.
        3. **Environment**: `FORCE_COLOR` (set and not `"0"`) returns True;
           `NO_COLOR` (set to any value) returns False.
        4. **Auto**: `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode`; `None` (or `AUTO`) means no override.
        output_format: Output format; `"json"` suppresses color.
        stdout_isatty: Optional override for TTY detection.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if output_format and output_format.lower() == "json":
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
