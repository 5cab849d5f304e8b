# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    checkrelay = "checkrelay.cli.main:cli"

All subcommands live in `checkrelay.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
