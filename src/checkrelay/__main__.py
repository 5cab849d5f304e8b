# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __main__.py
#   file_relpath : src/checkrelay/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Module entry point for running CheckRelay via ``python -m checkrelay``.

Delegates to `checkrelay.cli.main.cli`, the single CLI entry point.
"""

from __future__ import annotations

from checkrelay.cli.main import cli

if __name__ == "__main__":
    cli()
