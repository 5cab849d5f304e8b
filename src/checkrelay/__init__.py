# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay package.

CheckRelay turns the output of source-code checkers (type-checkers, linters,
style-checkers) into uniform diagnostics, filters them by severity, and
renders them as colorized terminal text or as JSON payloads for a remote
overlay client. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations
