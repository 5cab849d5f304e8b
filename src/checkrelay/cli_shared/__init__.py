# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Frontend-agnostic helpers shared by the CLI and library callers."""
