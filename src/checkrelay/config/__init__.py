# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Configuration and logging for CheckRelay.

Import from the submodules directly (`checkrelay.config.logging`,
`checkrelay.config.model`, `checkrelay.config.io`); the logging module is
imported by every other package, so this package re-exports nothing.
"""
