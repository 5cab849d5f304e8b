# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/reporting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Context-aware text reporting and deferred calls."""

from __future__ import annotations

from checkrelay.reporting.deferred import ensure_call, wait_for_deferred
from checkrelay.reporting.reporter import (
    ActionType,
    ChannelReporter,
    ConsoleAction,
    ConsoleReporter,
    Reporter,
    console_log,
    drain_channel,
    get_reporter,
    install_reporter,
    select_reporter,
)

__all__ = [
    "ActionType",
    "ChannelReporter",
    "ConsoleAction",
    "ConsoleReporter",
    "Reporter",
    "console_log",
    "drain_channel",
    "ensure_call",
    "get_reporter",
    "install_reporter",
    "select_reporter",
    "wait_for_deferred",
]
