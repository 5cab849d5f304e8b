# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Human-facing rendering: code frames, terminal logs and summaries."""

from __future__ import annotations

from checkrelay.rendering.code_frame import code_frame_columns, create_frame
from checkrelay.rendering.report import CheckerReport, render_terminal_report
from checkrelay.rendering.summary import compose_checker_summary, wrap_checker_summary
from checkrelay.rendering.terminal import diagnostic_to_terminal_log

__all__ = [
    "CheckerReport",
    "code_frame_columns",
    "compose_checker_summary",
    "create_frame",
    "diagnostic_to_terminal_log",
    "render_terminal_report",
    "wrap_checker_summary",
]
