# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : summary.py
#   file_relpath : src/checkrelay/rendering/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""One-line, per-checker summaries of error and warning counts."""

from __future__ import annotations

import click


def wrap_checker_summary(checker_name: str, raw_summary: str) -> str:
    """Prefix ``raw_summary`` with ``[checker_name] ``."""
    return f"[{checker_name}] {raw_summary}"


def compose_checker_summary(checker_name: str, error_count: int, warning_count: int) -> str:
    """Return the colorized ``[checker] Found N error(s) and M warning(s)`` line.

    Nouns are pluralized only for counts above one, so a zero count reads
    ``"0 error"``. Downstream tooling matches on this exact wording.

    The line is red when there are errors, yellow when there are only warnings
    and green otherwise.
    """
    message: str = (
        f"Found {error_count} error{'s' if error_count > 1 else ''}"
        f" and {warning_count} warning{'s' if warning_count > 1 else ''}"
    )
    color: str = "red" if error_count > 0 else "yellow" if warning_count > 0 else "green"
    return click.style(wrap_checker_summary(checker_name, message), fg=color)
