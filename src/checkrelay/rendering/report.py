# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : report.py
#   file_relpath : src/checkrelay/rendering/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Per-checker report composition.

A `CheckerReport` bundles the diagnostics of one checker run. It can be
rendered for the terminal (filtered diagnostics followed by the summary line)
or turned into a client envelope.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from checkrelay.config.logging import get_logger
from checkrelay.diagnostic.filters import DEFAULT_LOG_LEVELS, filter_log_levels
from checkrelay.diagnostic.machine.shapes import build_client_payload
from checkrelay.diagnostic.model import DiagnosticStats, compute_diagnostic_stats
from checkrelay.rendering.summary import compose_checker_summary
from checkrelay.rendering.terminal import diagnostic_to_terminal_log

if TYPE_CHECKING:
    from collections.abc import Collection

    from checkrelay.config.logging import CheckRelayLogger
    from checkrelay.diagnostic.machine.shapes import ClientDiagnosticPayload
    from checkrelay.diagnostic.model import DiagnosticLevel, NormalizedDiagnostic

logger: CheckRelayLogger = get_logger(__name__)


@dataclass(frozen=True)
class CheckerReport:
    """Diagnostics collected from one checker run.

    Attributes:
        checker_id: Routing id of the checker (e.g. ``"eslint"``).
        diagnostics: Diagnostics in collection order.
        display_name: Name shown in terminal badges and summaries; defaults to
            ``checker_id``.
    """

    checker_id: str
    diagnostics: tuple[NormalizedDiagnostic, ...]
    display_name: str | None = None

    @property
    def name(self) -> str:
        """Return the display name, falling back to the checker id."""
        return self.display_name or self.checker_id

    def select(
        self, levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS
    ) -> list[NormalizedDiagnostic]:
        """Return the diagnostics whose level is in ``levels``."""
        return filter_log_levels(self.diagnostics, levels)

    def stats(self, levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS) -> DiagnosticStats:
        """Return per-level counts of the selected diagnostics."""
        return compute_diagnostic_stats(self.select(levels))

    def summary(self, levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS) -> str:
        """Return the colorized summary line for the selected diagnostics."""
        stats: DiagnosticStats = self.stats(levels)
        return compose_checker_summary(self.name, stats.n_error, stats.n_warning)

    def to_client_payload(
        self, levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS
    ) -> ClientDiagnosticPayload:
        """Return the client envelope for the selected diagnostics."""
        return build_client_payload(self.checker_id, self.diagnostics, levels)


def render_terminal_report(
    report: CheckerReport,
    levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS,
) -> str:
    """Render the selected diagnostics of ``report`` followed by its summary line.

    Diagnostics are separated by a blank line.

    Args:
        report: The checker report.
        levels: Accepted severities.

    Returns:
        The text to print (ANSI-styled).
    """
    selected: list[NormalizedDiagnostic] = report.select(levels)
    logger.debug(
        "Rendering %d of %d diagnostic(s) for %s",
        len(selected),
        len(report.diagnostics),
        report.checker_id,
    )
    blocks: list[str] = [diagnostic_to_terminal_log(d, report.name) for d in selected]
    blocks.append(report.summary(levels))
    return (os.linesep * 2).join(blocks)
