# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : filters.py
#   file_relpath : src/checkrelay/diagnostic/filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Severity filtering for normalized diagnostics.

Two entry points share one predicate:

- `filter_log_level` decides for a single diagnostic and returns it or ``None``.
- `filter_log_levels` maps that decision over a sequence, preserving order.

Diagnostics without a level are never selected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, TypeGuard

from checkrelay.config.logging import get_logger
from checkrelay.diagnostic.model import DiagnosticLevel, NormalizedDiagnostic

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from checkrelay.config.logging import CheckRelayLogger


logger: CheckRelayLogger = get_logger(__name__)

DEFAULT_LOG_LEVELS: Final[tuple[DiagnosticLevel, ...]] = (
    DiagnosticLevel.WARNING,
    DiagnosticLevel.ERROR,
    DiagnosticLevel.SUGGESTION,
    DiagnosticLevel.MESSAGE,
)


def filter_log_level(
    diagnostic: NormalizedDiagnostic,
    levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS,
) -> NormalizedDiagnostic | None:
    """Return ``diagnostic`` if its level is one of ``levels``, else ``None``.

    Args:
        diagnostic: Diagnostic to test.
        levels: Accepted severities (all four by default).

    Returns:
        The unchanged diagnostic, or ``None`` when it has no level or its level
        is not accepted.
    """
    # WARNING == 0, so test for None explicitly.
    if diagnostic.level is None:
        return None
    return diagnostic if diagnostic.level in levels else None


def filter_log_levels(
    diagnostics: Iterable[NormalizedDiagnostic],
    levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS,
) -> list[NormalizedDiagnostic]:
    """Return the diagnostics accepted by `filter_log_level`, in input order."""
    kept: list[NormalizedDiagnostic] = [
        d for d in diagnostics if filter_log_level(d, levels) is not None
    ]
    logger.trace("Level filter kept %d diagnostic(s) for levels %s", len(kept), list(levels))
    return kept


def is_normalized_diagnostic(d: NormalizedDiagnostic | None) -> TypeGuard[NormalizedDiagnostic]:
    """Return True if ``d`` is a diagnostic (i.e. not filtered out to ``None``)."""
    return d is not None
