# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Diagnostic primitives and helpers.

Design:
    - Checker adapters map raw diagnostics into immutable `NormalizedDiagnostic`
      instances, translating 0-based checker locations with
      `ts_location_to_source_location`.
    - Severity filtering lives in `checkrelay.diagnostic.filters`.

Machine output:
    Transport payloads and client envelopes live under
    [`checkrelay.diagnostic.machine`][checkrelay.diagnostic.machine].
"""

from __future__ import annotations

from checkrelay.diagnostic.filters import (
    DEFAULT_LOG_LEVELS,
    filter_log_level,
    filter_log_levels,
    is_normalized_diagnostic,
)
from checkrelay.diagnostic.location import LineAndCharacter, ts_location_to_source_location
from checkrelay.diagnostic.model import (
    DiagnosticDecodeError,
    DiagnosticLevel,
    DiagnosticStats,
    NormalizedDiagnostic,
    Position,
    SourceLocation,
    compute_diagnostic_stats,
    stringify_stack,
    strip_ansi,
)

__all__ = [
    "DEFAULT_LOG_LEVELS",
    "DiagnosticDecodeError",
    "DiagnosticLevel",
    "DiagnosticStats",
    "LineAndCharacter",
    "NormalizedDiagnostic",
    "Position",
    "SourceLocation",
    "compute_diagnostic_stats",
    "filter_log_level",
    "filter_log_levels",
    "is_normalized_diagnostic",
    "stringify_stack",
    "strip_ansi",
    "ts_location_to_source_location",
]
