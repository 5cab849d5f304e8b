# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : __init__.py
#   file_relpath : src/checkrelay/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Machine-output helpers for diagnostics.

Layers:

- **payloads**: per-diagnostic transport projections (`DiagnosticToRuntime`).
- **shapes**: client envelopes (`ClientDiagnosticPayload`).
- **serializers**: JSON text for envelopes.
"""

from __future__ import annotations

from checkrelay.diagnostic.machine.payloads import (
    DiagnosticToRuntime,
    RuntimeLocation,
    diagnostic_to_runtime_error,
    diagnostics_to_runtime_errors,
)
from checkrelay.diagnostic.machine.serializers import normalize_payload, serialize_client_payload
from checkrelay.diagnostic.machine.shapes import (
    ClientDiagnosticPayload,
    build_client_payload,
    to_client_payload,
)

__all__ = [
    "ClientDiagnosticPayload",
    "DiagnosticToRuntime",
    "RuntimeLocation",
    "build_client_payload",
    "diagnostic_to_runtime_error",
    "diagnostics_to_runtime_errors",
    "normalize_payload",
    "serialize_client_payload",
    "to_client_payload",
]
