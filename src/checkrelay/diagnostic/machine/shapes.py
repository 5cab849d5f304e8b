# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : shapes.py
#   file_relpath : src/checkrelay/diagnostic/machine/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Envelope builders for client (overlay) delivery.

Shape:
    ``{"event": WS_CHECKER_ERROR_EVENT, "data": {"checkerId": <id>, "diagnostics": [...]}}``

Envelopes are built here but not serialized; see
[`checkrelay.diagnostic.machine.serializers`][checkrelay.diagnostic.machine.serializers].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

from checkrelay.constants import WS_CHECKER_ERROR_EVENT
from checkrelay.diagnostic.filters import DEFAULT_LOG_LEVELS, filter_log_levels
from checkrelay.diagnostic.machine.payloads import diagnostics_to_runtime_errors

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from checkrelay.diagnostic.machine.payloads import DiagnosticToRuntime
    from checkrelay.diagnostic.model import DiagnosticLevel, NormalizedDiagnostic


# Functional syntax: "checkerId" is the wire spelling.
ClientDiagnosticData = TypedDict(
    "ClientDiagnosticData",
    {"checkerId": str, "diagnostics": "list[DiagnosticToRuntime]"},
)


class ClientDiagnosticPayload(TypedDict):
    """Envelope delivered to remote listeners."""

    event: str
    data: ClientDiagnosticData


def to_client_payload(
    checker_id: str, diagnostics: Iterable[DiagnosticToRuntime]
) -> ClientDiagnosticPayload:
    """Wrap already-converted diagnostics into the client envelope.

    Order and count are preserved; nothing is deduplicated.
    """
    return {
        "event": WS_CHECKER_ERROR_EVENT,
        "data": {
            "checkerId": checker_id,
            "diagnostics": list(diagnostics),
        },
    }


def build_client_payload(
    checker_id: str,
    diagnostics: Iterable[NormalizedDiagnostic],
    levels: Collection[DiagnosticLevel] = DEFAULT_LOG_LEVELS,
) -> ClientDiagnosticPayload:
    """Filter, convert and wrap one checker's diagnostics in a single step."""
    return to_client_payload(
        checker_id,
        diagnostics_to_runtime_errors(filter_log_levels(diagnostics, levels)),
    )
