# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : payloads.py
#   file_relpath : src/checkrelay/diagnostic/machine/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Transport-shaped projections of normalized diagnostics.

“Payload” here means the per-diagnostic object that is inserted into a client
envelope (see [`checkrelay.diagnostic.machine.shapes`][checkrelay.diagnostic.machine.shapes]).

This module is intentionally:
- Click-free
- Console-free
- serialization-free (no `json.dumps`)

`diagnostic_to_runtime_error` converts one diagnostic; its sequence
counterpart `diagnostics_to_runtime_errors` maps it over a sequence, keeping
order and length.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from checkrelay.config.logging import get_logger
from checkrelay.diagnostic.model import stringify_stack

if TYPE_CHECKING:
    from collections.abc import Iterable

    from checkrelay.config.logging import CheckRelayLogger
    from checkrelay.diagnostic.model import DiagnosticLevel, NormalizedDiagnostic

logger: CheckRelayLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RuntimeLocation:
    """Location as sent to the client: file plus 1-based start line and column.

    Attributes:
        file: File id; empty when the diagnostic has none.
        line: 1-based start line.
        column: 1-based start column; ``0`` when unknown.
    """

    file: str
    line: int
    column: int

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this location."""
        return {"file": self.file, "line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class DiagnosticToRuntime:
    """Machine-readable diagnostic entry for remote listeners.

    Attributes:
        message: Plain message; empty when absent.
        stack: Stack joined into one string; empty when absent.
        id: File id, if any.
        frame: Code frame without ANSI styling, if any.
        checker_id: Checker that produced the diagnostic.
        level: Severity, if known.
        loc: Location, present only when the diagnostic has one.
    """

    message: str
    stack: str
    id: str | None
    frame: str | None
    checker_id: str
    level: DiagnosticLevel | None
    loc: RuntimeLocation | None = None

    def to_dict(self) -> dict[str, object]:
        """Return the wire shape: camelCase keys and an integer level.

        Absent ``id``, ``frame``, ``level`` and ``loc`` are left out rather than
        sent as ``null``; overlay clients test for the key.
        """
        out: dict[str, object] = {"message": self.message, "stack": self.stack}
        if self.id is not None:
            out["id"] = self.id
        if self.frame is not None:
            out["frame"] = self.frame
        out["checkerId"] = self.checker_id
        if self.level is not None:
            out["level"] = int(self.level)
        if self.loc is not None:
            out["loc"] = self.loc.to_dict()
        return out


def diagnostic_to_runtime_error(d: NormalizedDiagnostic) -> DiagnosticToRuntime:
    """Project one diagnostic into its transport shape.

    Args:
        d: Diagnostic to convert.

    Returns:
        The runtime entry. ``loc`` is set only when ``d.loc`` is; its ``file``
        defaults to ``""`` and its ``column`` to ``0``.
    """
    loc: RuntimeLocation | None = None
    if d.loc is not None:
        column: int | None = d.loc.start.column
        loc = RuntimeLocation(
            file=d.id or "",
            line=d.loc.start.line,
            column=column if isinstance(column, int) else 0,
        )

    return DiagnosticToRuntime(
        message=d.message or "",
        stack=stringify_stack(d.stack),
        id=d.id,
        frame=d.striped_code_frame,
        checker_id=d.checker,
        level=d.level,
        loc=loc,
    )


def diagnostics_to_runtime_errors(
    diagnostics: Iterable[NormalizedDiagnostic],
) -> list[DiagnosticToRuntime]:
    """Project each diagnostic with `diagnostic_to_runtime_error`, keeping order."""
    results: list[DiagnosticToRuntime] = [diagnostic_to_runtime_error(d) for d in diagnostics]
    logger.trace("Converted %d diagnostic(s) to runtime entries", len(results))
    return results
