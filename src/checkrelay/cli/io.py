# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : io.py
#   file_relpath : src/checkrelay/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Reading checker diagnostics from JSON files or STDIN.

Accepted document shapes:

- a list of diagnostic objects, each carrying its own ``checker``; the file
  stem is used as checker id for entries without one;
- an object ``{"checker": "...", "name": "...", "diagnostics": [...]}``.

Diagnostics of different checkers in one document are grouped into one
`CheckerReport` per checker, in first-seen order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import click

from checkrelay.config.logging import get_logger
from checkrelay.diagnostic.model import DiagnosticDecodeError, NormalizedDiagnostic
from checkrelay.rendering.report import CheckerReport

if TYPE_CHECKING:
    from collections.abc import Mapping

    from checkrelay.config.logging import CheckRelayLogger

logger: CheckRelayLogger = get_logger(__name__)

STDIN_MARKER = "-"


def read_input_text(source: str) -> tuple[str, str]:
    """Return ``(text, default_checker_id)`` for a path or ``-`` (STDIN).

    Raises:
        FileNotFoundError: If ``source`` is a path that does not exist.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if source == STDIN_MARKER:
        stream = click.get_text_stream("stdin")
        return stream.read(), "stdin"
    path = Path(source)
    return path.read_text(encoding="utf-8"), path.stem


def parse_reports(text: str, *, default_checker: str) -> list[CheckerReport]:
    """Decode a diagnostics document into per-checker reports.

    Args:
        text: JSON text.
        default_checker: Checker id for diagnostics that carry none.

    Returns:
        One report per checker id found, in first-seen order.

    Raises:
        DiagnosticDecodeError: If the text is not JSON or does not match a
            supported shape.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DiagnosticDecodeError(f"invalid JSON: {exc}") from exc

    display_name: str | None = None
    if isinstance(data, dict):
        doc: Mapping[str, Any] = cast("Mapping[str, Any]", data)
        checker: Any = doc.get("checker", default_checker)
        if not isinstance(checker, str) or not checker:
            raise DiagnosticDecodeError(f"'checker' must be a non-empty string, got {checker!r}")
        name: Any = doc.get("name")
        display_name = name if isinstance(name, str) and name else None
        default_checker = checker
        data = doc.get("diagnostics", [])

    if not isinstance(data, list):
        raise DiagnosticDecodeError("expected a list of diagnostics")

    grouped: dict[str, list[NormalizedDiagnostic]] = {default_checker: []}
    for index, item in enumerate(cast("list[Any]", data)):
        if not isinstance(item, dict):
            raise DiagnosticDecodeError(f"diagnostic #{index} is not an object")
        diagnostic = NormalizedDiagnostic.from_dict(cast("Mapping[str, Any]", item), checker=default_checker)
        grouped.setdefault(diagnostic.checker, []).append(diagnostic)

    reports: list[CheckerReport] = [
        CheckerReport(
            checker_id=checker_id,
            diagnostics=tuple(diagnostics),
            display_name=display_name if checker_id == default_checker else None,
        )
        for checker_id, diagnostics in grouped.items()
        if diagnostics or checker_id == default_checker
    ]
    logger.debug("Decoded %d report(s): %s", len(reports), [r.checker_id for r in reports])
    return reports


def attach_code_frames(report: CheckerReport, *, base_dir: Path) -> CheckerReport:
    """Return ``report`` with code frames built for diagnostics that lack one.

    Only diagnostics with an ``id`` naming a readable file (relative ids are
    resolved against ``base_dir``) and a location get a frame; the others are
    kept unchanged.
    """
    sources: dict[Path, str | None] = {}
    out: list[NormalizedDiagnostic] = []
    for d in report.diagnostics:
        if d.code_frame is not None or d.loc is None or not d.id:
            out.append(d)
            continue
        path: Path = Path(d.id)
        if not path.is_absolute():
            path = base_dir / path
        if path not in sources:
            try:
                sources[path] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("No code frame for %s: %s", path, exc)
                sources[path] = None
        source: str | None = sources[path]
        out.append(d if source is None else d.with_frame(source))
    return CheckerReport(
        checker_id=report.checker_id,
        diagnostics=tuple(out),
        display_name=report.display_name,
    )
