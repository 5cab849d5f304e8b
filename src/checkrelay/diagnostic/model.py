# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : model.py
#   file_relpath : src/checkrelay/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Core diagnostic types and helpers for CheckRelay.

Every checker adapter maps its native diagnostic objects into the canonical
`NormalizedDiagnostic` defined here. The rest of the pipeline (filtering,
terminal rendering, runtime payloads, summaries) only ever sees this shape.

Sections:
    * DiagnosticLevel: severity levels with associated terminal badges.
    * Position / SourceLocation: 1-based source coordinates.
    * NormalizedDiagnostic: immutable canonical diagnostic record.
    * DiagnosticStats: aggregated per-level counts.
    * strip_ansi / stringify_stack: derived-field helpers.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import TYPE_CHECKING, Any, cast

import click

from checkrelay.config.logging import get_logger

if TYPE_CHECKING:
    from checkrelay.config.logging import CheckRelayLogger


logger: CheckRelayLogger = get_logger(__name__)

StackLike = str | Sequence[str]


class DiagnosticDecodeError(ValueError):
    """Raised when a mapping cannot be decoded into a `NormalizedDiagnostic`."""


class DiagnosticLevel(IntEnum):
    """Severity levels of a normalized diagnostic.

    Values follow the TypeScript ``DiagnosticCategory`` numbering, which is what
    most checker adapters already emit. Note that ``WARNING`` is ``0``: code must
    test levels for ``None`` rather than for truthiness.
    """

    WARNING = 0
    ERROR = 1
    SUGGESTION = 2
    MESSAGE = 3

    @property
    def label(self) -> str:
        """Return the upper-case label used in terminal output (e.g. ``"ERROR"``)."""
        return self.name

    @property
    def background(self) -> str:
        """Return the `click.style` background color name of this level's badge."""
        return {
            DiagnosticLevel.ERROR: "bright_red",
            DiagnosticLevel.WARNING: "bright_yellow",
            DiagnosticLevel.SUGGESTION: "bright_blue",
            DiagnosticLevel.MESSAGE: "bright_cyan",
        }[self]

    def badge(self, text: str) -> str:
        """Style ``text`` as this level's badge: bold black on a bright background.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return click.style(text, fg="black", bg=self.background, bold=True)

    @classmethod
    def parse(cls, value: object) -> DiagnosticLevel | None:
        """Return the level for an integer value or a (case-insensitive) name.

        Args:
            value (object): An ``int``, a level name such as ``"warning"``, or a member.

        Returns:
            DiagnosticLevel | None: The matching member, or ``None`` when ``value``
            does not name a level.
        """
        if isinstance(value, DiagnosticLevel):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


@dataclass(frozen=True, slots=True)
class Position:
    """A 1-based line/column pair. ``column`` may be unknown."""

    line: int
    column: int | None = None

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly dict of this position."""
        out: dict[str, int] = {"line": self.line}
        if self.column is not None:
            out["column"] = self.column
        return out


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A start/end range in 1-based coordinates.

    When ``end`` is omitted the location designates the single ``start`` point.
    """

    start: Position
    end: Position | None = None

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Return a JSON-friendly dict of this location."""
        out: dict[str, dict[str, int]] = {"start": self.start.to_dict()}
        if self.end is not None:
            out["end"] = self.end.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SourceLocation:
        """Build a location from its JSON shape (``{"start": {...}, "end": {...}}``).

        Raises:
            DiagnosticDecodeError: If ``start`` or its ``line`` is missing.
        """
        start: Any = data.get("start")
        if not isinstance(start, Mapping) or not isinstance(start.get("line"), int):
            raise DiagnosticDecodeError(f"location without a numeric start line: {data!r}")
        end: Any = data.get("end")
        return cls(
            start=_position_from_dict(cast("Mapping[str, Any]", start)),
            end=(
                _position_from_dict(cast("Mapping[str, Any]", end))
                if isinstance(end, Mapping) and isinstance(end.get("line"), int)
                else None
            ),
        )


def _position_from_dict(data: Mapping[str, Any]) -> Position:
    column: Any = data.get("column")
    return Position(
        line=int(data["line"]),
        column=column if isinstance(column, int) and not isinstance(column, bool) else None,
    )


@dataclass(frozen=True)
class NormalizedDiagnostic:
    """Canonical diagnostic record produced from one raw checker diagnostic.

    Instances are immutable; rendering and filtering produce new values.

    Attributes:
        checker: Identifier of the checker that produced the diagnostic. Used as
            terminal label and as routing key in client payloads.
        message: Human-readable description.
        conclusion: Trailing annotation rendered after the code frame.
        stack: Stack trace, either a single string or a sequence of lines.
        id: File path or identifier the diagnostic refers to.
        code_frame: Colorized, indented source excerpt.
        striped_code_frame: ``code_frame`` without ANSI styling.
        loc: 1-based source location.
        level: Severity; ``None`` means unknown.
    """

    checker: str
    message: str | None = None
    conclusion: str | None = None
    stack: StackLike | None = None
    id: str | None = None
    code_frame: str | None = None
    striped_code_frame: str | None = None
    loc: SourceLocation | None = None
    level: DiagnosticLevel | None = None

    def __post_init__(self) -> None:
        # Freeze list-like stacks so the record stays immutable.
        if self.stack is not None and not isinstance(self.stack, (str, tuple)):
            object.__setattr__(self, "stack", tuple(self.stack))

    def with_frame(self, source: str) -> NormalizedDiagnostic:
        """Return a copy carrying a code frame rendered from ``source``.

        The colorized frame is built with
        [`create_frame`][checkrelay.rendering.code_frame.create_frame] and the
        stripped variant is derived from it. Requires ``loc``.

        Args:
            source: Full text of the file the diagnostic refers to.

        Returns:
            A new diagnostic with ``code_frame`` and ``striped_code_frame`` set.

        Raises:
            ValueError: If the diagnostic has no location.
        """
        from checkrelay.rendering.code_frame import create_frame

        if self.loc is None:
            raise ValueError("cannot render a code frame without a location")
        frame: str = create_frame(source=source, location=self.loc)
        return replace(self, code_frame=frame, striped_code_frame=strip_ansi(frame))

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape of this diagnostic (camelCase keys, absent fields omitted)."""
        out: dict[str, object] = {"checker": self.checker}
        if self.message is not None:
            out["message"] = self.message
        if self.conclusion is not None:
            out["conclusion"] = self.conclusion
        if self.stack is not None:
            out["stack"] = self.stack if isinstance(self.stack, str) else list(self.stack)
        if self.id is not None:
            out["id"] = self.id
        if self.code_frame is not None:
            out["codeFrame"] = self.code_frame
        if self.striped_code_frame is not None:
            out["stripedCodeFrame"] = self.striped_code_frame
        if self.loc is not None:
            out["loc"] = self.loc.to_dict()
        if self.level is not None:
            out["level"] = int(self.level)
        return out

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], *, checker: str | None = None
    ) -> NormalizedDiagnostic:
        """Decode a diagnostic from its JSON shape.

        Unknown keys are ignored. ``level`` may be the numeric value or a level
        name; unrecognized levels decode as ``None``.

        Args:
            data: Mapping as produced by `to_dict` or a checker adapter.
            checker: Fallback checker id when ``data`` has none.

        Returns:
            The decoded diagnostic.

        Raises:
            DiagnosticDecodeError: If no checker id is available or a field has
                the wrong type.
        """
        checker_id: Any = data.get("checker", checker)
        if not isinstance(checker_id, str) or not checker_id:
            raise DiagnosticDecodeError(f"diagnostic without a checker id: {data!r}")

        stack: Any = data.get("stack")
        if stack is not None and not isinstance(stack, str):
            if not isinstance(stack, list) or not all(
                isinstance(s, str) for s in cast("list[Any]", stack)
            ):
                raise DiagnosticDecodeError(f"stack must be a string or list of strings: {stack!r}")
            stack = tuple(cast("list[str]", stack))

        loc: Any = data.get("loc")
        raw_level: Any = data.get("level")
        level: DiagnosticLevel | None = DiagnosticLevel.parse(raw_level)
        if raw_level is not None and level is None:
            logger.warning("Ignoring unknown level %r for checker %s", raw_level, checker_id)

        return cls(
            checker=checker_id,
            message=_opt_str(data, "message"),
            conclusion=_opt_str(data, "conclusion"),
            stack=stack,
            id=_opt_str(data, "id"),
            code_frame=_opt_str(data, "codeFrame"),
            striped_code_frame=_opt_str(data, "stripedCodeFrame"),
            loc=SourceLocation.from_dict(cast("Mapping[str, Any]", loc))
            if isinstance(loc, Mapping)
            else None,
            level=level,
        )


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DiagnosticDecodeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def strip_ansi(text: str) -> str:
    """Remove all ANSI styling from ``text``; character content is otherwise unchanged."""
    return click.unstyle(text)


def stringify_stack(stack: StackLike | None) -> str:
    """Return ``stack`` as one string.

    Sequences are joined with the platform line separator; an absent stack
    yields an empty string.
    """
    if stack is None:
        return ""
    if isinstance(stack, str):
        return stack
    return os.linesep.join(stack)


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_error: int
    n_warning: int
    n_suggestion: int
    n_message: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_error + self.n_warning + self.n_suggestion + self.n_message

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return {
            "error": self.n_error,
            "warning": self.n_warning,
            "suggestion": self.n_suggestion,
            "message": self.n_message,
        }


def compute_diagnostic_stats(diagnostics: Iterable[NormalizedDiagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Diagnostics without a level are counted as errors, the same way the
    terminal renderer labels them.

    Args:
        diagnostics: Diagnostics to aggregate.

    Returns:
        Per-level counts.
    """
    counts: dict[DiagnosticLevel, int] = dict.fromkeys(DiagnosticLevel, 0)
    for d in diagnostics:
        counts[d.level if d.level is not None else DiagnosticLevel.ERROR] += 1
    return DiagnosticStats(
        n_error=counts[DiagnosticLevel.ERROR],
        n_warning=counts[DiagnosticLevel.WARNING],
        n_suggestion=counts[DiagnosticLevel.SUGGESTION],
        n_message=counts[DiagnosticLevel.MESSAGE],
    )
