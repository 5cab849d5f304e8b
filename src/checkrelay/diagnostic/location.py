# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : location.py
#   file_relpath : src/checkrelay/diagnostic/location.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Translate checker-native locations into CheckRelay source locations.

Type-checkers such as TypeScript report positions as 0-based
``(line, character)`` pairs. Code frames and client payloads use 1-based
``(line, column)`` pairs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict

from checkrelay.diagnostic.model import Position, SourceLocation


@dataclass(frozen=True, slots=True)
class LineAndCharacter:
    """A 0-based line index and character offset."""

    line: int
    character: int


class TsLocation(TypedDict):
    """Start/end pair in 0-based checker coordinates."""

    start: LineAndCharacter
    end: LineAndCharacter


def _shift(pos: LineAndCharacter) -> Position:
    return Position(line=pos.line + 1, column=pos.character + 1)


def ts_location_to_source_location(ts_loc: TsLocation) -> SourceLocation:
    """Convert a 0-based checker location into a 1-based `SourceLocation`.

    Every component is shifted by one; bounds are not validated.
    """
    return SourceLocation(start=_shift(ts_loc["start"]), end=_shift(ts_loc["end"]))
