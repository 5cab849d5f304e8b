# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : code_frame.py
#   file_relpath : src/checkrelay/rendering/code_frame.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Source excerpts ("code frames") highlighting a diagnostic location.

The layout matches the frames printed by JavaScript tooling (``@babel/code-frame``),
so frames produced here look the same as those produced by JS-side checker
adapters:

```text
  1 | const a = 1
> 2 | const b = a +;
    |              ^
  3 | export { b }
```

`code_frame_columns` renders the raw excerpt. `create_frame` is what checker
adapters call: it always emits colors and indents every line by two spaces.
"""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, Final

import click

from checkrelay.config.logging import get_logger

if TYPE_CHECKING:
    from checkrelay.config.logging import CheckRelayLogger
    from checkrelay.diagnostic.model import SourceLocation

logger: CheckRelayLogger = get_logger(__name__)

NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|[\n\r\u2028\u2029]")

DEFAULT_LINES_ABOVE: Final[int] = 2
DEFAULT_LINES_BELOW: Final[int] = 3

FRAME_INDENT: Final[str] = "  "

# Per line: (column, marker count), or True to mark the whole line without carets.
MarkerSpec = tuple[int, int] | bool


def _marker_lines(
    location: SourceLocation,
    source_lines: list[str],
    *,
    lines_above: int,
    lines_below: int,
) -> tuple[int, int, dict[int, MarkerSpec], int]:
    """Return the window ``[start, end)``, the markers in it and the last marked line.

    Only lines inside the window get a marker spec. The last marked line is the
    range end even when it lies past the window (``-1`` for reversed ranges).
    """
    start_line: int = location.start.line
    start_column: int = location.start.column or 0
    end_line: int = location.end.line if location.end is not None else start_line
    end_column: int = (
        location.end.column
        if location.end is not None and location.end.column is not None
        else start_column
    )

    start: int = max(start_line - (lines_above + 1), 0)
    end: int = min(len(source_lines), end_line + lines_below)

    def _line_length(number: int) -> int:
        index: int = number - 1
        return len(source_lines[index]) if 0 <= index < len(source_lines) else 0

    markers: dict[int, MarkerSpec] = {}
    line_diff: int = end_line - start_line
    last_marked: int = end_line if line_diff >= 0 else -1
    if line_diff:
        for number in range(max(start_line, start + 1), min(end_line, end) + 1):
            i: int = number - start_line
            if not start_column:
                markers[number] = True
            elif i == 0:
                markers[number] = (start_column, _line_length(number) - start_column + 1)
            elif i == line_diff:
                markers[number] = (0, end_column)
            else:
                markers[number] = (0, _line_length(number))
    elif start_column == end_column:
        markers[start_line] = (start_column, 0) if start_column else True
    else:
        markers[start_line] = (start_column, end_column - start_column)

    return start, end, markers, last_marked


def code_frame_columns(
    source: str,
    location: SourceLocation,
    *,
    lines_above: int = DEFAULT_LINES_ABOVE,
    lines_below: int = DEFAULT_LINES_BELOW,
    message: str | None = None,
    force_color: bool = False,
) -> str:
    """Render the lines around ``location`` with the located range marked.

    Args:
        source: Full source text.
        location: 1-based range to highlight.
        lines_above: Context lines shown above the start line.
        lines_below: Context lines shown below the end line.
        message: Optional text shown after the last marker (or above the frame
            when the location has no column).
        force_color: Emit ANSI styling for gutters and markers.

    Returns:
        The frame, lines joined with ``"\\n"``.
    """

    def _gutter(text: str) -> str:
        return click.style(text, fg="bright_black") if force_color else text

    def _marker(text: str) -> str:
        return click.style(text, fg="red", bold=True) if force_color else text

    source_lines: list[str] = NEWLINE_RE.split(source)
    start, end, markers, last_marked = _marker_lines(
        location, source_lines, lines_above=lines_above, lines_below=lines_below
    )
    number_max_width: int = len(str(end))

    rows: list[str] = []
    for index, line in enumerate(source_lines[start:end]):
        number: int = start + 1 + index
        gutter: str = f" {str(number).rjust(number_max_width)} |"
        text: str = f" {line}" if line else ""
        marker: MarkerSpec | None = markers.get(number)

        if marker is None:
            rows.append(f" {_gutter(gutter)}{text}")
            continue

        marker_row: str = ""
        if isinstance(marker, tuple):
            column, count = marker
            # Keep tabs so carets line up with tab-indented code.
            spacing: str = re.sub(r"[^\t]", " ", line[: max(column - 1, 0)])
            marker_row = "".join(
                [
                    "\n ",
                    _gutter(re.sub(r"\d", " ", gutter)),
                    " ",
                    spacing,
                    _marker("^" * (count or 1)),
                ]
            )
            if message and number == last_marked:
                marker_row += " " + _marker(message)
        rows.append(f"{_marker('>')}{_gutter(gutter)}{text}{marker_row}")

    frame: str = "\n".join(rows)
    if message and location.start.column is None:
        frame = f"{' ' * (number_max_width + 1)}{message}\n{frame}"
    logger.trace("Rendered code frame for lines %d-%d", start + 1, end)
    return frame


def create_frame(*, source: str, location: SourceLocation) -> str:
    """Return the colorized, indented code frame checker adapters attach to diagnostics.

    Color is forced: frames are often rendered in a worker thread or process
    whose output is not a TTY, and stripping happens later when needed.
    Every line is indented by two spaces and lines are joined with `os.linesep`.
    """
    frame: str = code_frame_columns(source, location, force_color=True)
    return os.linesep.join(FRAME_INDENT + line for line in frame.split("\n"))
