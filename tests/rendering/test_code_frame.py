# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : test_code_frame.py
#   file_relpath : tests/rendering/test_code_frame.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Tests for code frame rendering."""

from __future__ import annotations

import os

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from checkrelay.diagnostic import Position, SourceLocation, strip_ansi
from checkrelay.rendering import code_frame_columns, create_frame

SOURCE = "const a = 1\nconst b = a +;\nexport { b }"


def _loc(line: int, column: int | None = None, end: tuple[int, int | None] | None = None) -> SourceLocation:
    return SourceLocation(
        start=Position(line, column),
        end=Position(*end) if end is not None else None,
    )


def test_single_point_frame() -> None:
    """One caret under the located column; context lines around it."""
    frame = code_frame_columns(SOURCE, _loc(2, 14))
    assert frame == "\n".join(
        [
            "  1 | const a = 1",
            "> 2 | const b = a +;",
            "    |              ^",
            "  3 | export { b }",
        ]
    )


def test_column_range_on_one_line() -> None:
    """A same-line range gets one caret per column."""
    frame = code_frame_columns(SOURCE, _loc(1, 7, (1, 8)), lines_above=0, lines_below=0)
    assert frame == "> 1 | const a = 1\n    |       ^"


def test_multi_line_range() -> None:
    """Every line of a multi-line range is marked."""
    frame = code_frame_columns("aaaa\nbbbb\ncccc\ndddd", _loc(2, 3, (3, 2)))
    assert frame.split("\n") == [
        "  1 | aaaa",
        "> 2 | bbbb",
        "    |   ^^",
        "> 3 | cccc",
        "    | ^^",
        "  4 | dddd",
    ]


def test_range_ending_far_past_the_source_marks_only_displayed_lines() -> None:
    """A huge end line renders the visible part of the range without walking to it."""
    frame = code_frame_columns("aaaa\nbbbb\ncccc\ndddd", _loc(2, 3, (10**9, 1)), message="boom")
    assert frame.split("\n") == [
        "  1 | aaaa",
        "> 2 | bbbb",
        "    |   ^^",
        "> 3 | cccc",
        "    | ^^^^",
        "> 4 | dddd",
        "    | ^^^^",
    ]


def test_line_without_column_is_marked_without_carets() -> None:
    """An unknown column marks the line but draws no caret row."""
    frame = code_frame_columns(SOURCE, _loc(2))
    assert frame.split("\n") == [
        "  1 | const a = 1",
        "> 2 | const b = a +;",
        "  3 | export { b }",
    ]


def test_window_and_gutter_width() -> None:
    """The window spans lines_above/lines_below; numbers are right-aligned."""
    source = "\n".join(f"l{n}" for n in range(1, 21))
    rows = code_frame_columns(source, _loc(10, 1)).split("\n")
    assert rows[0] == "   8 | l8"
    assert rows[2] == "> 10 | l10"
    assert rows[3] == "     | ^"
    assert rows[-1] == "  13 | l13"


def test_empty_lines_have_no_trailing_space() -> None:
    """Blank source lines render as a bare gutter."""
    frame = code_frame_columns("a\n\nb", _loc(3, 1), lines_above=1)
    assert frame.split("\n")[0] == "  2 |"


def test_crlf_and_tabs() -> None:
    """CRLF splits lines; tabs before the column are kept in the caret row."""
    frame = code_frame_columns("x\r\n\tfoo", _loc(2, 2), lines_above=0)
    assert frame == "> 2 | \tfoo\n    | \t^"


def test_message_follows_last_marker() -> None:
    """A message is appended to the caret row."""
    frame = code_frame_columns(SOURCE, _loc(2, 14), lines_above=0, lines_below=0, message="oops")
    assert frame.endswith("^ oops")


def test_uncolored_by_default_and_colored_when_forced() -> None:
    """Styling only appears with force_color; the text is identical."""
    plain = code_frame_columns(SOURCE, _loc(2, 14))
    colored = code_frame_columns(SOURCE, _loc(2, 14), force_color=True)
    assert "\x1b[" not in plain
    assert "\x1b[" in colored
    assert strip_ansi(colored) == plain


def test_create_frame_indents_and_colors() -> None:
    """`create_frame` forces color and indents each line by two spaces."""
    frame = create_frame(source=SOURCE, location=_loc(2, 14))
    plain = code_frame_columns(SOURCE, _loc(2, 14))

    assert "\x1b[" in frame
    assert strip_ansi(frame) == os.linesep.join("  " + line for line in plain.split("\n"))


_line_text = st.text(alphabet=st.characters(whitelist_categories=("L", "N", "Zs")), max_size=40)


@pytest.mark.hypothesis_slow
@settings(max_examples=500, deadline=None)
@given(lines=st.lists(_line_text, min_size=1, max_size=30), data=st.data())
def test_colored_frame_strips_to_plain_frame(lines: list[str], data: st.DataObject) -> None:
    """Stripping create_frame gives the indented plain frame, with one marked line."""
    source = "\n".join(lines)
    line = data.draw(st.integers(min_value=1, max_value=len(lines)), label="line")
    column = data.draw(st.integers(min_value=1, max_value=len(lines[line - 1]) + 1), label="column")
    location = _loc(line, column)

    plain = code_frame_columns(source, location)
    assert strip_ansi(create_frame(source=source, location=location)) == os.linesep.join(
        "  " + row for row in plain.split("\n")
    )
    assert sum(row.startswith(">") for row in plain.split("\n")) == 1
