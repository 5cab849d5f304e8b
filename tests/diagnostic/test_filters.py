# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : test_filters.py
#   file_relpath : tests/diagnostic/test_filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Unit tests for severity filtering of normalized diagnostics."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from checkrelay.diagnostic import (
    DEFAULT_LOG_LEVELS,
    DiagnosticLevel,
    filter_log_level,
    filter_log_levels,
    is_normalized_diagnostic,
)
from tests.conftest import make_diagnostic


@pytest.mark.parametrize("level", list(DiagnosticLevel))
def test_single_filter_keeps_every_level_by_default(level: DiagnosticLevel) -> None:
    """Each level, WARNING (0) included, passes the default filter unchanged."""
    d = make_diagnostic(level=level)
    assert filter_log_level(d) is d


def test_single_filter_rejects_levels_outside_the_set() -> None:
    """A level that is not accepted yields None."""
    d = make_diagnostic(level=DiagnosticLevel.SUGGESTION)
    assert filter_log_level(d, [DiagnosticLevel.ERROR]) is None


def test_single_filter_rejects_missing_level() -> None:
    """A diagnostic without a level is never selected."""
    d = make_diagnostic(level=None)
    assert filter_log_level(d, DEFAULT_LOG_LEVELS) is None


def test_warning_is_kept_when_requested() -> None:
    """WARNING is value 0 and must not be mistaken for 'no level'."""
    d = make_diagnostic(level=DiagnosticLevel.WARNING)
    assert filter_log_level(d, [DiagnosticLevel.WARNING]) is d


def test_collection_filter_preserves_order_and_identity() -> None:
    """Accepted diagnostics come back in input order, as the same objects."""
    a = make_diagnostic(level=DiagnosticLevel.ERROR, message="a")
    b = make_diagnostic(level=DiagnosticLevel.WARNING, message="b")
    c = make_diagnostic(level=DiagnosticLevel.MESSAGE, message="c")
    d = make_diagnostic(level=DiagnosticLevel.ERROR, message="d")

    kept = filter_log_levels([a, b, c, d], [DiagnosticLevel.ERROR, DiagnosticLevel.WARNING])

    assert kept == [a, b, d]
    assert all(x is y for x, y in zip(kept, [a, b, d]))


_levels_or_none = st.one_of(st.none(), st.sampled_from(list(DiagnosticLevel)))


@given(
    levels=st.lists(_levels_or_none, max_size=20),
    accepted=st.sets(st.sampled_from(list(DiagnosticLevel))),
)
def test_collection_filter_is_idempotent(
    levels: list[DiagnosticLevel | None], accepted: set[DiagnosticLevel]
) -> None:
    """Filtering twice with the same levels gives the same result as filtering once."""
    diagnostics = [make_diagnostic(level=level, message=str(i)) for i, level in enumerate(levels)]

    once = filter_log_levels(diagnostics, accepted)

    assert filter_log_levels(once, accepted) == once
    assert [d.level for d in once] == [level for level in levels if level in accepted]


def test_collection_filter_with_empty_levels_drops_everything() -> None:
    """An empty level set selects nothing."""
    assert filter_log_levels([make_diagnostic(), make_diagnostic()], []) == []


def test_collection_filter_of_empty_input() -> None:
    """Filtering no diagnostics yields an empty list."""
    assert filter_log_levels([]) == []


def test_is_normalized_diagnostic() -> None:
    """The type guard separates diagnostics from filtered-out results."""
    d = make_diagnostic()
    assert is_normalized_diagnostic(d)
    assert not is_normalized_diagnostic(None)
    assert not is_normalized_diagnostic(filter_log_level(d, []))
