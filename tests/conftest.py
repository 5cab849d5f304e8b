# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Pytest configuration for the CheckRelay test suite.

Sets up TRACE logging for test runs and shared diagnostic factories.

Notes:
    ANSI styling produced by `click.style` does not depend on the terminal, so
    rendering tests assert on escape sequences directly and use
    `checkrelay.diagnostic.strip_ansi` when only the text matters.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from checkrelay.config import logging
from checkrelay.diagnostic.model import (
    DiagnosticLevel,
    NormalizedDiagnostic,
    Position,
    SourceLocation,
)

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_checkrelay_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Also clears color-forcing variables so color resolution is deterministic.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("CHECKRELAY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_diagnostic(
    *,
    checker: str = "eslint",
    level: DiagnosticLevel | None = DiagnosticLevel.ERROR,
    message: str | None = "Unexpected token",
    line: int | None = 2,
    column: int | None = 14,
    **overrides: Any,
) -> NormalizedDiagnostic:
    """Return a diagnostic with sensible defaults for tests.

    ``line=None`` produces a diagnostic without location.
    """
    loc: SourceLocation | None = (
        SourceLocation(start=Position(line=line, column=column)) if line is not None else None
    )
    fields: dict[str, Any] = {
        "checker": checker,
        "level": level,
        "message": message,
        "id": "src/main.ts",
        "loc": loc,
    }
    fields.update(overrides)
    return NormalizedDiagnostic(**fields)


@pytest.fixture
def diagnostic_factory() -> Callable[..., NormalizedDiagnostic]:
    """Return `make_diagnostic` as a fixture."""
    return make_diagnostic
