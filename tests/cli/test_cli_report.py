# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : test_cli_report.py
#   file_relpath : tests/cli/test_cli_report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CLI tests: `report` command output and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from checkrelay.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
    write_diagnostics,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

ERROR: dict[str, Any] = {
    "message": "Unexpected token",
    "id": "src/main.ts",
    "loc": {"start": {"line": 2, "column": 14}},
    "level": 1,
}
WARNING: dict[str, Any] = {
    "message": "Unused variable",
    "id": "src/main.ts",
    "loc": {"start": {"line": 1, "column": 7}},
    "level": "warning",
}
SOURCE = "const a = 1\nconst b = a +;\nexport { b }\n"


def _doc(*diagnostics: dict[str, Any], name: str | None = None) -> dict[str, Any]:
    doc: dict[str, Any] = {"checker": "eslint", "diagnostics": list(diagnostics)}
    if name:
        doc["name"] = name
    return doc


@mark_cli
def test_report_errors_exit_failure(tmp_path: Path) -> None:
    """Error-level diagnostics are printed with a summary; exit code 1."""
    write_diagnostics(tmp_path / "eslint.json", _doc(ERROR, WARNING, name="ESLint"))

    result = run_cli_in(tmp_path, ["--no-color", "report", "--no-frames", "eslint.json"])

    assert_FAILURE(result)
    assert " ERROR(ESLint)  Unexpected token" in result.output
    assert " FILE  src/main.ts:2:14" in result.output
    assert " WARNING(ESLint)  Unused variable" in result.output
    assert result.output.rstrip().endswith("[ESLint] Found 1 error and 1 warning")
    assert "\x1b[" not in result.output


@mark_cli
def test_report_level_override_filters_errors(tmp_path: Path) -> None:
    """Only the requested levels are reported and counted."""
    write_diagnostics(tmp_path / "eslint.json", _doc(ERROR, WARNING))

    result = run_cli_in(tmp_path, ["report", "--level", "warning", "eslint.json"])

    assert_SUCCESS(result)
    assert "Unexpected token" not in result.output
    assert "[eslint] Found 0 error and 1 warning" in result.output


@mark_cli
def test_report_without_terminal_prints_summary_only(tmp_path: Path) -> None:
    """--no-terminal keeps only the per-checker summary."""
    write_diagnostics(tmp_path / "eslint.json", _doc(ERROR))

    result = run_cli_in(tmp_path, ["report", "--no-terminal", "eslint.json"])

    assert_FAILURE(result)
    assert result.output.strip() == "[eslint] Found 1 error and 0 warning"


@mark_cli
def test_report_builds_code_frames_from_sources(tmp_path: Path) -> None:
    """Missing frames are rendered from the referenced source file."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.ts").write_text(SOURCE, encoding="utf-8")
    write_diagnostics(tmp_path / "eslint.json", _doc(ERROR))

    result = run_cli_in(tmp_path, ["report", "eslint.json"])

    assert_FAILURE(result)
    assert "  > 2 | const b = a +;" in result.output
    assert "    |              ^" in result.output


@mark_cli
def test_report_reads_stdin_list(tmp_path: Path) -> None:
    """A plain list on STDIN is attributed to the 'stdin' checker unless entries name one."""
    data = [dict(ERROR, level=0), dict(WARNING, checker="tsc")]

    result = run_cli_in(tmp_path, ["report", "--no-frames"], input_text=json.dumps(data))

    assert_SUCCESS(result)
    assert "[stdin] Found 0 error and 1 warning" in result.output
    assert "[tsc] Found 0 error and 1 warning" in result.output


@mark_cli
def test_report_forced_color(tmp_path: Path) -> None:
    """--color always keeps ANSI styling in the output."""
    write_diagnostics(tmp_path / "eslint.json", _doc(WARNING))

    result = run_cli_in(tmp_path, ["--color", "always", "report", "--no-frames", "eslint.json"])

    assert_SUCCESS(result)
    assert "\x1b[33m[eslint] Found 0 error and 1 warning\x1b[0m" in result.output


@mark_cli
def test_report_quiet_prints_nothing_but_keeps_exit_code(tmp_path: Path) -> None:
    """-q suppresses output; the exit code still reflects errors."""
    write_diagnostics(tmp_path / "eslint.json", _doc(ERROR))

    result = run_cli_in(tmp_path, ["-q", "report", "eslint.json"])

    assert_FAILURE(result)
    assert result.output == ""


@mark_cli
def test_report_uses_discovered_config(tmp_path: Path) -> None:
    """log_levels from checkrelay.toml apply when no --level is given."""
    (tmp_path / "checkrelay.toml").write_text('log_levels = ["warning"]\n', encoding="utf-8")
    write_diagnostics(tmp_path / "eslint.json", _doc(ERROR, WARNING))

    result = run_cli_in(tmp_path, ["report", "eslint.json"])

    assert_SUCCESS(result)
    assert "Unexpected token" not in result.output


@mark_cli
def test_report_missing_input_file(tmp_path: Path) -> None:
    """A missing input maps to FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["report", "nope.json"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_report_path_below_a_file_is_skipped(tmp_path: Path) -> None:
    """A path through a regular file maps to FILE_NOT_FOUND; later inputs still render."""
    write_diagnostics(tmp_path / "eslint.json", _doc(WARNING))

    result = run_cli_in(tmp_path, ["report", "--no-frames", "eslint.json/x.json", "eslint.json"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Cannot read eslint.json/x.json" in result.output
    assert "[eslint] Found 0 error and 1 warning" in result.output


@mark_cli
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (PermissionError(13, "Permission denied"), ExitCode.PERMISSION_DENIED),
        (OSError(5, "Input/output error"), ExitCode.IO_ERROR),
    ],
)
def test_report_read_errors(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, error: OSError, expected: ExitCode
) -> None:
    """Other read failures are reported with their sysexits code instead of crashing."""

    def _fail(source: str) -> tuple[str, str]:
        raise error

    monkeypatch.setattr("checkrelay.cli.cmd_common.read_input_text", _fail)

    result = run_cli_in(tmp_path, ["report", "eslint.json"])

    assert result.exit_code == expected, result.output
    assert "Cannot read eslint.json" in result.output


@mark_cli
def test_report_invalid_json(tmp_path: Path) -> None:
    """Undecodable input maps to DATA_ERROR."""
    (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
    result = run_cli_in(tmp_path, ["report", "bad.json"])
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


@mark_cli
def test_report_wrong_shape(tmp_path: Path) -> None:
    """A diagnostic without a message string maps to DATA_ERROR."""
    write_diagnostics(tmp_path / "x.json", [{"checker": "x", "message": 1}])
    result = run_cli_in(tmp_path, ["report", "x.json"])
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


@mark_cli
def test_report_explicit_config_missing(tmp_path: Path) -> None:
    """A missing --config file maps to CONFIG_ERROR."""
    write_diagnostics(tmp_path / "eslint.json", _doc())
    result = run_cli_in(tmp_path, ["report", "--config", "missing.toml", "eslint.json"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """-v and -q together are a usage error."""
    assert_USAGE_ERROR(run_cli(["-v", "-q", "version"]))


@mark_cli
def test_unknown_level_is_rejected() -> None:
    """--level only accepts level names."""
    result = run_cli(["report", "--level", "fatal"])
    assert result.exit_code == 2
    assert "Invalid value 'fatal'" in result.output
