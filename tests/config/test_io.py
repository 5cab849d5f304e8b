# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Tests for TOML I/O helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import toml

from checkrelay.config.io import default_config_toml, extract_tool_section, load_toml_dict, to_toml
from checkrelay.config.model import ReporterConfig

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_reads_file(tmp_path: Path) -> None:
    """A valid file is parsed into a dict."""
    path = tmp_path / "checkrelay.toml"
    path.write_text('color = "never"\n', encoding="utf-8")
    assert load_toml_dict(path) == {"color": "never"}


def test_load_toml_dict_returns_empty_on_errors(tmp_path: Path) -> None:
    """Missing or malformed files are logged and read as empty."""
    assert load_toml_dict(tmp_path / "missing.toml") == {}

    bad = tmp_path / "bad.toml"
    bad.write_text("color = \n", encoding="utf-8")
    assert load_toml_dict(bad) == {}


def test_extract_tool_section(tmp_path: Path) -> None:
    """pyproject.toml contributes [tool.checkrelay]; other files count whole."""
    pyproject = tmp_path / "pyproject.toml"
    assert extract_tool_section(pyproject, {"tool": {"checkrelay": {"terminal": False}}}) == {
        "terminal": False
    }
    assert extract_tool_section(pyproject, {"tool": {"ruff": {}}}) is None
    assert extract_tool_section(pyproject, {}) is None
    assert extract_tool_section(tmp_path / "checkrelay.toml", {"a": 1}) == {"a": 1}


def test_default_config_toml_is_commented_and_parseable() -> None:
    """The starter document carries comments and the default values."""
    defaults = ReporterConfig().to_toml_dict()
    text = default_config_toml(defaults)

    assert text.startswith("# checkrelay configuration")
    assert "# Color output: auto, always or never" in text
    assert toml.loads(text) == defaults


def test_default_config_toml_for_pyproject() -> None:
    """With pyproject=True the settings live under [tool.checkrelay]."""
    defaults = ReporterConfig().to_toml_dict()
    text = default_config_toml(defaults, pyproject=True)

    assert "[tool.checkrelay]" in text
    assert toml.loads(text) == {"tool": {"checkrelay": defaults}}


def test_to_toml() -> None:
    """Mappings serialize to TOML text."""
    assert toml.loads(to_toml({"terminal": True})) == {"terminal": True}
