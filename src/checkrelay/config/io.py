# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : io.py
#   file_relpath : src/checkrelay/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Lightweight TOML I/O helpers for CheckRelay configuration.

Reading uses ``toml``; the annotated starter document printed by
``checkrelay config init`` is built with ``tomlkit`` so it can carry comments.
These helpers never mutate configuration objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit

from checkrelay.config.logging import get_logger
from checkrelay.constants import CHECKRELAY, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit.items import Table

    from checkrelay.config.logging import CheckRelayLogger

logger: CheckRelayLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "load_toml_dict",
    "extract_tool_section",
    "to_toml",
    "default_config_toml",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``checkrelay.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        val: TomlTable = toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        val = {}
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        val = {}
    return val


def extract_tool_section(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the CheckRelay table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.checkrelay]`` (``None`` when absent);
    any other file is a CheckRelay file and is returned whole.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: object = data.get("tool", {})
    section: object = tool.get(PYPROJECT_TOOL_SECTION) if is_toml_table(tool) else None
    return section if is_toml_table(section) else None


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return toml.dumps(toml_dict)


def default_config_toml(defaults: TomlTable, *, pyproject: bool = False) -> str:
    """Render an annotated starter configuration.

    Args:
        defaults (TomlTable): Default values, as produced by
            `ReporterConfig.to_toml_dict`.
        pyproject (bool): If True, nest the settings under ``[tool.checkrelay]``
            for inclusion in ``pyproject.toml``.

    Returns:
        str: The TOML document, comments included.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment(f"{CHECKRELAY} configuration"))
    doc.add(tomlkit.nl())

    if pyproject:
        body: Table = tomlkit.table()
        _add_settings(body, defaults)
        tool: Table = tomlkit.table(is_super_table=True)
        tool.add(PYPROJECT_TOOL_SECTION, body)
        doc.add("tool", tool)
    else:
        _add_settings(doc, defaults)
    return tomlkit.dumps(doc)


def _add_settings(target: Table | tomlkit.TOMLDocument, defaults: TomlTable) -> None:
    target.add(tomlkit.comment("Diagnostic levels to report: warning, error, suggestion, message"))
    target.add("log_levels", defaults.get("log_levels", []))
    target.add(tomlkit.comment("Color output: auto, always or never"))
    target.add("color", defaults.get("color", "auto"))
    target.add(tomlkit.comment("Print per-diagnostic code frames in `checkrelay report`"))
    target.add("terminal", defaults.get("terminal", True))
    target.add(tomlkit.comment("Emit client payloads in `checkrelay payload`"))
    target.add("overlay", defaults.get("overlay", True))
