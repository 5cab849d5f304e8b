# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : model.py
#   file_relpath : src/checkrelay/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Reporter configuration: an immutable snapshot and its mutable builder.

`MutableReporterConfig` collects settings from defaults, a discovered (or
explicit) TOML file and CLI options, in that order; `freeze()` produces the
`ReporterConfig` the rest of the program reads.

TOML keys (top level of ``checkrelay.toml`` or under ``[tool.checkrelay]``):

    log_levels = ["warning", "error", "suggestion", "message"]
    color = "auto"        # auto | always | never
    terminal = true
    overlay = true

Invalid values are logged and ignored; the previous value stays in effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from checkrelay.cli_shared.color import ColorMode
from checkrelay.config.io import TomlTable, extract_tool_section, load_toml_dict
from checkrelay.config.logging import get_logger
from checkrelay.constants import CHECKRELAY_TOML_NAME, PYPROJECT_TOML_NAME
from checkrelay.diagnostic.filters import DEFAULT_LOG_LEVELS
from checkrelay.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from checkrelay.config.logging import CheckRelayLogger

logger: CheckRelayLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Immutable reporter settings.

    Attributes:
        log_levels (tuple[DiagnosticLevel, ...]): Levels selected for reporting.
        color_mode (ColorMode): User intent for ANSI colors.
        terminal (bool): Render full per-diagnostic logs in `checkrelay report`.
        overlay (bool): Emit client payloads in `checkrelay payload`.
        config_files (tuple[Path, ...]): Files the settings were read from.
    """

    log_levels: tuple[DiagnosticLevel, ...] = DEFAULT_LOG_LEVELS
    color_mode: ColorMode = ColorMode.AUTO
    terminal: bool = True
    overlay: bool = True
    config_files: tuple[Path, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML mapping (config file keys)."""
        return {
            "log_levels": [level.name.lower() for level in self.log_levels],
            "color": self.color_mode.value,
            "terminal": self.terminal,
            "overlay": self.overlay,
        }

    def thaw(self) -> MutableReporterConfig:
        """Return a mutable copy of this snapshot."""
        return MutableReporterConfig(
            log_levels=list(self.log_levels),
            color_mode=self.color_mode,
            terminal=self.terminal,
            overlay=self.overlay,
            config_files=list(self.config_files),
        )


@dataclass
class MutableReporterConfig:
    """Mutable builder for `ReporterConfig`."""

    log_levels: list[DiagnosticLevel] = field(default_factory=lambda: list(DEFAULT_LOG_LEVELS))
    color_mode: ColorMode = ColorMode.AUTO
    terminal: bool = True
    overlay: bool = True
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableReporterConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def freeze(self) -> ReporterConfig:
        """Return the immutable snapshot of the current settings."""
        return ReporterConfig(
            log_levels=tuple(self.log_levels),
            color_mode=self.color_mode,
            terminal=self.terminal,
            overlay=self.overlay,
            config_files=tuple(self.config_files),
        )

    def apply_toml_dict(self, data: TomlTable, *, config_file: Path | None = None) -> MutableReporterConfig:
        """Overlay the settings found in a CheckRelay TOML table.

        Args:
            data (TomlTable): Top-level ``checkrelay.toml`` table or ``[tool.checkrelay]``.
            config_file (Path | None): Source file, for messages and provenance.

        Returns:
            MutableReporterConfig: ``self``, for chaining.
        """
        where: str = str(config_file) if config_file else "<config>"

        if "log_levels" in data:
            raw: object = data["log_levels"]
            if isinstance(raw, list):
                self.log_levels = _parse_levels(raw, where)
            else:
                logger.warning("%s: 'log_levels' must be a list, got %r", where, raw)

        if "color" in data:
            mode: ColorMode | None = ColorMode.parse(str(data["color"]))
            if mode is not None:
                self.color_mode = mode

        for key in ("terminal", "overlay"):
            if key in data:
                value: Any = data[key]
                if isinstance(value, bool):
                    setattr(self, key, value)
                else:
                    logger.warning("%s: '%s' must be a boolean, got %r", where, key, value)

        unknown: set[str] = set(data) - {"log_levels", "color", "terminal", "overlay"}
        if unknown:
            logger.warning("%s: ignoring unknown keys: %s", where, ", ".join(sorted(unknown)))

        if config_file is not None:
            self.config_files.append(config_file)
        return self

    def apply_toml_file(self, path: Path) -> MutableReporterConfig:
        """Overlay the settings of a single TOML file.

        A ``pyproject.toml`` without ``[tool.checkrelay]`` contributes nothing.
        """
        logger.debug("Applying CheckRelay config from %s", path)
        section: TomlTable | None = extract_tool_section(path, load_toml_dict(path))
        if section is None:
            logger.info("No [tool.checkrelay] section in %s", path)
            return self
        return self.apply_toml_dict(section, config_file=path)

    def apply_cli_args(
        self,
        *,
        log_levels: Iterable[DiagnosticLevel] | None = None,
        color_mode: ColorMode | None = None,
        terminal: bool | None = None,
        overlay: bool | None = None,
    ) -> MutableReporterConfig:
        """Overlay values given on the command line; ``None`` means not given."""
        if log_levels is not None:
            self.log_levels = list(log_levels)
        if color_mode is not None:
            self.color_mode = color_mode
        if terminal is not None:
            self.terminal = terminal
        if overlay is not None:
            self.overlay = overlay
        return self

    @classmethod
    def load(cls, *, start: Path | None = None, config_path: Path | None = None) -> MutableReporterConfig:
        """Build settings from defaults plus an explicit or discovered config file.

        Args:
            start (Path | None): Directory where discovery starts (defaults to CWD).
            config_path (Path | None): Explicit config file; disables discovery.

        Returns:
            MutableReporterConfig: The merged builder.
        """
        draft: MutableReporterConfig = cls.from_defaults()
        path: Path | None = config_path or discover_config_file(start or Path.cwd())
        if path is not None:
            draft.apply_toml_file(path)
        return draft


def _parse_levels(raw: list[object], where: str) -> list[DiagnosticLevel]:
    levels: list[DiagnosticLevel] = []
    for item in raw:
        level: DiagnosticLevel | None = DiagnosticLevel.parse(item)
        if level is None:
            logger.warning("%s: unknown diagnostic level %r skipped", where, item)
        elif level not in levels:
            levels.append(level)
    return levels


def discover_config_file(start: Path) -> Path | None:
    """Return the nearest CheckRelay config file, walking up from ``start``.

    In each directory ``checkrelay.toml`` is preferred; a ``pyproject.toml``
    counts only when it has a ``[tool.checkrelay]`` table.

    Args:
        start (Path): File or directory where discovery starts.

    Returns:
        Path | None: The config file found, or ``None``.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        candidate: Path = cur / CHECKRELAY_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = cur / PYPROJECT_TOML_NAME
        if pyproject.is_file() and extract_tool_section(pyproject, load_toml_dict(pyproject)) is not None:
            logger.debug("Discovered config file: %s", pyproject)
            return pyproject
        if cur.parent == cur:
            return None
        cur = cur.parent
