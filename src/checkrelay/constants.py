# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : constants.py
#   file_relpath : src/checkrelay/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""CheckRelay Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

CHECKRELAY: Final[str] = "checkrelay"

try:
    CHECKRELAY_VERSION: str = get_version(CHECKRELAY)
except PackageNotFoundError:
    CHECKRELAY_VERSION = "0.0.0"

# Event tag shared by the payload producer and the overlay client.
WS_CHECKER_ERROR_EVENT: Final[str] = "checkrelay:error"

# Config discovery
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
CHECKRELAY_TOML_NAME: Final[str] = "checkrelay.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "checkrelay"

LOG_LEVEL_ENV_VAR: Final[str] = "CHECKRELAY_LOG_LEVEL"
