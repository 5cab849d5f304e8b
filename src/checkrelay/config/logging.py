# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : logging.py
#   file_relpath : src/checkrelay/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Custom CheckRelay logging with TRACE logging.

This module extends the standard logging module with CheckRelay-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

import click

from checkrelay.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class CheckRelayLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(CheckRelayLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

LOG_LEVELS: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class StyledFormatter(logging.Formatter):
    """Formatter that outputs log records with `click.style` colors based on severity level."""

    def __init__(self, fmt: str | None = None, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)
        if not self.use_color:
            return message

        if level >= logging.CRITICAL:
            return click.style(message, fg="bright_red")
        if level >= logging.ERROR:
            return click.style(message, fg="red")
        if level >= logging.WARNING:
            return click.style(message, fg="yellow")
        if level >= logging.INFO:
            return click.style(message, fg="green")
        if level >= logging.DEBUG:
            return click.style(message, fg="bright_black")
        if level >= TRACE_LEVEL:
            return click.style(message, fg="blue")
        # Fallback color for unknown or lower-than-TRACE levels
        return click.style(message, fg="red", dim=True)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors CHECKRELAY_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return LOG_LEVELS.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    try:
        use_color: bool = sys.stderr.isatty()
    except (AttributeError, ValueError):
        use_color = False
    formatter = StyledFormatter(
        LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
        use_color=use_color,
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> CheckRelayLogger:
    """Retrieve a CheckRelayLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        CheckRelayLogger: A CheckRelayLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("CheckRelayLogger", logger)
