# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : reporter.py
#   file_relpath : src/checkrelay/reporting/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Reporting a line of text, wherever the code runs.

On the main thread text goes straight to the console. Checkers running in a
worker thread (or process) have no console of their own; they post a
`ConsoleAction` message to the owning side instead, which prints the payload
(see `drain_channel`).

The reporter is chosen once per thread with `select_reporter` and installed
with `install_reporter`; `console_log` then reports through it, so call sites
never branch on the execution context themselves.
"""

from __future__ import annotations

import queue
import threading
from enum import Enum
from typing import TYPE_CHECKING, Protocol, TypedDict

from checkrelay.config.logging import get_logger

if TYPE_CHECKING:
    from checkrelay.cli_shared.console_api import ConsoleLike
    from checkrelay.config.logging import CheckRelayLogger

logger: CheckRelayLogger = get_logger(__name__)


class ActionType(str, Enum):
    """Message types exchanged between worker and owner."""

    CONSOLE = "console"


class ConsoleAction(TypedDict):
    """A line of text a worker asks its owner to print."""

    type: str
    payload: str


class Channel(Protocol):
    """Sending end of a message channel (`queue.Queue`, `multiprocessing.Queue`, ...)."""

    def put(self, item: ConsoleAction) -> None:
        """Send ``item`` to the receiving side."""
        ...


class ReceivingChannel(Protocol):
    """Receiving end of a message channel."""

    def get_nowait(self) -> object:
        """Return the next queued item or raise `queue.Empty`."""
        ...


class Reporter(Protocol):
    """Reports one line of text."""

    def report(self, value: str) -> None:
        """Report ``value``."""
        ...


class ConsoleReporter:
    """Reporter that prints to a console (main-thread context)."""

    def __init__(self, console: ConsoleLike | None = None) -> None:
        if console is None:
            from checkrelay.cli.console import ClickConsole

            console = ClickConsole()
        self.console: ConsoleLike = console

    def report(self, value: str) -> None:
        """Print ``value`` on the console."""
        self.console.print(value)


class ChannelReporter:
    """Reporter that forwards text to the owning thread (worker context)."""

    def __init__(self, channel: Channel) -> None:
        self.channel: Channel = channel

    def report(self, value: str) -> None:
        """Post ``value`` as a console action; the message is a copy, never shared state."""
        self.channel.put({"type": ActionType.CONSOLE.value, "payload": value})


def is_main_thread() -> bool:
    """Return True when called from the interpreter's main thread."""
    return threading.current_thread() is threading.main_thread()


def select_reporter(
    channel: Channel | None = None,
    *,
    console: ConsoleLike | None = None,
) -> Reporter:
    """Pick the reporter for the current execution context.

    Args:
        channel: Channel to the owning thread; used only off the main thread.
        console: Console used on the main thread (a `ClickConsole` by default).

    Returns:
        A `ChannelReporter` in a worker thread that has a channel, otherwise a
        `ConsoleReporter`.
    """
    if not is_main_thread():
        if channel is not None:
            return ChannelReporter(channel)
        logger.debug("No channel for worker thread %s; reporting to the console", threading.get_ident())
    return ConsoleReporter(console)


_local = threading.local()


def install_reporter(reporter: Reporter | None) -> None:
    """Install ``reporter`` as the default for the current thread (``None`` resets it)."""
    _local.reporter = reporter


def get_reporter() -> Reporter:
    """Return the current thread's reporter, selecting a console reporter if none is installed."""
    reporter: Reporter | None = getattr(_local, "reporter", None)
    if reporter is None:
        reporter = select_reporter()
        _local.reporter = reporter
    return reporter


def console_log(value: str, reporter: Reporter | None = None) -> None:
    """Report ``value`` through ``reporter`` or the current thread's default reporter."""
    (reporter or get_reporter()).report(value)


def drain_channel(channel: ReceivingChannel, reporter: Reporter) -> int:
    """Print every queued console action from ``channel`` through ``reporter``.

    This is the owner-side counterpart of `ChannelReporter`. It does not block.
    Items that are not console actions are logged and skipped.

    Args:
        channel: Receiving end of the worker channel.
        reporter: Reporter for the owner (typically a `ConsoleReporter`).

    Returns:
        The number of payloads reported.
    """
    count: int = 0
    while True:
        try:
            item: object = channel.get_nowait()
        except queue.Empty:
            return count
        if isinstance(item, dict) and item.get("type") == ActionType.CONSOLE.value:
            reporter.report(str(item.get("payload", "")))
            count += 1
        else:
            logger.warning("Skipping unexpected channel message: %r", item)
