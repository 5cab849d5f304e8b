# checkrelay:header:start
#
#   project      : CheckRelay
#   file         : deferred.py
#   file_relpath : src/checkrelay/reporting/deferred.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# checkrelay:header:end

"""Run a callback once the current synchronous work is done.

Used to take log emission off the current call stack. Inside a running
`asyncio` loop the callback goes to the next loop iteration; elsewhere it is
handed to one shared background thread. Both paths run callbacks in the order
they were scheduled and always run them to completion (there is no
cancellation).
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING

from checkrelay.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from checkrelay.config.logging import CheckRelayLogger

logger: CheckRelayLogger = get_logger(__name__)

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            # One worker keeps first-scheduled-first-run ordering.
            _executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="checkrelay-deferred")
        return _executor


def _log_failure(future: Future[object]) -> None:
    exc: BaseException | None = future.exception()
    if exc is not None:
        logger.error("Deferred callback failed: %s", exc, exc_info=exc)


def ensure_call(callback: Callable[[], object]) -> None:
    """Schedule ``callback`` to run after the caller returns.

    Args:
        callback: Zero-argument callable.
    """
    try:
        loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
    except RuntimeError:
        logger.trace("No running event loop; deferring %r to the background thread", callback)
        _get_executor().submit(callback).add_done_callback(_log_failure)
        return
    loop.call_soon(callback)


def wait_for_deferred() -> None:
    """Block until every callback handed to the background thread so far has run."""
    _get_executor().submit(lambda: None).result()
