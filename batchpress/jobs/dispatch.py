"""Supervised background dispatch for runner coroutines.

Tasks are tracked so they are not garbage collected before finishing, and
crashes surface in the log instead of disappearing with the task.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class BackgroundDispatcher:
    """Fire-and-forget task launcher scoped to one session."""

    def __init__(self):
        self._tasks: set[asyncio.Task[Any]] = set()

    def dispatch_spawn(self, coro: Coroutine[Any, Any, Any], *, name: str | None = None) -> asyncio.Task[Any]:
        """Schedule a coroutine on the running loop and supervise it.

        Args:
            coro: Coroutine to run in the background.
            name: Optional task name used in diagnostics.

        Returns:
            asyncio.Task: Scheduled task.

        Raises:
            RuntimeError: Raised when called without a running event loop.
        """

        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._dispatch_finished)
        logger.debug("dispatched background task %s", task.get_name())
        return task

    def dispatch_require_loop(self) -> None:
        """Fail fast when no event loop is running to host dispatched tasks.

        Raises:
            RuntimeError: Raised when called outside a running event loop.
        """

        asyncio.get_running_loop()

    def dispatch_pending_count(self) -> int:
        return len(self._tasks)

    async def dispatch_wait_idle(self) -> None:
        """Wait until every task dispatched so far, and any they dispatch, has finished."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _dispatch_finished(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.debug("background task %s cancelled", task.get_name())
            return
        error = task.exception()
        if error is not None:
            logger.error("background task %s failed", task.get_name(), exc_info=error)
