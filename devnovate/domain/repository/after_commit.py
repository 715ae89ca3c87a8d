"""Callbacks deferred until the request's transaction has committed."""

from collections.abc import Awaitable, Callable
from typing import List

import logfire

Callback = Callable[[], Awaitable[object]]


class AfterCommit:
    """Request-scoped queue of side effects that must not outrun the commit.

    The session provider runs the queue once the commit succeeds and
    discards it when the request fails.
    """

    def __init__(self) -> None:
        self._callbacks: List[Callback] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def add(self, callback: Callback) -> None:
        """Queue a callback for after the commit."""
        self._callbacks.append(callback)

    async def run(self) -> None:
        """Run queued callbacks in order, then empty the queue.

        A failing callback is logged and does not stop the others.
        """
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            try:
                await callback()
            except Exception as e:
                logfire.warn("After-commit callback failed", error=str(e))

    def discard(self) -> None:
        """Drop queued callbacks because the transaction rolled back."""
        if self._callbacks:
            logfire.info("After-commit callbacks discarded", count=len(self._callbacks))
        self._callbacks = []
