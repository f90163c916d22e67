"""Cooperative cancellation for in-flight requests."""

from __future__ import annotations

import asyncio


class CancellationToken:
    """One per query cycle.  Cancelling it aborts the cycle's pending request.

    Code that resumes after an ``await`` checks :attr:`cancelled` before
    touching anything the user can see.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()
