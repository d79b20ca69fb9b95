"""Cooperative cancellation for in-flight fetches."""

import asyncio


class CancellationToken:
    """Signal shared between a caller and the fetches it started.

    Once ``cancel()`` is called, the in-flight request is aborted, any
    pending retry delay is skipped and the fetch raises
    ``FetchCancelledError``. A token cannot be reset.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()
