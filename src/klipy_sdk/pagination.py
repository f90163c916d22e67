"""Async iterator over ``next``/``pos`` paginated GIF results."""

from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable

from klipy_sdk.models.gifs import GifItem, SearchResponse

PageFetcher = Callable[[str | None], Awaitable[SearchResponse]]


class GifPaginator(AsyncIterator[GifItem]):
    """Yields GIFs across pages until the provider stops returning a cursor.

    ``fetch_page`` receives the ``pos`` cursor (``None`` for the first page)
    and returns one normalized page.
    """

    def __init__(self, fetch_page: PageFetcher, *, max_pages: int | None = None) -> None:
        self._fetch_page = fetch_page
        self._max_pages = max_pages
        self._buffer: list[GifItem] = []
        self._cursor: str | None = None
        self._pages = 0
        self._exhausted = False

    @property
    def pages_fetched(self) -> int:
        return self._pages

    def __aiter__(self) -> AsyncIterator[GifItem]:
        return self

    async def __anext__(self) -> GifItem:
        if self._buffer:
            return self._buffer.pop(0)
        if self._exhausted:
            raise StopAsyncIteration
        await self._next_page()
        if not self._buffer:
            raise StopAsyncIteration
        return self._buffer.pop(0)

    async def _next_page(self) -> None:
        page = await self._fetch_page(self._cursor)
        self._pages += 1
        self._buffer = list(page.results)
        self._cursor = page.next
        if not self._cursor or not page.results:
            self._exhausted = True
        if self._max_pages is not None and self._pages >= self._max_pages:
            self._exhausted = True

    async def flatten(self) -> list[GifItem]:
        """Consume the full iterator into a list."""
        result: list[GifItem] = []
        async for item in self:
            result.append(item)
        return result
