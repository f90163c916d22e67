"""High-level Klipy client composing HTTP and API groups."""

from __future__ import annotations

from typing import Any

from klipy_sdk.api.gifs import GifsAPI
from klipy_sdk.api.terms import TermsAPI
from klipy_sdk.cache import ResponseCache
from klipy_sdk.config import Preferences, get_preferences
from klipy_sdk.http import HTTPClient
from klipy_sdk.pagination import GifPaginator


class Client:
    """Top-level SDK client.

    Usage::

        async with Client(Preferences(api_key="...")) as client:
            page = await client.gifs.search("cats")
            terms = await client.terms.autocomplete("ca")
    """

    def __init__(
        self,
        preferences: Preferences | None = None,
        *,
        cache: ResponseCache | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.preferences = preferences if preferences is not None else get_preferences()
        self.http = HTTPClient(self.preferences, cache=cache, timeout=timeout)
        self.gifs = GifsAPI(self.http)
        self.terms = TermsAPI(self.http)

    @property
    def cache(self) -> ResponseCache:
        return self.http.cache

    # --- Pagination ---

    def paginate_search(
        self, query: str, *, limit: int | None = None, max_pages: int | None = None
    ) -> GifPaginator:
        async def fetch(pos: str | None):
            return await self.gifs.search(query, limit=limit, pos=pos)

        return GifPaginator(fetch, max_pages=max_pages)

    def paginate_trending(
        self, *, limit: int | None = None, max_pages: int | None = None
    ) -> GifPaginator:
        async def fetch(pos: str | None):
            return await self.gifs.trending(limit=limit, pos=pos)

        return GifPaginator(fetch, max_pages=max_pages)

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
