"""GIF search API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING

from klipy_sdk.models.gifs import SearchResponse
from klipy_sdk.normalize import parse_search_payload

if TYPE_CHECKING:
    from klipy_sdk.cancel import CancellationToken
    from klipy_sdk.http import HTTPClient


class GifsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    def _limit(self, limit: int | None) -> int:
        return limit if limit is not None else self._http.preferences.result_limit

    async def search(
        self,
        query: str,
        *,
        limit: int | None = None,
        pos: str | None = None,
        signal: CancellationToken | None = None,
    ) -> SearchResponse:
        payload = await self._http.fetch_json(
            "/v2/search",
            {"q": query, "limit": self._limit(limit), "pos": pos},
            signal=signal,
        )
        return parse_search_payload(payload)

    async def trending(
        self,
        *,
        limit: int | None = None,
        pos: str | None = None,
        signal: CancellationToken | None = None,
    ) -> SearchResponse:
        payload = await self._http.fetch_json(
            "/v2/featured",
            {"limit": self._limit(limit), "pos": pos},
            signal=signal,
        )
        return parse_search_payload(payload)
