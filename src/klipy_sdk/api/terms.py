"""Autocomplete and related-search term lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from klipy_sdk.normalize import parse_terms

if TYPE_CHECKING:
    from klipy_sdk.cancel import CancellationToken
    from klipy_sdk.http import HTTPClient

TERMS_LIMIT = 12
TERMS_TTL_MS = 60_000


class TermsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def autocomplete(
        self,
        query: str,
        *,
        limit: int = TERMS_LIMIT,
        signal: CancellationToken | None = None,
    ) -> list[str]:
        payload = await self._http.fetch_json(
            "/v2/autocomplete",
            {"q": query, "limit": limit},
            signal=signal,
            ttl_ms=TERMS_TTL_MS,
        )
        return parse_terms(payload)

    async def suggestions(
        self,
        query: str,
        *,
        limit: int = TERMS_LIMIT,
        signal: CancellationToken | None = None,
    ) -> list[str]:
        payload = await self._http.fetch_json(
            "/v2/search_suggestions",
            {"q": query, "limit": limit},
            signal=signal,
            ttl_ms=TERMS_TTL_MS,
        )
        return parse_terms(payload)
