"""HTTP client wrapping httpx with default params, response caching, and cancellation."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from klipy_sdk.cache import ResponseCache
from klipy_sdk.cancel import CancellationToken
from klipy_sdk.config import Preferences
from klipy_sdk.errors import (
    KlipyCancelledError,
    KlipyConfigError,
    KlipyHTTPError,
    KlipyNetworkError,
)

log = logging.getLogger(__name__)

DEFAULT_TTL_MS = 20_000

QueryValue = str | int | float | bool | None


def build_query(params: dict[str, QueryValue]) -> dict[str, str]:
    """Render query params, dropping ``None`` and ``""`` but keeping ``0``/``False``."""
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


class HTTPClient:
    """Async HTTP client for the Klipy REST API."""

    def __init__(
        self,
        preferences: Preferences,
        *,
        cache: ResponseCache | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.preferences = preferences
        self.base_url = preferences.api_base_url
        self.cache = cache if cache is not None else ResponseCache()
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    def default_params(self, params: dict[str, QueryValue]) -> dict[str, QueryValue]:
        """Merge the auth and filter params every request carries."""
        prefs = self.preferences
        if not prefs.has_api_key:
            raise KlipyConfigError("Missing Klipy API key. Set it in extension preferences.")
        return {
            **params,
            "key": prefs.api_key,
            "client_key": prefs.client_key,
            "media_filter": prefs.media_filter,
            "contentfilter": prefs.content_filter,
            "country": prefs.country,
            "locale": prefs.locale,
        }

    def build_url(self, path: str, params: dict[str, QueryValue]) -> httpx.URL:
        return self._client.build_request("GET", path, params=build_query(params)).url

    async def fetch_json(
        self,
        path: str,
        params: dict[str, QueryValue],
        *,
        signal: CancellationToken | None = None,
        ttl_ms: float = DEFAULT_TTL_MS,
    ) -> Any:
        """GET ``path`` and return the parsed JSON body, served from cache while fresh.

        Raises :class:`KlipyCancelledError` if ``signal`` fires first; the
        caller treats that as "no result" rather than a failure.
        """
        key = self.cache.make_key(path, params)
        entry = self.cache.lookup(key)
        if entry is not None:
            log.debug("cache hit for %s", key)
            return entry.value

        query = build_query(self.default_params(params))
        log.debug("GET %s%s", self.base_url, path)
        response = await self._send(path, query, signal)

        if not response.is_success:
            error = KlipyHTTPError.from_response(response)
            log.warning("%s", error)
            raise error

        try:
            data = response.json()
        except ValueError as exc:
            raise KlipyHTTPError(
                response.status_code, response.text, response, reason="returned invalid JSON"
            ) from exc

        self.cache.store(key, data, ttl_ms)
        return data

    async def _send(
        self,
        path: str,
        query: dict[str, str],
        signal: CancellationToken | None,
    ) -> httpx.Response:
        if signal is None:
            return await self._get(path, query)
        if signal.cancelled:
            raise KlipyCancelledError()

        request = asyncio.ensure_future(self._get(path, query))
        aborted = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait({request, aborted}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            aborted.cancel()
            if not request.done():
                request.cancel()

        if request not in done:
            log.debug("request to %s cancelled", path)
            raise KlipyCancelledError()
        return request.result()

    async def _get(self, path: str, query: dict[str, str]) -> httpx.Response:
        try:
            return await self._client.get(
                path,
                params=query,
                headers={"Accept": "application/json"},
            )
        except httpx.RequestError as exc:
            raise KlipyNetworkError(str(exc)) from exc

    async def close(self) -> None:
        await self._client.aclose()
