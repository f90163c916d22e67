"""Interactive, search-as-you-type views over the Klipy API.

Every keystroke schedules a new cycle: the previous cycle's token is
cancelled, the new one waits out a short debounce window and then fetches.
A cycle only touches view state while its token is still live, so a late
response or error from a superseded query is dropped without a trace.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar
from urllib.parse import quote

from klipy_sdk.actions import GifAction, build_actions, page_url
from klipy_sdk.cancel import CancellationToken
from klipy_sdk.config import Preferences
from klipy_sdk.errors import KlipyCancelledError, KlipyError
from klipy_sdk.formatting import (
    created_date,
    format_bytes,
    format_dims,
    render_detail_markdown,
)
from klipy_sdk.models.enums import BrowserMode, SuggestionKind
from klipy_sdk.models.gifs import GifItem, SearchResponse
from klipy_sdk.normalize import unique_terms
from klipy_sdk.variants import pick_detail_gif_url, pick_list_preview_url, pick_preferred_variant

if TYPE_CHECKING:
    from klipy_sdk.client import Client
    from klipy_sdk.host import Host

log = logging.getLogger(__name__)

SEARCH_DEBOUNCE = 0.22
TRENDING_DEBOUNCE = 0.05
KLIPY_SEARCH_URL = "https://klipy.com/search/"

T = TypeVar("T")


class QueryLoop(ABC, Generic[T]):
    """Base for debounced views: one live cycle at a time."""

    failure_title = "Request failed"

    def __init__(self, host: Host, *, debounce: float | None = None) -> None:
        self._host = host
        self._debounce = debounce
        self._token: CancellationToken | None = None
        self._task: asyncio.Task[None] | None = None
        self.is_loading = False
        self.error: str | None = None

    def _default_debounce(self) -> float:
        return SEARCH_DEBOUNCE

    @abstractmethod
    async def _fetch(self, query: str, token: CancellationToken) -> T:
        """Load results for one cycle, passing ``token`` to every request."""

    @abstractmethod
    def _apply(self, result: T) -> None: ...

    @abstractmethod
    def _clear(self) -> None: ...

    def schedule(self, query: str) -> asyncio.Task[None]:
        """Cancel the running cycle and start a new one for ``query``."""
        self.cancel()
        token = CancellationToken()
        self._token = token
        self._task = asyncio.ensure_future(self._cycle(query, token))
        return self._task

    def cancel(self) -> None:
        if self._token is not None:
            self._token.cancel()

    async def settle(self) -> None:
        """Wait until the most recent cycle has finished."""
        if self._task is not None:
            await asyncio.wait({self._task})

    async def close(self) -> None:
        self.cancel()
        await self.settle()

    async def _cycle(self, query: str, token: CancellationToken) -> None:
        delay = self._debounce if self._debounce is not None else self._default_debounce()
        try:
            await asyncio.wait_for(token.wait(), timeout=delay)
        except asyncio.TimeoutError:
            pass
        if token.cancelled:
            return

        self.is_loading = True
        self.error = None
        try:
            result = await self._fetch(query, token)
        except KlipyCancelledError:
            return
        except Exception as exc:
            if token.cancelled:
                return
            self.error = str(exc) or "Unknown API error"
            self._clear()
            self.is_loading = False
            log.warning(
                "%s: %s", self.failure_title, exc, exc_info=not isinstance(exc, KlipyError)
            )
            await self._host.show_toast(self.failure_title, self.error)
            return
        finally:
            if not token.cancelled:
                self.is_loading = False

        if token.cancelled:
            return
        self._apply(result)


# ---------------------------------------------------------------------------
# Browse / search
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GifListEntry:
    id: str
    title: str
    preview_url: str
    detail_gif_url: str
    preferred_format: str
    dims: str | None
    size: str | None
    created: str | None
    page_url: str
    keywords: tuple[str, ...]
    markdown: str
    actions: tuple[GifAction, ...]


def list_entry(item: GifItem, prefs: Preferences) -> GifListEntry:
    preferred = pick_preferred_variant(item, prefs.default_media_format)
    preview = pick_list_preview_url(item, preferred.url)
    return GifListEntry(
        id=item.id,
        title=item.title,
        preview_url=preview,
        detail_gif_url=pick_detail_gif_url(item, preferred.url),
        preferred_format=prefs.default_media_format,
        dims=format_dims(preferred.dims),
        size=format_bytes(preferred.size),
        created=created_date(item.created),
        page_url=page_url(item),
        keywords=(*item.tags, item.content_description or "", item.title),
        markdown=render_detail_markdown(item, preview),
        actions=tuple(build_actions(item, prefs)),
    )


class GifBrowser(QueryLoop[SearchResponse]):
    """Trending list, or search results once the user types a query."""

    failure_title = "Failed to load GIFs"

    def __init__(
        self,
        client: Client,
        host: Host,
        mode: BrowserMode | str = BrowserMode.search,
        initial_query: str = "",
        *,
        debounce: float | None = None,
    ) -> None:
        super().__init__(host, debounce=debounce)
        self._client = client
        self.mode = BrowserMode(mode)
        self.search_text = initial_query
        self.items: list[GifItem] = []

    @property
    def query(self) -> str:
        return self.search_text.strip()

    def _default_debounce(self) -> float:
        return TRENDING_DEBOUNCE if self.mode is BrowserMode.trending else SEARCH_DEBOUNCE

    def start(self) -> asyncio.Task[None]:
        return self.schedule(self.query)

    def set_search_text(self, text: str) -> asyncio.Task[None]:
        self.search_text = text
        return self.schedule(self.query)

    async def _fetch(self, query: str, token: CancellationToken) -> SearchResponse:
        if self.mode is BrowserMode.trending or not query:
            return await self._client.gifs.trending(signal=token)
        return await self._client.gifs.search(
            query, limit=self._client.preferences.result_limit, signal=token
        )

    def _apply(self, result: SearchResponse) -> None:
        self.items = list(result.results)

    def _clear(self) -> None:
        self.items = []

    @property
    def entries(self) -> list[GifListEntry]:
        return [list_entry(item, self._client.preferences) for item in self.items]

    @property
    def empty_title(self) -> str:
        if self.error:
            return "Request failed"
        if self.mode is BrowserMode.search and not self.query:
            return "Type to search, or browse trending GIFs"
        return "No GIFs found"

    @property
    def empty_description(self) -> str:
        if self.error:
            return self.error
        if self.mode is BrowserMode.search:
            return "Try a broader query"
        return "No trending GIFs are available right now"


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SuggestionEntry:
    term: str
    kind: SuggestionKind

    @property
    def id(self) -> str:
        return f"{self.kind.value}-{self.term}"

    @property
    def website_url(self) -> str:
        return KLIPY_SEARCH_URL + quote(self.term, safe="!*'()")


class GifSuggester(QueryLoop[tuple[list[str], list[str]]]):
    """Autocomplete and related-search terms for the text being typed."""

    failure_title = "Failed to fetch suggestions"

    def __init__(self, client: Client, host: Host, *, debounce: float | None = None) -> None:
        super().__init__(host, debounce=debounce)
        self._client = client
        self.search_text = ""
        self.autocomplete: list[str] = []
        self.related: list[str] = []

    @property
    def query(self) -> str:
        return self.search_text.strip()

    def set_search_text(self, text: str) -> asyncio.Task[None] | None:
        self.search_text = text
        if not self.query:
            self.cancel()
            self._clear()
            self.error = None
            self.is_loading = False
            return None
        return self.schedule(self.query)

    async def _fetch(self, query: str, token: CancellationToken) -> tuple[list[str], list[str]]:
        auto, related = await asyncio.gather(
            self._client.terms.autocomplete(query, signal=token),
            self._client.terms.suggestions(query, signal=token),
            return_exceptions=True,
        )
        for outcome in (auto, related):
            if isinstance(outcome, BaseException):
                raise outcome
        return unique_terms(auto), unique_terms(related)

    def _apply(self, result: tuple[list[str], list[str]]) -> None:
        self.autocomplete, self.related = result

    def _clear(self) -> None:
        self.autocomplete = []
        self.related = []

    @property
    def entries(self) -> list[SuggestionEntry]:
        return [SuggestionEntry(t, SuggestionKind.autocomplete) for t in self.autocomplete] + [
            SuggestionEntry(t, SuggestionKind.related) for t in self.related
        ]

    def browse(self, entry: SuggestionEntry, *, debounce: float | None = None) -> GifBrowser:
        """The search view pushed when a suggestion is picked."""
        return GifBrowser(
            self._client, self._host, BrowserMode.search, entry.term, debounce=debounce
        )

    @property
    def empty_title(self) -> str:
        if not self.query:
            return "Type a query to get suggestions"
        return "No suggestions found"

    @property
    def empty_description(self) -> str:
        if not self.query:
            return "Use suggestions to quickly jump into GIF search"
        return self.error or "Try another keyword"
