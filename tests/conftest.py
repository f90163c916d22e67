"""Shared test fixtures for SDK tests."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from klipy_sdk.cache import ResponseCache
from klipy_sdk.client import Client
from klipy_sdk.config import Preferences
from klipy_sdk.http import HTTPClient

BASE_URL = "https://klipy.test"


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class FakeHost:
    """Records every launcher call the SDK makes."""

    def __init__(self, selected_text: str = "") -> None:
        self.selected_text = selected_text
        self.copied: list[str] = []
        self.opened: list[tuple[str, str | None]] = []
        self.huds: list[str] = []
        self.toasts: list[tuple[str, str]] = []
        self.closed = 0

    async def copy(self, text: str) -> None:
        self.copied.append(text)

    async def open(self, target: str, app: str | None = None) -> None:
        self.opened.append((target, app))

    async def show_hud(self, message: str) -> None:
        self.huds.append(message)

    async def show_toast(self, title: str, message: str) -> None:
        self.toasts.append((title, message))

    async def close_main_window(self) -> None:
        self.closed += 1

    async def get_selected_text(self) -> str:
        return self.selected_text


class RecordingTransport(httpx.AsyncBaseTransport):
    """Returns ``response`` (or ``handler(request)``) and records each request."""

    def __init__(self, calls: list[dict[str, Any]]) -> None:
        self.calls = calls
        self.response = httpx.Response(200, json={"results": []})
        self.handler: Callable[[httpx.Request], Any] | None = None

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.calls.append({
            "method": request.method,
            "url": str(request.url),
            "path": request.url.path,
            "params": dict(request.url.params),
            "headers": dict(request.headers),
        })
        if self.handler is not None:
            result = self.handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result
        return self.response


def attach_transport(http: HTTPClient, transport: httpx.AsyncBaseTransport) -> None:
    """Replace the inner httpx client with one using ``transport``."""
    http._client = httpx.AsyncClient(base_url=http.base_url, transport=transport)


@pytest.fixture
def prefs() -> Preferences:
    return Preferences(api_key="test-key", api_base_url=BASE_URL)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mock_transport():
    calls: list[dict[str, Any]] = []
    transport = RecordingTransport(calls)
    return transport, calls


@pytest.fixture
def http_client(prefs, clock, mock_transport):
    """HTTPClient with a mock transport and a fake-clock cache."""
    transport, calls = mock_transport
    client = HTTPClient(prefs, cache=ResponseCache(clock=clock))
    attach_transport(client, transport)
    return client, transport, calls


@pytest.fixture
def client(prefs, clock, mock_transport):
    """Client with a mock transport and a fake-clock cache."""
    transport, calls = mock_transport
    c = Client(prefs, cache=ResponseCache(clock=clock))
    attach_transport(c.http, transport)
    return c, transport, calls


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


def gif_payload(gif_id: str, title: str = "", **extra: Any) -> dict[str, Any]:
    """A realistic search-result element."""
    item: dict[str, Any] = {
        "id": gif_id,
        "title": title or f"GIF {gif_id}",
        "itemurl": f"https://klipy.com/gifs/{gif_id}",
        "media_formats": {
            "gif": {"url": f"https://static.klipy.test/{gif_id}.gif", "dims": [498, 280], "size": 2048},
            "tinygif": {"url": f"https://static.klipy.test/{gif_id}-tiny.gif", "preview": f"https://static.klipy.test/{gif_id}-tiny.png"},
            "mp4": {"url": f"https://static.klipy.test/{gif_id}.mp4", "duration": 1.5},
        },
    }
    item.update(extra)
    return item
