"""Klipy SDK — async Python client for the Klipy GIF API."""

from klipy_sdk.cache import ResponseCache
from klipy_sdk.cancel import CancellationToken
from klipy_sdk.client import Client
from klipy_sdk.config import Preferences, get_preferences
from klipy_sdk.errors import (
    KlipyCancelledError,
    KlipyCommandError,
    KlipyConfigError,
    KlipyError,
    KlipyHTTPError,
    KlipyNetworkError,
)
from klipy_sdk.models import GifItem, GifVariant, SearchResponse
from klipy_sdk.normalize import parse_search_payload, parse_terms, unique_terms
from klipy_sdk.variants import pick_preferred_variant

__all__ = [
    "CancellationToken",
    "Client",
    "GifItem",
    "GifVariant",
    "KlipyCancelledError",
    "KlipyCommandError",
    "KlipyConfigError",
    "KlipyError",
    "KlipyHTTPError",
    "KlipyNetworkError",
    "Preferences",
    "ResponseCache",
    "SearchResponse",
    "get_preferences",
    "parse_search_payload",
    "parse_terms",
    "pick_preferred_variant",
    "unique_terms",
]
