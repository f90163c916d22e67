"""SDK response models."""

from klipy_sdk.models.base import KlipyModel
from klipy_sdk.models.enums import ActionKind, BrowserMode, DefaultAction, SuggestionKind
from klipy_sdk.models.gifs import GifItem, GifVariant, SearchResponse

__all__ = [
    "ActionKind",
    "BrowserMode",
    "DefaultAction",
    "GifItem",
    "GifVariant",
    "KlipyModel",
    "SearchResponse",
    "SuggestionKind",
]
