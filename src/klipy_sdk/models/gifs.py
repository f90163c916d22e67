"""GIF search response models."""

from __future__ import annotations

from pydantic import Field

from klipy_sdk.models.base import KlipyModel


class GifVariant(KlipyModel):
    url: str = Field(min_length=1)
    dims: tuple[float, float] | None = None
    size: float | None = None
    duration: float | None = None
    preview: str | None = None


class GifItem(KlipyModel):
    id: str = Field(min_length=1)
    title: str
    url: str = Field(min_length=1)
    item_url: str | None = None
    content_description: str | None = None
    created: float | None = None
    tags: tuple[str, ...] = ()
    variants: dict[str, GifVariant] = Field(default_factory=dict)


class SearchResponse(KlipyModel):
    results: list[GifItem] = Field(default_factory=list)
    next: str | None = None
