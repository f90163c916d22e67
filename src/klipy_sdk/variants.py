"""Pick which rendition of a GIF to act on."""

from __future__ import annotations

from klipy_sdk.models.gifs import GifItem, GifVariant

_FALLBACK_KEYS = ("gif", "tinygif", "mp4")
# Small renditions first: list thumbnails should stay cheap to load.
_LIST_PREVIEW_KEYS = ("tinygifpreview", "nanogifpreview", "gifpreview", "tinygif", "nanogif", "gif")
_DETAIL_GIF_KEYS = ("tinygif", "gif", "nanogif")


def pick_preferred_variant(item: GifItem, preferred_key: str) -> GifVariant:
    """Return the variant to copy/open for ``item``.

    Never fails: when the item carries no usable variant a bare variant is
    built from ``item.url``.
    """
    for key in (preferred_key, *_FALLBACK_KEYS):
        variant = item.variants.get(key)
        if variant is not None:
            return variant
    first = next(iter(item.variants.values()), None)
    if first is not None:
        return first
    return GifVariant(url=item.url)


def pick_list_preview_url(item: GifItem, fallback_url: str) -> str:
    for key in _LIST_PREVIEW_KEYS:
        variant = item.variants.get(key)
        if variant is None:
            continue
        if variant.preview:
            return variant.preview
        return variant.url
    for variant in item.variants.values():
        if variant.preview:
            return variant.preview
    return fallback_url


def pick_detail_gif_url(item: GifItem, fallback_url: str) -> str:
    for key in _DETAIL_GIF_KEYS:
        variant = item.variants.get(key)
        if variant is not None:
            return variant.url
    return fallback_url
