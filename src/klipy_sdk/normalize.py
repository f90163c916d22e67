"""Turn untrusted Klipy JSON into validated GIF records.

Nothing in this module raises for bad input.  Each helper returns ``None``
(or an empty collection) for the fragment it could not read, so a single
malformed field, variant or item costs only itself and the rest of the
payload stays usable.
"""

from __future__ import annotations

import math
from typing import Any

from klipy_sdk.models.gifs import GifItem, GifVariant, SearchResponse

UNTITLED = "Untitled GIF"

# Older payloads nest renditions under ``media`` instead of ``media_formats``.
_VARIANT_FIELDS = ("media_formats", "media")
_TERM_FIELDS = ("term", "searchterm", "name")


def _finite(value: Any) -> float | None:
    """Coerce ints, floats and numeric strings; reject bools, NaN, inf and ``1_000`` digit grouping."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip() and "_" not in value:
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def parse_variant(value: Any) -> GifVariant | None:
    if not isinstance(value, dict):
        return None
    url = _text(value.get("url"))
    if url is None:
        return None

    dims: tuple[float, float] | None = None
    raw_dims = value.get("dims")
    if isinstance(raw_dims, (list, tuple)) and len(raw_dims) == 2:
        width, height = _finite(raw_dims[0]), _finite(raw_dims[1])
        if width is not None and height is not None:
            dims = (width, height)

    preview = value.get("preview")
    return GifVariant(
        url=url,
        dims=dims,
        size=_finite(value.get("size")),
        duration=_finite(value.get("duration")),
        preview=preview if isinstance(preview, str) else None,
    )


def parse_variants(raw: dict[str, Any]) -> dict[str, GifVariant]:
    variants: dict[str, GifVariant] = {}
    formats = None
    for field in _VARIANT_FIELDS:
        formats = raw.get(field)
        if formats is not None:
            break

    if isinstance(formats, dict):
        for key, value in formats.items():
            parsed = parse_variant(value)
            if parsed is not None:
                variants[str(key)] = parsed

    top_url = _text(raw.get("url"))
    if top_url is not None and "gif" not in variants:
        variants["gif"] = GifVariant(url=top_url)
    return variants


def parse_gif_item(value: Any) -> GifItem | None:
    if not isinstance(value, dict):
        return None

    item_id = _text(value.get("id")) or _text(value.get("url")) or _text(value.get("itemurl"))
    if item_id is None:
        return None

    variants = parse_variants(value)
    if "gif" in variants:
        url = variants["gif"].url
    elif variants:
        url = next(iter(variants.values())).url
    else:
        url = _text(value.get("url"))
    if url is None:
        return None

    description = _text(value.get("content_description"))
    tags = value.get("tags")
    return GifItem(
        id=item_id,
        title=_text(value.get("title")) or description or UNTITLED,
        url=url,
        item_url=_text(value.get("itemurl")),
        content_description=description,
        created=_finite(value.get("created")),
        tags=tuple(t for t in tags if isinstance(t, str)) if isinstance(tags, list) else (),
        variants=variants,
    )


def parse_search_payload(payload: Any) -> SearchResponse:
    """Normalize a ``/v2/search`` or ``/v2/featured`` body.

    Items keep provider order.  An element repeating an id already seen in
    this payload is dropped so ids stay unique within one response.
    """
    if not isinstance(payload, dict):
        return SearchResponse()

    results: list[GifItem] = []
    seen: set[str] = set()
    raw_results = payload.get("results")
    if isinstance(raw_results, list):
        for element in raw_results:
            item = parse_gif_item(element)
            if item is None or item.id in seen:
                continue
            seen.add(item.id)
            results.append(item)

    return SearchResponse(results=results, next=_text(payload.get("next")))


def _term(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        for field in _TERM_FIELDS:
            if isinstance(value.get(field), str):
                return value[field]
    return None


def parse_terms(payload: Any) -> list[str]:
    """Extract suggestion terms in provider order; duplicates are kept."""
    if not isinstance(payload, dict):
        return []
    raw_results = payload.get("results")
    if not isinstance(raw_results, list):
        return []

    terms: list[str] = []
    for element in raw_results:
        term = _term(element)
        if term is not None and term.strip():
            terms.append(term)
    return terms


def unique_terms(terms: list[str]) -> list[str]:
    """Case-insensitive dedup keeping the first-seen casing and order."""
    seen: set[str] = set()
    out: list[str] = []
    for term in terms:
        key = term.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(term)
    return out
