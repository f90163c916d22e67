"""Human-readable labels for the result detail pane."""

from __future__ import annotations

from datetime import date

from klipy_sdk.models.gifs import GifItem

UNKNOWN = "Unknown"


def format_bytes(size: float | None) -> str | None:
    if not size or size <= 0:
        return None
    if size < 1024:
        return f"{size:g}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def created_date(timestamp: float | None) -> str | None:
    """Local calendar date of a Unix timestamp, or ``None`` if it can't be shown."""
    if not timestamp:
        return None
    try:
        return date.fromtimestamp(timestamp).isoformat()
    except (OverflowError, OSError, ValueError):
        return None


def format_dims(dims: tuple[float, float] | None) -> str | None:
    if dims is None:
        return None
    return f"{dims[0]:g}x{dims[1]:g}"


def render_detail_markdown(item: GifItem, preview_url: str) -> str:
    description = f"\n\n{item.content_description}" if item.content_description else ""
    return f"![{item.title}]({preview_url})\n\n# {item.title}{description}"
