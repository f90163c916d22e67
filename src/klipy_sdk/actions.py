"""Copy / open / embed actions for a GIF result."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from klipy_sdk.config import Preferences
from klipy_sdk.host import Host
from klipy_sdk.models.enums import ActionKind, DefaultAction
from klipy_sdk.models.gifs import GifItem
from klipy_sdk.variants import pick_preferred_variant

OPEN_SECTION = "Open"
FORMATS_SECTION = "Use Alternate Format"
OPEN_FORMATS_SECTION = "Open Format"


@dataclass(frozen=True)
class GifAction:
    title: str
    kind: ActionKind
    target: str
    app: str | None = None
    section: str | None = None


def markdown_embed(item: GifItem, url: str) -> str:
    alt = item.title.replace("[", "").replace("]", "")
    return f"![{alt}]({url})"


def html_embed(item: GifItem, url: str) -> str:
    return f'<img src="{escape(url)}" alt="{escape(item.title)}" />'


def page_url(item: GifItem) -> str:
    return item.item_url or item.url


def _default_action(gif_url: str, prefs: Preferences) -> GifAction:
    if prefs.default_action is DefaultAction.open:
        return GifAction("Open GIF In App", ActionKind.open, gif_url, app=prefs.open_with_app)
    if prefs.default_action is DefaultAction.browser:
        return GifAction("Open GIF In Browser", ActionKind.browser, gif_url)
    return GifAction("Copy GIF URL", ActionKind.copy, gif_url)


def build_actions(item: GifItem, prefs: Preferences) -> list[GifAction]:
    """All actions offered for ``item``, the configured default first."""
    gif_url = pick_preferred_variant(item, prefs.default_media_format).url
    page = page_url(item)

    actions = [
        _default_action(gif_url, prefs),
        GifAction("Copy Klipy Page URL", ActionKind.copy, page),
        GifAction("Copy Markdown Embed", ActionKind.copy, markdown_embed(item, gif_url)),
        GifAction("Copy HTML Embed", ActionKind.copy, html_embed(item, gif_url)),
        GifAction("Open Result Page", ActionKind.browser, page, section=OPEN_SECTION),
        GifAction(
            "Open GIF In App",
            ActionKind.open,
            gif_url,
            app=prefs.open_with_app,
            section=OPEN_SECTION,
        ),
    ]
    for fmt, variant in item.variants.items():
        actions.append(
            GifAction(f"Copy {fmt.upper()} URL", ActionKind.copy, variant.url, section=FORMATS_SECTION)
        )
    for fmt, variant in item.variants.items():
        actions.append(
            GifAction(f"Open {fmt.upper()}", ActionKind.browser, variant.url, section=OPEN_FORMATS_SECTION)
        )
    return actions


async def perform(action: GifAction, host: Host) -> None:
    if action.kind is ActionKind.copy:
        await host.copy(action.target)
    elif action.kind is ActionKind.open:
        await host.open(action.target, action.app)
    else:
        await host.open(action.target)


async def run_default_action(item: GifItem, prefs: Preferences, host: Host) -> None:
    """What activating a result does: copy, open in the browser, or open in an app."""
    target = pick_preferred_variant(item, prefs.default_media_format).url

    if prefs.default_action is DefaultAction.copy:
        await host.copy(target)
        await host.show_hud(f"Copied GIF URL: {item.title}")
        return

    if prefs.default_action is DefaultAction.browser:
        await host.open(item.item_url or target)
        await host.show_hud(f"Opened in browser: {item.title}")
        return

    await host.open(target, prefs.open_with_app)
    await host.show_hud(f"Opened GIF: {item.title}")
