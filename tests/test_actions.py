"""Tests for the action layer."""

import pytest

from klipy_sdk.actions import (
    FORMATS_SECTION,
    OPEN_FORMATS_SECTION,
    build_actions,
    html_embed,
    markdown_embed,
    perform,
    run_default_action,
)
from klipy_sdk.config import Preferences
from klipy_sdk.models.enums import ActionKind
from klipy_sdk.models.gifs import GifItem, GifVariant
from klipy_sdk.normalize import parse_gif_item

from conftest import FakeHost, gif_payload

ITEM = parse_gif_item(gif_payload("g1", title="Happy [cat]"))


def test_markdown_strips_brackets():
    assert markdown_embed(ITEM, "https://x/a.gif") == "![Happy cat](https://x/a.gif)"


def test_html_embed_escapes_attributes():
    item = GifItem(id="g", title='Say "hi" <3', url="https://x/a.gif")
    assert html_embed(item, "https://x/a.gif?a=1&b=2") == (
        '<img src="https://x/a.gif?a=1&amp;b=2" alt="Say &quot;hi&quot; &lt;3" />'
    )


class TestBuildActions:
    def test_default_copy(self):
        actions = build_actions(ITEM, Preferences())
        first = actions[0]
        assert first.title == "Copy GIF URL"
        assert first.kind is ActionKind.copy
        assert first.target == "https://static.klipy.test/g1.gif"

    def test_default_open_uses_app(self):
        first = build_actions(ITEM, Preferences(default_action="open", open_with_app="Firefox"))[0]
        assert first.kind is ActionKind.open
        assert first.app == "Firefox"

    def test_default_browser_respects_preferred_format(self):
        first = build_actions(ITEM, Preferences(default_action="browser", default_media_format="mp4"))[0]
        assert first.kind is ActionKind.browser
        assert first.target == "https://static.klipy.test/g1.mp4"

    def test_embeds_and_page(self):
        by_title = {a.title: a for a in build_actions(ITEM, Preferences()) if a.section is None}
        assert by_title["Copy Klipy Page URL"].target == "https://klipy.com/gifs/g1"
        assert by_title["Copy Markdown Embed"].target == "![Happy cat](https://static.klipy.test/g1.gif)"
        assert by_title["Copy HTML Embed"].target.startswith('<img src="https://static.klipy.test/g1.gif"')

    def test_page_url_falls_back_to_item_url(self):
        item = GifItem(id="g", title="t", url="https://x/a.gif")
        by_title = {a.title: a for a in build_actions(item, Preferences())}
        assert by_title["Copy Klipy Page URL"].target == "https://x/a.gif"

    def test_per_format_submenu(self):
        actions = build_actions(ITEM, Preferences())
        copies = [a.title for a in actions if a.section == FORMATS_SECTION]
        opens = [a for a in actions if a.section == OPEN_FORMATS_SECTION]
        assert copies == ["Copy GIF URL", "Copy TINYGIF URL", "Copy MP4 URL"]
        assert [a.title for a in opens] == ["Open GIF", "Open TINYGIF", "Open MP4"]
        assert all(a.kind is ActionKind.browser for a in opens)


@pytest.mark.asyncio
async def test_perform_dispatches_on_kind():
    host = FakeHost()
    actions = build_actions(ITEM, Preferences(open_with_app="Viewer"))
    for action in actions[:1] + [a for a in actions if a.kind is not ActionKind.copy][:2]:
        await perform(action, host)
    assert host.copied == ["https://static.klipy.test/g1.gif"]
    assert host.opened == [("https://klipy.com/gifs/g1", None), ("https://static.klipy.test/g1.gif", "Viewer")]


class TestRunDefaultAction:
    @pytest.mark.asyncio
    async def test_copy(self):
        host = FakeHost()
        await run_default_action(ITEM, Preferences(default_media_format="tinygif"), host)
        assert host.copied == ["https://static.klipy.test/g1-tiny.gif"]
        assert host.huds == ["Copied GIF URL: Happy [cat]"]

    @pytest.mark.asyncio
    async def test_browser_opens_page(self):
        host = FakeHost()
        await run_default_action(ITEM, Preferences(default_action="browser"), host)
        assert host.opened == [("https://klipy.com/gifs/g1", None)]
        assert host.huds == ["Opened in browser: Happy [cat]"]

    @pytest.mark.asyncio
    async def test_browser_without_page_opens_variant(self):
        host = FakeHost()
        item = GifItem(id="g", title="t", url="https://x/a.gif", variants={"mp4": GifVariant(url="https://x/a.mp4")})
        await run_default_action(item, Preferences(default_action="browser"), host)
        assert host.opened == [("https://x/a.mp4", None)]

    @pytest.mark.asyncio
    async def test_open_with_app(self):
        host = FakeHost()
        await run_default_action(ITEM, Preferences(default_action="open", open_with_app="Viewer"), host)
        assert host.opened == [("https://static.klipy.test/g1.gif", "Viewer")]
        assert host.huds == ["Opened GIF: Happy [cat]"]
