"""Single-shot launcher commands: a random trending GIF and a GIF for the selection."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from klipy_sdk.actions import run_default_action
from klipy_sdk.errors import KlipyCommandError, KlipyError

if TYPE_CHECKING:
    from klipy_sdk.client import Client
    from klipy_sdk.host import Host
    from klipy_sdk.models.gifs import GifItem

log = logging.getLogger(__name__)

RANDOM_POOL_SIZE = 40
UNKNOWN_ERROR = "Unknown error"


async def gif_random(client: Client, host: Host, *, rng: random.Random | None = None) -> GifItem | None:
    """Act on a random pick from the trending feed.  Returns the GIF used, if any."""
    try:
        response = await client.gifs.trending(limit=RANDOM_POOL_SIZE)
        if not response.results:
            raise KlipyCommandError("No trending GIFs were returned.")
        selected = (rng or random).choice(response.results)
        await host.close_main_window()
        await run_default_action(selected, client.preferences, host)
        return selected
    except Exception as exc:
        log.warning("random GIF failed: %s", exc, exc_info=not isinstance(exc, KlipyError))
        await host.show_toast("Random GIF failed", str(exc) or UNKNOWN_ERROR)
        return None


async def gif_from_selection(client: Client, host: Host) -> GifItem | None:
    """Search the selected text and act on the top result.  Returns the GIF used, if any."""
    try:
        query = (await host.get_selected_text()).strip()
        if not query:
            raise KlipyCommandError("Select text first, then run this command.")
        response = await client.gifs.search(query, limit=1)
        if not response.results:
            raise KlipyCommandError(f'No GIF results for "{query}".')
        selected = response.results[0]
        await host.close_main_window()
        await run_default_action(selected, client.preferences, host)
        return selected
    except Exception as exc:
        log.warning("GIF from selection failed: %s", exc, exc_info=not isinstance(exc, KlipyError))
        await host.show_toast("GIF from selection failed", str(exc) or UNKNOWN_ERROR)
        return None
