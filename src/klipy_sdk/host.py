"""Launcher services the commands call into."""

from __future__ import annotations

from typing import Protocol


class Host(Protocol):
    """What the hosting launcher provides: clipboard, opener, notifications, selection."""

    async def copy(self, text: str) -> None: ...

    async def open(self, target: str, app: str | None = None) -> None: ...

    async def show_hud(self, message: str) -> None: ...

    async def show_toast(self, title: str, message: str) -> None:
        """Show a failure toast."""
        ...

    async def close_main_window(self) -> None: ...

    async def get_selected_text(self) -> str: ...
