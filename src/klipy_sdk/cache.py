"""Short-lived read-through cache for API responses."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float  # clock seconds


class ResponseCache:
    """Maps ``(path, params)`` to a parsed JSON body until its TTL runs out.

    Growth is unbounded; entries leave only when read after expiry or on
    :meth:`clear`.  Concurrent misses for one key are not coalesced: each
    caller fetches and the last store wins.
    """

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    @staticmethod
    def make_key(path: str, params: dict[str, Any]) -> str:
        present = {k: v for k, v in params.items() if v is not None}
        return f"{path}:{json.dumps(present, sort_keys=True, separators=(',', ':'), default=str)}"

    def lookup(self, key: str) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            return None
        return entry

    def store(self, key: str, value: Any, ttl_ms: float) -> CacheEntry:
        entry = CacheEntry(value=value, expires_at=self._clock() + ttl_ms / 1000.0)
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None
