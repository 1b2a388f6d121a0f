"""In-process cache with a TTL and a capacity bound."""

import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass

from hrcard.cache.base import CacheProvider


@dataclass(frozen=True)
class CacheEntry:
    """One rendered card."""

    key: str
    markup: str
    created_at: float


class MemoryCache(CacheProvider):
    """
    Process-local cache of rendered cards.

    Entries older than ``ttl_seconds`` are ignored on lookup and replaced by
    the next successful render. Inserting beyond ``max_entries`` evicts the
    oldest insertion first.

    Example:
        cache = MemoryCache(ttl_seconds=600)
        async with cache:
            await cache.set("alice", svg)
            cached = await cache.get("ALICE")
    """

    def __init__(
        self,
        ttl_seconds: int = 600,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize memory cache.

        Args:
            ttl_seconds: Age after which an entry is stale
            max_entries: Capacity bound, must be positive
            clock: Monotonic time source in seconds
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def _make_key(username: str) -> str:
        return username.lower()

    async def get(self, username: str) -> str | None:
        """Return markup if an entry younger than the TTL exists."""
        entry = self._entries.get(self._make_key(username))
        if entry is None:
            return None
        if self._clock() - entry.created_at >= self.ttl_seconds:
            return None
        return entry.markup

    async def set(self, username: str, markup: str) -> None:
        """Store markup, evicting the oldest entries beyond capacity."""
        key = self._make_key(username)
        # Re-inserting moves the key to the newest position
        self._entries.pop(key, None)
        self._entries[key] = CacheEntry(key=key, markup=markup, created_at=self._clock())

        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    async def invalidate(self, username: str) -> None:
        """Remove cached markup for username."""
        self._entries.pop(self._make_key(username), None)

    async def clear(self) -> None:
        """Clear all cached entries."""
        self._entries.clear()
