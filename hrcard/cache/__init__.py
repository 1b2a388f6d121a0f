"""Cache implementations."""

from hrcard.cache.base import CacheProvider
from hrcard.cache.memory_cache import CacheEntry, MemoryCache

__all__ = ["CacheProvider", "CacheEntry", "MemoryCache"]
