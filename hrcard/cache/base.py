"""Abstract cache interface."""

from abc import ABC, abstractmethod


class CacheProvider(ABC):
    """Abstract base class for rendered-card caches."""

    @abstractmethod
    async def get(self, username: str) -> str | None:
        """
        Retrieve cached markup for a username.

        Args:
            username: HackerRank handle

        Returns:
            Cached SVG markup or None if miss/expired
        """
        ...

    @abstractmethod
    async def set(self, username: str, markup: str) -> None:
        """
        Store rendered markup, replacing any previous entry.

        Args:
            username: HackerRank handle
            markup: SVG document to cache
        """
        ...

    @abstractmethod
    async def invalidate(self, username: str) -> None:
        """
        Remove specific entry from cache.

        Args:
            username: HackerRank handle to invalidate
        """
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Clear all cached entries."""
        ...

    async def close(self) -> None:
        """Release resources held by the cache."""

    async def __aenter__(self) -> "CacheProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup."""
        await self.close()
