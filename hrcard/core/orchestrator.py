"""Pipeline orchestrator - coordinates fetching, parsing, rendering, caching."""

from datetime import datetime

import httpx

from hrcard.config import CardConfig, AcquisitionMode, CacheBackend
from hrcard.cache.base import CacheProvider
from hrcard.cache.memory_cache import MemoryCache
from hrcard.logging import get_logger, configure_logging
from hrcard.core.fetcher import fetch_profile_payloads, fetch_profile_page
from hrcard.core.parser import ParseResult, parse_payloads, parse_page
from hrcard.core.transformer import transform_result
from hrcard.core.classifier import classify_profile
from hrcard.core.layout import CardStyle, compute_geometry
from hrcard.core.renderer import render_card
from hrcard.models.profile import ProfileData


def normalize_username(username: str) -> str:
    """Strip whitespace and a leading @ from a handle."""
    return username.strip().lstrip("@")


class CardRenderer:
    """
    High-level card interface with caching.

    Example:
        async with CardRenderer() as renderer:
            svg = await renderer.render("alice")
    """

    def __init__(
        self,
        config: CardConfig | None = None,
        cache: CacheProvider | None = None,
        client: httpx.AsyncClient | None = None,
        style: CardStyle | None = None,
    ):
        """
        Initialize renderer.

        Args:
            config: CardConfig instance, uses defaults if None
            cache: Cache to use instead of the one the config describes
            client: HTTP client for structured mode, created on entry if None
            style: Card style constants
        """
        self.config = config or CardConfig()
        self.style = style or CardStyle()
        self._cache = cache
        self._client = client
        self._owns_client = client is None
        self._log = get_logger("renderer")

        if self._cache is None and self.config.cache_backend == CacheBackend.MEMORY:
            self._cache = MemoryCache(
                ttl_seconds=self.config.cache_ttl_seconds,
                max_entries=self.config.cache_max_entries,
            )

    async def __aenter__(self) -> "CardRenderer":
        """Async context manager entry - initialize resources."""
        configure_logging(self.config)

        if self._client is None and self.config.acquisition_mode == AcquisitionMode.STRUCTURED:
            self._client = httpx.AsyncClient(follow_redirects=True)
            self._owns_client = True

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - cleanup resources."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
        if self._cache is not None:
            await self._cache.close()

    async def _acquire(self, username: str) -> ParseResult:
        """Fetch upstream data and extract candidates."""
        if self.config.acquisition_mode == AcquisitionMode.UNSTRUCTURED:
            page = await fetch_profile_page(
                username,
                base_url=self.config.upstream_base_url,
                headless=self.config.headless,
                timeout_ms=self.config.browser_timeout_ms,
                user_agent=self.config.user_agent,
            )
            return parse_page(page.html)

        payloads = await fetch_profile_payloads(
            username,
            client=self._client,
            base_url=self.config.upstream_base_url,
            user_agent=self.config.user_agent,
        )
        return parse_payloads(payloads.badges, payloads.certificates)

    async def collect(self, username: str) -> ProfileData:
        """
        Fetch, extract, normalize and classify one profile.

        Args:
            username: HackerRank handle (leading @ allowed)

        Returns:
            Classified ProfileData

        Raises:
            UpstreamFetchError: Profile page could not be retrieved
        """
        username = normalize_username(username)
        parse_result = await self._acquire(username)

        if parse_result.parse_errors:
            self._log.warning("parse_errors", username=username, errors=parse_result.parse_errors)

        return classify_profile(transform_result(parse_result, username))

    async def render(self, username: str, force_refresh: bool = False) -> str:
        """
        Render the achievement card for a profile.

        Args:
            username: HackerRank handle (leading @ allowed)
            force_refresh: Skip cache and fetch fresh data

        Returns:
            SVG markup

        Raises:
            UpstreamFetchError: Profile page could not be retrieved
        """
        username = normalize_username(username)
        self._log.info("render_start", username=username, force_refresh=force_refresh)

        if self._cache is not None and not force_refresh:
            cached = await self._cache.get(username)
            if cached is not None:
                self._log.info("cache_hit", username=username)
                return cached

        start = datetime.now()
        profile = await self.collect(username)
        geometry = compute_geometry(len(profile.badges), len(profile.certificates), self.style)
        markup = render_card(profile, geometry)

        self._log.info(
            "render_complete",
            username=username,
            badges=len(profile.badges),
            certificates=len(profile.certificates),
            duration_ms=(datetime.now() - start).total_seconds() * 1000,
        )

        if self._cache is not None:
            await self._cache.set(username, markup)

        return markup

    async def invalidate_cache(self, username: str) -> None:
        """Remove a specific username from cache."""
        if self._cache is not None:
            await self._cache.invalidate(normalize_username(username))

    async def clear_cache(self) -> None:
        """Clear all cached cards."""
        if self._cache is not None:
            await self._cache.clear()
