"""Upstream fetchers for HackerRank profile data."""

import asyncio
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx
from playwright.async_api import async_playwright, Browser, Page, Error as PlaywrightError

from hrcard.config import DEFAULT_USER_AGENT
from hrcard.exceptions import UpstreamFetchError, UpstreamParseError
from hrcard.logging import get_logger

DEFAULT_BASE_URL = "https://www.hackerrank.com"

# Upstream paths, relative to the base URL
ENDPOINTS = {
    "badges": "/rest/hackers/{username}/badges",
    "certificates": "/rest/hackers/{username}/certificates",
    "profile_page": "/profile/{username}",
}

_log = get_logger("fetcher")


@dataclass
class FetchedPayloads:
    """Raw JSON objects from the two structured endpoints."""

    badges: list = field(default_factory=list)
    certificates: list = field(default_factory=list)


@dataclass
class FetchResult:
    """Result of a profile page load."""

    html: str
    response_status: int | None = None


def build_url(base_url: str, endpoint: str, username: str) -> str:
    """Join the base URL with an endpoint path for a quoted username."""
    path = ENDPOINTS[endpoint].format(username=quote(username, safe=""))
    return base_url.rstrip("/") + path


def _decode_models(response: httpx.Response) -> list:
    """
    Pull the list of upstream objects out of a JSON response.

    Accepts either a bare list or an object with a ``models`` list.

    Raises:
        UpstreamParseError: Body is not JSON or has no list
    """
    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamParseError(f"Invalid JSON: {e}") from e

    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("models"), list):
        return data["models"]
    raise UpstreamParseError(f"Expected a list of models, got {type(data).__name__}")


async def _fetch_models(client: httpx.AsyncClient, url: str, headers: dict, half: str) -> list:
    """Fetch one structured endpoint; any failure yields an empty list."""
    try:
        response = await client.get(url, headers=headers)
    except httpx.HTTPError as e:
        _log.warning("payload_half_failed", half=half, error=str(e))
        return []

    if not response.is_success:
        _log.warning("payload_half_failed", half=half, status=response.status_code)
        return []

    try:
        return _decode_models(response)
    except UpstreamParseError as e:
        _log.warning("payload_half_unparseable", half=half, error=str(e))
        return []


async def fetch_profile_payloads(
    username: str,
    client: httpx.AsyncClient | None = None,
    base_url: str = DEFAULT_BASE_URL,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FetchedPayloads:
    """
    Fetch badge and certificate lists concurrently.

    The halves are independent: a failed or malformed half comes back as an
    empty list and never affects the other.

    Args:
        username: HackerRank handle
        client: Shared HTTP client (a temporary one is created if None)
        base_url: Upstream base URL
        user_agent: Browser-like identification string

    Returns:
        FetchedPayloads with the raw upstream objects
    """
    headers = {"User-Agent": user_agent, "Accept": "application/json"}

    async def gather(http: httpx.AsyncClient) -> FetchedPayloads:
        badges, certificates = await asyncio.gather(
            _fetch_models(http, build_url(base_url, "badges", username), headers, "badges"),
            _fetch_models(http, build_url(base_url, "certificates", username), headers, "certificates"),
        )
        return FetchedPayloads(badges=badges, certificates=certificates)

    if client is not None:
        return await gather(client)

    async with httpx.AsyncClient(follow_redirects=True) as http:
        return await gather(http)


async def fetch_profile_page(
    username: str,
    base_url: str = DEFAULT_BASE_URL,
    headless: bool = True,
    timeout_ms: int = 30000,
    user_agent: str = DEFAULT_USER_AGENT,
) -> FetchResult:
    """
    Fetch the rendered HTML of a public profile page.

    Args:
        username: HackerRank handle
        base_url: Upstream base URL
        headless: Run browser in headless mode
        timeout_ms: Page load timeout in milliseconds
        user_agent: Browser-like identification string

    Returns:
        FetchResult with the rendered HTML

    Raises:
        UpstreamFetchError: Non-success status or browser failure
    """
    url = build_url(base_url, "profile_page", username)

    async with async_playwright() as p:
        browser: Browser = await p.chromium.launch(headless=headless)

        try:
            context = await browser.new_context(
                viewport={"width": 1920, "height": 1080},
                user_agent=user_agent,
            )
            page: Page = await context.new_page()

            response = await page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
            if response is None:
                raise UpstreamFetchError(f"No response received for {url}")

            status = response.status
            if status >= 400:
                raise UpstreamFetchError(
                    f"Profile page for {username} returned HTTP {status}",
                    status_code=status,
                )

            # Badges render client-side; the page is still usable without them
            try:
                await page.wait_for_selector("img", timeout=5000)
            except PlaywrightError:
                pass

            html = await page.content()
            return FetchResult(html=html, response_status=status)

        except PlaywrightError as e:
            raise UpstreamFetchError(f"Browser error: {e}") from e
        finally:
            await browser.close()
