"""
Integration tests - live requests against the real HackerRank endpoints.

These tests require internet and should be run sparingly to avoid rate limiting.

Run with: pytest tests/test_integration_card.py -m integration -v
"""

import re
from xml.etree import ElementTree

import pytest

from hrcard import CardConfig, CardRenderer
from hrcard.config import CacheBackend
from hrcard.core.fetcher import fetch_profile_payloads

# Mark all tests in this module as integration tests (slow, requires internet)
pytestmark = pytest.mark.integration

# Public profiles with at least one badge
TEST_ACCOUNTS = ["hackerrank", "interviewstreet"]


@pytest.mark.asyncio
@pytest.mark.parametrize("username", TEST_ACCOUNTS)
async def test_live_payloads_are_lists(username):
    payloads = await fetch_profile_payloads(username)
    assert isinstance(payloads.badges, list)
    assert isinstance(payloads.certificates, list)


@pytest.mark.asyncio
@pytest.mark.parametrize("username", TEST_ACCOUNTS)
async def test_live_card_is_valid_svg(username):
    config = CardConfig(cache_backend=CacheBackend.NONE)
    async with CardRenderer(config) as renderer:
        svg = await renderer.render(username)

    root = ElementTree.fromstring(svg.encode("utf-8"))
    assert root.tag.endswith("svg")
    assert re.search(r'id="stat-badges"[^>]*>\d+<', svg)
