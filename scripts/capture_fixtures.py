"""Capture live upstream responses as test fixtures."""

import asyncio
import json
import sys
from pathlib import Path

from hrcard.core.fetcher import fetch_profile_page, fetch_profile_payloads
from hrcard.core.parser import parse_page, parse_payloads
from hrcard.core.transformer import transform_result

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


async def capture(username: str, with_page: bool) -> None:
    """Fetch one profile, save raw fixtures and print a summary."""
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)

    payloads = await fetch_profile_payloads(username)
    for name, models in (("badges", payloads.badges), ("certificates", payloads.certificates)):
        path = FIXTURES_DIR / f"{username}_{name}.json"
        path.write_text(json.dumps({"models": models}, indent=2), encoding="utf-8")
        print(f"✓ Saved {len(models)} {name} to {path}")

    profile = transform_result(parse_payloads(payloads.badges, payloads.certificates), username)
    print(f"  structured: {len(profile.badges)} badges, {len(profile.certificates)} certificates")

    if with_page:
        page = await fetch_profile_page(username)
        path = FIXTURES_DIR / f"{username}_profile.html"
        path.write_text(page.html, encoding="utf-8")
        print(f"✓ Saved page to {path} ({len(page.html)} bytes)")

        profile = transform_result(parse_page(page.html), username)
        print(f"  unstructured: {len(profile.badges)} badges, {len(profile.certificates)} certificates")


async def main(usernames: list[str]) -> None:
    for username in usernames:
        print(f"\n{'=' * 60}\n@{username}\n{'=' * 60}")
        await capture(username, with_page="--page" in sys.argv)


if __name__ == "__main__":
    names = [a for a in sys.argv[1:] if not a.startswith("--")]
    if not names:
        print("usage: python scripts/capture_fixtures.py USERNAME [...] [--page]")
        sys.exit(2)
    asyncio.run(main(names))
