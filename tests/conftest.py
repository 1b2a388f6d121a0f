"""Shared fixtures - upstream payloads and pages from tests/fixtures."""

import json
from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_json_fixture(name: str):
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def badges_payload() -> dict:
    return load_json_fixture("alice_badges.json")


@pytest.fixture
def certificates_payload() -> dict:
    return load_json_fixture("alice_certificates.json")


@pytest.fixture
def profile_html() -> str:
    return (FIXTURES_DIR / "alice_profile.html").read_text(encoding="utf-8")
