"""Candidate extraction from upstream JSON payloads and profile HTML."""

import re
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag


@dataclass
class ParseResult:
    """Raw badge and certificate candidates in scan order."""

    badges_data: list[dict] = field(default_factory=list)
    certificates_data: list[dict] = field(default_factory=list)
    parse_errors: list[str] = field(default_factory=list)


# Alternate upstream field names, first present wins
BADGE_FIELDS = {
    "title": ("badge_name", "name", "title"),
    "image_url": ("badge_url", "url", "image_url", "icon"),
    "star_count": ("star_count", "stars"),
}

CERTIFICATE_FIELDS = {
    "title": ("certificate_name", "name", "title"),
    "link_url": ("certificate_url", "url", "link"),
    "category": ("category", "type"),
}

# Scraping heuristics for the rendered profile page
BADGE_TOKEN = "badge"
CERTIFICATE_TOKEN = "certificate"
CERTIFICATE_TEXT_MIN = 4
CERTIFICATE_TEXT_MAX = 99

SELECTORS = {
    "badge_images": ["img", "image"],
    "certificate_containers": ["a", "div", "li"],
}

_WHITESPACE = re.compile(r"\s+")


def _first_present(obj: dict, keys: tuple[str, ...]):
    """Return the first value under keys that is neither None nor blank."""
    for key in keys:
        value = obj.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        return value
    return None


def _map_fields(obj: dict, fields: dict[str, tuple[str, ...]]) -> dict:
    return {name: _first_present(obj, keys) for name, keys in fields.items()}


def parse_payloads(badges: list, certificates: list) -> ParseResult:
    """
    Map structured upstream objects to candidate dicts.

    Args:
        badges: Raw badge objects from the badges endpoint
        certificates: Raw certificate objects from the certificates endpoint

    Returns:
        ParseResult with one candidate per well-formed object
    """
    result = ParseResult()

    for i, obj in enumerate(badges):
        if not isinstance(obj, dict):
            result.parse_errors.append(f"Badge #{i} is not an object")
            continue
        result.badges_data.append(_map_fields(obj, BADGE_FIELDS))

    for i, obj in enumerate(certificates):
        if not isinstance(obj, dict):
            result.parse_errors.append(f"Certificate #{i} is not an object")
            continue
        result.certificates_data.append(_map_fields(obj, CERTIFICATE_FIELDS))

    return result


def _visible_text(element: Tag) -> str:
    return _WHITESPACE.sub(" ", element.get_text(" ", strip=True)).strip()


def _class_string(element: Tag) -> str:
    classes = element.get("class") or []
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def _image_source(element: Tag) -> str | None:
    return element.get("src") or element.get("href") or element.get("xlink:href")


def parse_badges(soup: BeautifulSoup) -> list[dict]:
    """
    Collect badge candidates from image elements.

    An image is a badge when its alt text or source mentions "badge".
    """
    badges = []

    for img in soup.find_all(SELECTORS["badge_images"]):
        alt = (img.get("alt") or "").strip()
        src = _image_source(img)

        if BADGE_TOKEN in alt.lower() or BADGE_TOKEN in (src or "").lower():
            badges.append({"title": alt or None, "image_url": src, "star_count": None})

    return badges


def _is_certificate_candidate(el: Tag) -> bool:
    text = _visible_text(el)
    haystacks = (text, el.get("href") or "", _class_string(el))

    if not any(CERTIFICATE_TOKEN in h.lower() for h in haystacks):
        return False
    return CERTIFICATE_TEXT_MIN <= len(text) <= CERTIFICATE_TEXT_MAX


def parse_certificates(soup: BeautifulSoup) -> list[dict]:
    """
    Collect certificate candidates from link and container elements.

    An element qualifies when its text, href or class mentions
    "certificate" and its visible text is a plausible title length. A
    container wrapping a qualifying element is skipped so that each
    certificate is read once, from its innermost element.
    """
    candidates = [
        el for el in soup.find_all(SELECTORS["certificate_containers"])
        if _is_certificate_candidate(el)
    ]
    wrappers = {id(parent) for el in candidates for parent in el.parents}

    certificates = []
    for el in candidates:
        if id(el) in wrappers:
            continue

        href = el.get("href") or ""
        if not href:
            link = el.find("a", href=True)
            href = link.get("href") if link else ""

        certificates.append({"title": _visible_text(el), "link_url": href or None, "category": None})

    return certificates


def parse_page(html: str) -> ParseResult:
    """
    Full page parsing - extracts badge and certificate candidates.

    Args:
        html: Raw HTML content

    Returns:
        ParseResult with badges_data, certificates_data and any parse_errors
    """
    soup = BeautifulSoup(html, "lxml")
    result = ParseResult()

    try:
        result.badges_data = parse_badges(soup)
    except (AttributeError, TypeError) as e:
        result.parse_errors.append(f"Badge parse error: {e}")

    try:
        result.certificates_data = parse_certificates(soup)
    except (AttributeError, TypeError) as e:
        result.parse_errors.append(f"Certificate parse error: {e}")

    return result
