"""Normalization of extracted candidates into immutable records."""

import math
import re
from collections.abc import Iterable
from typing import TypeVar

from hrcard.core.parser import ParseResult
from hrcard.models.badge import BadgeRecord
from hrcard.models.certificate import CertificateRecord, DEFAULT_TYPE_LABEL
from hrcard.models.profile import ProfileData

_STAR_COUNT = re.compile(r"(\d+)\s*star", re.IGNORECASE)
_STAR_PHRASE = re.compile(r"\d+\s*stars?", re.IGNORECASE)
_TRAILING_BADGE = re.compile(r"\bbadge\s*$", re.IGNORECASE)
_PARENTHESIZED = re.compile(r"\(([^()]*)\)")
_WHITESPACE = re.compile(r"\s+")

T = TypeVar("T", BadgeRecord, CertificateRecord)


def extract_star_count(title: str) -> int:
    """
    First integer immediately preceding "star" in a title.

    Examples:
        "SQL 4 star" -> 4
        "Python 3stars" -> 3
        "Problem Solving Badge" -> 0
    """
    match = _STAR_COUNT.search(title)
    return int(match.group(1)) if match else 0


def derive_skill_name(title: str) -> str:
    """
    Strip star phrases and a trailing "badge" token from a badge title.

    Examples:
        "Python 3 star" -> "Python"
        "Problem Solving Badge" -> "Problem Solving"
    """
    name = _STAR_PHRASE.sub(" ", title)
    name = _WHITESPACE.sub(" ", name).strip()
    name = _TRAILING_BADGE.sub("", name)
    return name.strip()


def extract_type_label(title: str) -> str | None:
    """
    First parenthesized substring of a certificate title.

    Examples:
        "Python (Basic)" -> "Basic"
        "Software Engineer" -> None
    """
    match = _PARENTHESIZED.search(title)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return None


def _coerce_count(value) -> int | None:
    """Convert an upstream star count to int, None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, float):
        try:
            value = float(str(value).strip())
        except ValueError:
            return None
    # NaN and infinities have no integer value
    if not math.isfinite(value):
        return None
    return int(value)


def _clean_text(value) -> str:
    if value is None:
        return ""
    return _WHITESPACE.sub(" ", str(value)).strip()


def build_badge(candidate: dict) -> BadgeRecord:
    """Turn a badge candidate dict into a BadgeRecord."""
    title = _clean_text(candidate.get("title")) or "Badge"

    stars = _coerce_count(candidate.get("star_count"))
    if stars is None:
        stars = extract_star_count(title)

    return BadgeRecord(
        title=title,
        image_url=_clean_text(candidate.get("image_url")) or None,
        star_count=max(0, stars),
        skill_name=derive_skill_name(title),
    )


def build_certificate(candidate: dict) -> CertificateRecord:
    """Turn a certificate candidate dict into a CertificateRecord."""
    title = _clean_text(candidate.get("title")) or "Certificate"

    type_label = (
        extract_type_label(title)
        or _clean_text(candidate.get("category"))
        or DEFAULT_TYPE_LABEL
    )

    return CertificateRecord(
        title=title,
        link_url=_clean_text(candidate.get("link_url")) or None,
        type_label=type_label.upper(),
    )


def dedupe_by_title(records: Iterable[T]) -> list[T]:
    """Keep the first record for each case-insensitive title, in order."""
    seen: set[str] = set()
    unique = []
    for record in records:
        key = record.title.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    return unique


def count_distinct_skills(badges: Iterable[BadgeRecord]) -> int:
    """Number of distinct skill names, or the badge count if there are none."""
    badges = list(badges)
    skills = {b.skill_name.lower() for b in badges if b.skill_name}
    return len(skills) or len(badges)


def transform_result(parse_result: ParseResult, username: str) -> ProfileData:
    """
    Normalize parsed candidates into a ProfileData.

    Args:
        parse_result: Output from parse_payloads or parse_page
        username: Profile handle

    Returns:
        ProfileData with deduplicated, unclassified records
    """
    badges = dedupe_by_title(build_badge(c) for c in parse_result.badges_data)
    certificates = dedupe_by_title(build_certificate(c) for c in parse_result.certificates_data)

    return ProfileData(
        username=username,
        badges=tuple(badges),
        certificates=tuple(certificates),
        skill_count=count_distinct_skills(badges),
    )
