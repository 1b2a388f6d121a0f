"""Unit tests for normalization of candidates into records."""

import pytest

from hrcard.core.parser import ParseResult, parse_page, parse_payloads
from hrcard.core.transformer import (
    build_badge,
    build_certificate,
    count_distinct_skills,
    dedupe_by_title,
    derive_skill_name,
    extract_star_count,
    extract_type_label,
    transform_result,
)


class TestExtractStarCount:
    """Test star count extraction from titles."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("SQL 4 star", 4),
            ("Python 3 stars", 3),
            ("Java 2star", 2),
            ("Problem Solving Badge", 0),
            ("30 Days of Code", 0),
            ("Gold 5 Star 1 star", 5),
        ],
    )
    def test_extract_star_count(self, title, expected):
        assert extract_star_count(title) == expected


class TestDeriveSkillName:
    """Test skill name derivation."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Python 3 star", "Python"),
            ("Problem Solving Badge", "Problem Solving"),
            ("C++ 2 star badge", "C++"),
            ("Python (Basic)", "Python (Basic)"),
            ("Badge", ""),
        ],
    )
    def test_derive_skill_name(self, title, expected):
        assert derive_skill_name(title) == expected


class TestExtractTypeLabel:
    """Test certificate type label extraction."""

    def test_first_parenthesized(self):
        assert extract_type_label("Python (Basic) (Old)") == "Basic"

    def test_no_parentheses(self):
        assert extract_type_label("Software Engineer") is None

    def test_empty_parentheses(self):
        assert extract_type_label("Go ()") is None


class TestBuildRecords:
    """Test candidate to record conversion."""

    def test_badge_title_fallback(self):
        badge = build_badge({"title": None})
        assert badge.title == "Badge"
        assert badge.star_count == 0

    def test_badge_stars_from_field(self):
        assert build_badge({"title": "SQL 4 star", "star_count": 2}).star_count == 2

    def test_badge_stars_from_string_field(self):
        assert build_badge({"title": "Go", "star_count": "3"}).star_count == 3

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "Infinity", "1e400", "many"])
    def test_badge_unusable_stars_fall_back_to_title(self, value):
        assert build_badge({"title": "SQL 4 star", "star_count": value}).star_count == 4

    def test_badge_stars_from_title(self):
        assert build_badge({"title": "SQL 4 star"}).star_count == 4

    def test_badge_negative_stars_floor_at_zero(self):
        assert build_badge({"title": "Go", "star_count": -2}).star_count == 0

    def test_badge_raw_stars_kept_display_clamped(self):
        badge = build_badge({"title": "Go", "star_count": 9})
        assert badge.star_count == 9
        assert badge.display_stars == 5

    def test_badge_unclassified_on_creation(self):
        assert build_badge({"title": "Go"}).visual_category is None

    def test_certificate_title_fallback(self):
        certificate = build_certificate({})
        assert certificate.title == "Certificate"
        assert certificate.type_label == "SKILL"
        assert certificate.verified is True

    def test_certificate_type_from_title_before_category(self):
        certificate = build_certificate({"title": "Python (Basic)", "category": "skill"})
        assert certificate.type_label == "BASIC"

    def test_certificate_type_from_category(self):
        certificate = build_certificate({"title": "Software Engineer", "category": "role"})
        assert certificate.type_label == "ROLE"


class TestDedupe:
    """Test case-insensitive, order-preserving deduplication."""

    def test_case_insensitive_first_wins(self):
        badges = [build_badge({"title": "Python 3 star"}), build_badge({"title": "python 3 Star", "star_count": 1})]
        unique = dedupe_by_title(badges)

        assert len(unique) == 1
        assert unique[0].title == "Python 3 star"
        assert unique[0].skill_name == "Python"
        assert unique[0].star_count == 3

    def test_idempotent(self):
        badges = [build_badge({"title": t}) for t in ("A", "b", "a", "B", "c")]
        once = dedupe_by_title(badges)
        assert dedupe_by_title(once) == once
        assert [b.title for b in once] == ["A", "b", "c"]


class TestCountDistinctSkills:
    """Test distinct-skill counting."""

    def test_counts_unique_skill_names(self):
        badges = [build_badge({"title": t}) for t in ("Python 5 star", "SQL 4 star", "Problem Solving Badge")]
        assert count_distinct_skills(badges) == 3

    def test_falls_back_to_badge_count(self):
        badges = [build_badge({"title": "Badge"})]
        assert count_distinct_skills(badges) == 1

    def test_empty(self):
        assert count_distinct_skills([]) == 0


class TestTransformResult:
    """Test full normalization of parse results."""

    def test_structured_fixture(self, badges_payload, certificates_payload):
        parsed = parse_payloads(badges_payload["models"], certificates_payload["models"])
        profile = transform_result(parsed, "alice")

        assert profile.username == "alice"
        assert [b.title for b in profile.badges] == [
            "Python",
            "SQL 4 star",
            "Problem Solving Badge",
            "JavaScript Basics",
            "Java Programming",
            "30 Days of Code",
        ]
        assert [c.title for c in profile.certificates] == [
            "Software Engineer",
            "Python (Basic)",
            "Frontend Developer (React)",
            "Problem Solving (Intermediate)",
        ]
        assert [c.type_label for c in profile.certificates] == ["ROLE", "BASIC", "REACT", "INTERMEDIATE"]
        assert profile.skill_count == 6

    def test_unstructured_fixture(self, profile_html):
        profile = transform_result(parse_page(profile_html), "alice")

        assert [b.title for b in profile.badges] == ["Python 5 star", "SQL 4 star", "Badge", "C++ 2 star badge"]
        assert [b.star_count for b in profile.badges] == [5, 4, 0, 2]
        assert [c.title for c in profile.certificates] == [
            "Software Engineer",
            "Python (Basic)",
            "Frontend Developer (React)",
        ]
        assert profile.skill_count == 3

    def test_empty_parse_result(self):
        profile = transform_result(ParseResult(), "alice")
        assert profile.badges == ()
        assert profile.certificates == ()
        assert profile.skill_count == 0

    def test_profile_is_immutable(self):
        profile = transform_result(ParseResult(), "alice")
        with pytest.raises(Exception):
            profile.username = "bob"
