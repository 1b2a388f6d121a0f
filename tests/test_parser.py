"""Unit tests for candidate extraction - uses fixtures, no internet required."""

from hrcard.core.parser import parse_page, parse_payloads


class TestParsePayloads:
    """Test mapping of structured upstream objects."""

    def test_alternate_badge_fields(self, badges_payload):
        result = parse_payloads(badges_payload["models"], [])
        first, second = result.badges_data[:2]

        assert first["title"] == "Python"
        assert first["star_count"] == 5
        assert first["image_url"] == "https://hrcdn.net/badges/python.svg"
        assert second["title"] == "SQL 4 star"
        assert second["star_count"] is None
        assert second["image_url"] == "https://hrcdn.net/badges/sql.svg"

    def test_first_present_field_wins(self):
        result = parse_payloads([{"badge_name": "SQL", "name": "Other", "title": "Third"}], [])
        assert result.badges_data[0]["title"] == "SQL"

    def test_blank_field_falls_through(self):
        result = parse_payloads([{"badge_name": "  ", "name": "Python"}], [])
        assert result.badges_data[0]["title"] == "Python"

    def test_zero_stars_is_present(self):
        result = parse_payloads([{"name": "Go", "star_count": 0, "stars": 4}], [])
        assert result.badges_data[0]["star_count"] == 0

    def test_non_object_entries_skipped(self, badges_payload):
        result = parse_payloads(badges_payload["models"], [])

        assert len(result.badges_data) == 7
        assert result.parse_errors == ["Badge #6 is not an object"]

    def test_certificate_fields(self, certificates_payload):
        result = parse_payloads([], certificates_payload["models"])
        first = result.certificates_data[0]

        assert first["title"] == "Software Engineer"
        assert first["category"] == "role"
        assert first["link_url"] == "https://www.hackerrank.com/certificates/aaa111"
        assert len(result.certificates_data) == 5

    def test_empty_payloads(self):
        result = parse_payloads([], [])
        assert result.badges_data == []
        assert result.certificates_data == []
        assert result.parse_errors == []


class TestParsePage:
    """Test scraping of a rendered profile page."""

    def test_badge_images_detected(self, profile_html):
        result = parse_page(profile_html)
        titles = [b["title"] for b in result.badges_data]

        assert titles == ["Python 5 star", "SQL 4 star", "sql 4 Star", None, "C++ 2 star badge"]

    def test_non_badge_images_ignored(self, profile_html):
        result = parse_page(profile_html)
        sources = [b["image_url"] for b in result.badges_data]

        assert "https://hrcdn.net/assets/logo.svg" not in sources
        assert "https://hrcdn.net/avatars/alice.png" not in sources

    def test_badge_matched_by_source_only(self):
        html = '<img src="/static/BADGE-gold.png" alt="Gold">'
        result = parse_page(html)
        assert result.badges_data == [
            {"title": "Gold", "image_url": "/static/BADGE-gold.png", "star_count": None}
        ]

    def test_certificates_detected(self, profile_html):
        result = parse_page(profile_html)
        titles = [c["title"] for c in result.certificates_data]

        assert titles == [
            "Software Engineer",
            "Python (Basic)",
            "Frontend Developer (React)",
        ]

    def test_innermost_element_wins(self, profile_html):
        result = parse_page(profile_html)
        assert result.certificates_data[0]["link_url"] == "/certificates/aaa111"

    def test_container_borrows_nested_link(self):
        html = '<div class="certificate-card"><a href="/verify/x1">Go (Basic)</a></div>'
        assert parse_page(html).certificates_data == [
            {"title": "Go (Basic)", "link_url": "/verify/x1", "category": None}
        ]

    def test_wrapper_of_several_links_not_merged(self):
        html = (
            '<div class="certificates">'
            '<a href="/certificates/p1">Python (Basic)</a>'
            '<a href="/certificates/s1">SQL (Basic)</a>'
            "</div>"
        )
        titles = [c["title"] for c in parse_page(html).certificates_data]
        assert titles == ["Python (Basic)", "SQL (Basic)"]

    def test_short_text_rejected(self, profile_html):
        result = parse_page(profile_html)
        assert all(c["title"] != "SQL" for c in result.certificates_data)

    def test_long_text_rejected(self):
        html = f'<a href="/certificates/x">{"A" * 100}</a>'
        assert parse_page(html).certificates_data == []

    def test_boundary_lengths_accepted(self):
        html = (
            '<a href="/certificates/x">Rust</a>'
            f'<a href="/certificates/y">{"B" * 99}</a>'
        )
        titles = [c["title"] for c in parse_page(html).certificates_data]
        assert titles == ["Rust", "B" * 99]

    def test_class_attribute_matches(self):
        html = '<div class="Card CERTIFICATE-item">Go (Basic)</div>'
        result = parse_page(html)
        assert result.certificates_data == [
            {"title": "Go (Basic)", "link_url": None, "category": None}
        ]

    def test_empty_page(self):
        result = parse_page("<html><body></body></html>")
        assert result.badges_data == []
        assert result.certificates_data == []
