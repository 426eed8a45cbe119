"""Tests for excerpt, date and URL helpers."""

from datetime import datetime, timezone

import pytest

from blog_api.services.formatting import (
    DEFAULT_EXCERPT_LENGTH,
    format_date,
    generate_excerpt,
    is_valid_url,
    parse_timestamp,
)


class TestGenerateExcerpt:
    """Tests for excerpt generation."""

    def test_strips_tags_without_marker(self):
        assert generate_excerpt("<p>This is <strong>bold</strong> text</p>", 100) == "This is bold text"

    def test_truncates_with_marker(self):
        content = "This is a long piece of content that should be truncated."
        excerpt = generate_excerpt(content, 20)
        assert excerpt == "This is a long piece..."
        assert len(excerpt) <= 23

    def test_short_content_unchanged(self):
        assert generate_excerpt("Short content", 100) == "Short content"

    def test_exact_length_has_no_marker(self):
        assert generate_excerpt("x" * 10, 10) == "x" * 10

    def test_trailing_space_trimmed_before_marker(self):
        assert generate_excerpt("abcd efgh ijkl", 5) == "abcd..."

    def test_double_newlines_become_spaces(self):
        assert generate_excerpt("<p>one</p>\n\n<p>two</p>") == "one two"

    def test_entities_are_not_decoded(self):
        assert generate_excerpt("<p>Fish &amp; chips</p>") == "Fish &amp; chips"

    def test_tags_removed_before_measuring(self):
        content = "<p>" + "a" * 10 + "</p>"
        assert generate_excerpt(content, 10) == "a" * 10

    def test_default_length(self):
        excerpt = generate_excerpt("a" * 200)
        assert excerpt == "a" * DEFAULT_EXCERPT_LENGTH + "..."


class TestFormatDate:
    """Tests for display dates."""

    def test_iso_string(self):
        assert format_date("2024-01-15T10:30:00.000Z") == "January 15, 2024"

    def test_other_date(self):
        assert format_date("2023-12-25T00:00:00.000Z") == "December 25, 2023"

    def test_datetime_input(self):
        assert format_date(datetime(2024, 7, 4, 23, 59, tzinfo=timezone.utc)) == "July 4, 2024"

    def test_offset_is_converted_to_utc(self):
        assert format_date("2024-03-01T01:00:00+03:00") == "February 29, 2024"

    def test_parse_timestamp_naive_is_utc(self):
        assert parse_timestamp("2024-01-15T10:30:00").tzinfo == timezone.utc


class TestIsValidUrl:
    """Tests for the optional image URL check."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://example.com/path",
            "https://example.com/path?query=value",
            "ftp://example",
        ],
    )
    def test_valid(self, url: str):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "example.com",
            "javascript:alert(1)",
            "mailto:a@b.com",
            "https://example.com/a b",
            "http://exa mple.com",
            "http://[::1",
        ],
    )
    def test_invalid(self, url: str):
        assert is_valid_url(url) is False

    def test_empty_is_valid(self):
        assert is_valid_url("") is True
