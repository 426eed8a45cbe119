"""Text helpers for post previews and form checks.

- generate_excerpt: tag-stripped, truncated preview of post content
- format_date: long en-US date for display ("January 15, 2024")
- is_valid_url: optional image URL check used by the post form

generate_excerpt strips tags with a pattern, not a parser. It is not a
sanitizer and must not be used on untrusted markup for safety purposes.
"""

import re
from datetime import datetime, timezone
from urllib.parse import urlparse

DEFAULT_EXCERPT_LENGTH = 150
ELLIPSIS = "..."

_TAG_RE = re.compile(r"<[^>]*>")

# Fixed English names so output does not depend on the process locale.
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def generate_excerpt(content: str, max_length: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Build a plain-text preview of HTML content.

    Args:
        content: Post content (HTML markup).
        max_length: Maximum number of characters kept before the ellipsis.

    Returns:
        Text without tags. Longer text is cut to max_length, trimmed and
        suffixed with "...". No entity decoding is done.

    Example:
        >>> generate_excerpt("<p>This is <strong>bold</strong> text</p>", 100)
        'This is bold text'
    """
    text = _TAG_RE.sub("", content).replace("\n\n", " ")

    if len(text) <= max_length:
        return text

    return text[:max_length].strip() + ELLIPSIS


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    if isinstance(value, datetime):
        dt = value
    else:
        s = value.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(value: str | datetime) -> str:
    """Format a timestamp as a long en-US date in UTC, e.g. "January 15, 2024"."""
    dt = parse_timestamp(value).astimezone(timezone.utc)
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"


def is_valid_url(url: str) -> bool:
    """Check an optional URL field.

    Empty string is valid (the field is optional). Otherwise the URL must be
    absolute: a scheme plus a network location, no whitespace. Any scheme is
    accepted, so "ftp://example" passes while "example.com" does not.

    Stricter than browser URL parsing: URLs without a host ("mailto:a@b.com",
    "javascript:...") and URLs containing spaces are rejected rather than
    accepted or percent-encoded.
    """
    if not url:
        return True

    if any(ch.isspace() for ch in url):
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    return bool(parsed.scheme) and bool(parsed.netloc)
