"""Text normalization utilities for feed fields and lookup queries."""

import re

# Sentinel the feed uses for "no value"
NOT_AVAILABLE = "N/A"

# Everything from a dash, comma or "season" onwards: "Looking - Season 2" → "Looking"
_TITLE_SUFFIX = re.compile(r"\s*(-|,|season).*", re.IGNORECASE)


def normalize_field(value: str) -> str:
    """
    Normalize a free-text feed field.

    Surrounding whitespace is removed and the exact sentinel "N/A" becomes the
    empty string, so blank and "not available" values compare equal. Applying
    it twice gives the same result as applying it once.

    Args:
        value: Raw field value

    Returns:
        Trimmed value, or "" when the field is absent
    """
    value = value.strip()
    if value == NOT_AVAILABLE:
        return ""
    return value


def parse_release_year(value: str) -> int:
    """
    Parse a release year, returning 0 for anything that is not an integer.

    Examples:
        "1958" → 1958
        "unknown" → 0
        "" → 0
    """
    try:
        return int(value)
    except ValueError:
        return 0


def sanitize_movie_title(title: str) -> str:
    """
    Strip episode and subtitle suffixes from a title before a movie-info lookup.

    Examples:
        "Looking - Season 2" → "Looking"
        "Alcatraz, Episode 4" → "Alcatraz"
        "Vertigo" → "Vertigo"
    """
    return _TITLE_SUFFIX.sub("", title)
