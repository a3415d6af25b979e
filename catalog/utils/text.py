"""
Text normalization helpers shared by the resolvers and the search dispatcher.
"""

import re

# Search years are compared against INTEGER columns; anything outside a
# 32-bit signed int cannot match and would overflow some drivers.
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def is_blank(value: str | None) -> bool:
    """True for None, the empty string and whitespace-only strings."""
    return value is None or not value.strip()


def canonical_genre_name(name: str) -> str:
    """
    Canonical form of a genre name: trimmed, lower-cased, first character
    upper-cased.

        >>> canonical_genre_name("  sci-FI ")
        'Sci-fi'
    """
    cleaned = name.strip().lower()
    return cleaned[:1].upper() + cleaned[1:]


def split_genre_input(text: str) -> list[str]:
    """
    Split a comma-delimited genre list into trimmed, non-empty segments.

        >>> split_genre_input("Sci-Fi, drama,, Drama")
        ['Sci-Fi', 'drama', 'Drama']
    """
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_int(value: str | None) -> int | None:
    """
    Parse a plain decimal integer, returning None instead of raising.

    Only an optional sign followed by ASCII digits is accepted ("1_869",
    "1e3" and "18.69" are rejected), and values outside the 32-bit range
    are treated as unparseable.
    """
    if value is None:
        return None
    candidate = value.strip()
    if not _INTEGER_RE.fullmatch(candidate):
        return None
    number = int(candidate)
    if not _INT_MIN <= number <= _INT_MAX:
        return None
    return number
