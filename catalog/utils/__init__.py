"""
Utilities Package

Helper functions used across the catalog:
- text.py: genre name normalization, genre list splitting, lenient
  integer parsing for search input
"""

from catalog.utils.text import (
    canonical_genre_name,
    is_blank,
    parse_int,
    split_genre_input,
)

__all__ = [
    "canonical_genre_name",
    "is_blank",
    "parse_int",
    "split_genre_input",
]
