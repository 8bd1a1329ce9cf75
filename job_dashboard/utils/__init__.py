"""Utility helpers for the Job Search Dashboard."""

from .text import (
    collapse_whitespace,
    extract_numeric_value,
    has_leading_number,
    parse_leading_float,
    strip_list_prefix,
)
from .timestamps import utc_now

__all__ = [
    "collapse_whitespace",
    "extract_numeric_value",
    "has_leading_number",
    "parse_leading_float",
    "strip_list_prefix",
    "utc_now",
]
