"""Normalization layer for converting source payloads to canonical job records.

This module provides:
- RecordNormalizer: Service to convert delimited text or JSON postings to JobRecord
- lookup_property: Alias-list property lookup used by the filter engine
- extract_numeric_value: Lossy number extraction for salary and experience text
"""

from .delimited import split_delimited_line
from .fields import HEADER_ALIASES, canonical_field_for, extract_numeric_value, lookup_property
from .service import RecordNormalizer

__all__ = [
    "RecordNormalizer",
    "HEADER_ALIASES",
    "canonical_field_for",
    "extract_numeric_value",
    "lookup_property",
    "split_delimited_line",
]
