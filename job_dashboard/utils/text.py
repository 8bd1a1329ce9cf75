"""Text helpers shared by the domain models, normalizer, and clients."""

import re
from typing import Optional, Union

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LIST_PREFIX = re.compile(r"^\d+\.\s*")
_NUMERIC_PREFIX = re.compile(r"\d*\.?\d*")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def extract_numeric_value(value: Union[str, int, float, None]) -> float:
    """Pull a number out of free text such as a salary or experience string.

    Every character that is not a digit or a decimal point is dropped and the
    longest number at the start of the remainder is parsed, so stray dots after
    it are ignored ("3-5 Lacs P.A." -> "35.." -> 35.0). This is a lossy
    heuristic: ranges collapse to the concatenation of their digits
    ("12-15 LPA" -> 1215.0), not to either bound. Filtering on experience and
    salary relies on exactly this behavior.

    Args:
        value: Free text, a number, or None

    Returns:
        Extracted number, or 0.0 if nothing usable remains
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)

    digits = _NON_NUMERIC.sub("", str(value))
    number = _NUMERIC_PREFIX.match(digits).group(0)
    if number.strip(".") == "":
        return 0.0
    return float(number)


def parse_leading_float(value: Union[str, int, float, None]) -> float:
    """Parse the leading number of a string ("12 LPA" -> 12.0), 0.0 if none."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_FLOAT.match(str(value))
    return float(match.group(1)) if match else 0.0


def has_leading_number(text: Optional[str]) -> bool:
    """Whether text starts with a number, ignoring leading whitespace."""
    return bool(text) and _LEADING_FLOAT.match(text) is not None


def strip_list_prefix(text: Optional[str]) -> str:
    """Remove a numbered-list prefix like "4. " and surrounding whitespace."""
    if not text:
        return ""
    return _LIST_PREFIX.sub("", text.strip()).strip()


def collapse_whitespace(text: Optional[str]) -> str:
    """Trim text and collapse internal runs of whitespace to one space."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text.strip())
