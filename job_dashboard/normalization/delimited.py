"""Splitting of delimited text into header and data rows."""

import csv
from typing import List

DEFAULT_DELIMITER = ","
DEFAULT_QUOTECHAR = '"'


def split_delimited_line(
    line: str, delimiter: str = DEFAULT_DELIMITER, quotechar: str = DEFAULT_QUOTECHAR
) -> List[str]:
    """Split one line into stripped fields, honoring quoted delimiters.

    A field wrapped in quote characters is a single field even if it contains
    the delimiter; doubled quotes inside it stand for one literal quote.

    Args:
        line: A single line of delimited text (no line break)
        delimiter: Field separator
        quotechar: Quote character

    Returns:
        List of field values with surrounding whitespace removed

    Raises:
        csv.Error: If the line cannot be tokenized
    """
    reader = csv.reader([line], delimiter=delimiter, quotechar=quotechar, skipinitialspace=True)
    fields = next(reader, [])
    return [value.strip() for value in fields]


def split_lines(text: str) -> List[str]:
    """Split a payload on any line break convention (\\n, \\r\\n, \\r)."""
    return text.splitlines()
