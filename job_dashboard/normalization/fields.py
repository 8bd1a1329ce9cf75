"""Header alias table and field lookup helpers.

The three job sources name the same columns differently ("Job Title",
"job_title", "JobTitle"). Header names are reduced to a comparison key
(lowercase, underscores read as spaces) and looked up in HEADER_ALIASES to
find the canonical JobRecord attribute.
"""

import re
from typing import Dict, Mapping, Optional, Sequence, Union

from job_dashboard.domain.models import JobRecord
from job_dashboard.utils.text import extract_numeric_value

__all__ = [
    "HEADER_ALIASES",
    "canonical_field_for",
    "extract_numeric_value",
    "header_key",
    "lookup_property",
]

_ALIASES_BY_FIELD: Dict[str, Sequence[str]] = {
    "title": ("job title", "title", "jobtitle"),
    "company": ("company", "company name", "companyname"),
    "company_link": ("company link", "companylink"),
    "location": ("location", "job location"),
    "description": ("description", "job description"),
    "url": ("job link", "job posting link", "joblink", "jobpostinglink", "url", "link", "apply link"),
    "posted_at": ("time posted", "timeposted", "posted", "date posted", "posted date", "date"),
    "experience": ("experience", "years of experience"),
    "salary": ("salary", "ctc", "salary range"),
    "job_type": ("job type", "jobtype", "type", "employment type"),
    "work_mode": ("work mode", "workmode", "remote", "workplace type"),
    "industry": ("industry",),
    "rating": ("rating",),
    "tech_stack": ("tech stack", "techstack", "skills"),
}

# Comparison key -> canonical attribute
HEADER_ALIASES: Dict[str, str] = {
    alias: field_name
    for field_name, aliases in _ALIASES_BY_FIELD.items()
    for alias in aliases
}


def header_key(header: str) -> str:
    """Reduce a header name to its alias comparison key."""
    return re.sub(r"\s+", " ", header.replace("_", " ").strip().lower())


def canonical_field_for(header: str) -> Optional[str]:
    """Return the canonical attribute for a header, or None if unrecognized."""
    return HEADER_ALIASES.get(header_key(header))


def lookup_property(
    record: Union[JobRecord, Mapping[str, object]], names: Sequence[str]
) -> str:
    """Return the first present, non-empty value among candidate names.

    The order of ``names`` is a priority: callers list the canonical name
    first, then known aliases. The value is lowercased for matching.

    Args:
        record: JobRecord (canonical and extra attributes) or a plain mapping
        names: Ordered candidate attribute names

    Returns:
        Lowercased value, or "" if no candidate is present
    """
    for name in names:
        value = record.get(name)
        if value is None:
            continue
        text = str(value)
        if text:
            return text.lower()
    return ""
