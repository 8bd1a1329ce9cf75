"""Filter engine for evaluating job records against user criteria.

This module implements the filtering logic that:
1. Reads each record's filterable attributes through alias lists
2. Applies every set criterion (logical AND; unset criteria impose nothing)
3. Returns the matching subset in input order, with the filter state attached
"""

import logging
import re
from typing import Dict, List, Mapping, Optional, Pattern, Sequence

from job_dashboard.domain.models import FilterCriteria, JobRecord, JobSource
from job_dashboard.normalization.fields import extract_numeric_value, lookup_property

from .models import FilterResult

logger = logging.getLogger(__name__)

# Candidate attribute names per criterion, canonical name first
TITLE_NAMES = ("title", "Title", "JobTitle", "job_title")
COMPANY_NAMES = ("company", "Company", "CompanyName", "company_name")
LOCATION_NAMES = ("location", "Location")
DESCRIPTION_NAMES = ("description", "Description")
JOB_TYPE_NAMES = ("job_type", "type", "JobType")
WORK_MODE_NAMES = ("work_mode", "remote", "WorkMode", "workplace_type")
INDUSTRY_NAMES = ("industry", "Industry")
EXPERIENCE_NAMES = ("experience", "Experience", "years_of_experience")
SALARY_NAMES = ("salary", "Salary", "ctc", "CTC")


def build_search_pattern(term: str) -> Pattern[str]:
    """Compile a case-insensitive pattern matching ``term`` literally.

    Characters with meaning to the regex engine ("+", "(", "." ...) are
    escaped so a keyword like "C++" matches only the literal text.
    """
    return re.compile(re.escape(term), re.IGNORECASE)


class FilterEngine:
    """Evaluates job records against FilterCriteria.

    Per-criterion rules:
    - keyword: substring of title OR company OR description
    - location, company, job_type, work_mode, industry: substring of that attribute
    - experience_ceiling: extracted experience must be > 0 and <= ceiling
    - minimum_salary: extracted salary must be >= minimum (0 fails)

    Matching is always case-insensitive and literal.
    """

    def __init__(self, criteria: FilterCriteria, logger_instance: Optional[logging.Logger] = None):
        """Initialize FilterEngine.

        Args:
            criteria: Constraints to apply
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.criteria = criteria
        self.logger = logger_instance or logger
        self._patterns: Dict[str, Pattern[str]] = {
            name: build_search_pattern(getattr(criteria, name))
            for name in FilterCriteria.TEXT_FIELDS
            if getattr(criteria, name)
        }

    def matches(self, record: JobRecord) -> bool:
        """Check whether a record satisfies every set criterion."""
        criteria = self.criteria
        patterns = self._patterns

        keyword = patterns.get("keyword")
        if keyword is not None:
            haystacks = (
                lookup_property(record, TITLE_NAMES),
                lookup_property(record, COMPANY_NAMES),
                lookup_property(record, DESCRIPTION_NAMES),
            )
            if not any(keyword.search(text) for text in haystacks):
                return False

        if not self._attribute_matches("location", record, LOCATION_NAMES):
            return False
        if not self._attribute_matches("company", record, COMPANY_NAMES):
            return False

        if criteria.experience_ceiling > 0:
            experience = extract_numeric_value(lookup_property(record, EXPERIENCE_NAMES))
            # Unknown experience (0) is excluded once a ceiling is set
            if experience == 0 or experience > criteria.experience_ceiling:
                return False

        if not self._attribute_matches("job_type", record, JOB_TYPE_NAMES):
            return False
        if not self._attribute_matches("work_mode", record, WORK_MODE_NAMES):
            return False

        if criteria.minimum_salary > 0:
            salary = extract_numeric_value(lookup_property(record, SALARY_NAMES))
            if salary < criteria.minimum_salary:
                return False

        if not self._attribute_matches("industry", record, INDUSTRY_NAMES):
            return False

        return True

    def apply(self, records: Optional[Sequence[JobRecord]]) -> FilterResult:
        """Filter a record collection.

        With no criteria set the input is returned unchanged (same records,
        same order).

        Args:
            records: Records to filter (None is treated as empty)

        Returns:
            FilterResult with the matching subset and filter state
        """
        records = list(records or [])
        is_filtered = self.criteria.is_active()

        if is_filtered:
            matched = [record for record in records if self.matches(record)]
        else:
            matched = records

        self.logger.debug(
            f"Filtered {len(records)} records down to {len(matched)}",
            extra={
                "event": "filter.applied",
                "total": len(records),
                "matched": len(matched),
                "is_filtered": is_filtered,
            },
        )

        return FilterResult(
            records=matched,
            criteria=self.criteria,
            total_count=len(records),
            is_filtered=is_filtered,
        )

    def apply_all(
        self, results: Mapping[JobSource, Sequence[JobRecord]]
    ) -> Dict[JobSource, FilterResult]:
        """Filter every source's collection independently."""
        return {source: self.apply(records) for source, records in results.items()}

    def _attribute_matches(self, criterion: str, record: JobRecord, names: Sequence[str]) -> bool:
        """Substring check for a single-attribute criterion; unset passes."""
        pattern = self._patterns.get(criterion)
        if pattern is None:
            return True
        return pattern.search(lookup_property(record, names)) is not None


def filter_records(
    records: Optional[Sequence[JobRecord]], criteria: FilterCriteria
) -> List[JobRecord]:
    """Return the records satisfying ``criteria`` (pure function form)."""
    return FilterEngine(criteria).apply(records).records
