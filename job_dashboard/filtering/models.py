"""Data models for the filter engine."""

from dataclasses import dataclass, field
from typing import List

from job_dashboard.domain.models import FilterCriteria, JobRecord


@dataclass
class FilterResult:
    """Result of applying FilterCriteria to one record collection.

    Carries the filtered-results state explicitly so callers do not need a
    shared "is filtered" flag.

    Attributes:
        records: Records satisfying every set criterion, in input order
        criteria: Criteria that were applied
        total_count: Number of records before filtering
        is_filtered: True if any criterion was set
    """

    records: List[JobRecord] = field(default_factory=list)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    total_count: int = 0
    is_filtered: bool = False

    @property
    def matched_count(self) -> int:
        """Number of records that passed."""
        return len(self.records)

    @property
    def excluded_count(self) -> int:
        """Number of records removed by the criteria."""
        return self.total_count - self.matched_count
