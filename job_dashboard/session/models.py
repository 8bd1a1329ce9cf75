"""Data models for search actions and the dashboard's display state."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from job_dashboard.domain.models import FilterCriteria, JobRecord, JobSource, ResumeProfile


def empty_results() -> Dict[JobSource, List[JobRecord]]:
    """One empty collection per source tab."""
    return {source: [] for source in JobSource}


@dataclass
class SearchOutcome:
    """
    Result of one network-backed dashboard action.

    Attributes:
        request_token: Token taken when the action was dispatched
        action: Action name ("resume_search" or "parameter_search")
        results: Normalized records per source (every source present)
        errors: User-facing messages for failed upstream calls
        profile: Fields extracted from the resume, if an upload was involved
        stale: True if a newer action was dispatched before this one finished;
            a stale outcome is never applied to the display state
        started_at: UTC timestamp when the action began
        finished_at: UTC timestamp when the action completed
    """

    request_token: int
    action: str
    results: Dict[JobSource, List[JobRecord]] = field(default_factory=empty_results)
    errors: List[str] = field(default_factory=list)
    profile: Optional[ResumeProfile] = None
    stale: bool = False
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def had_errors(self) -> bool:
        """Whether any upstream call failed."""
        return bool(self.errors)

    @property
    def total_records(self) -> int:
        """Records across all sources."""
        return sum(len(records) for records in self.results.values())


@dataclass
class DisplayState:
    """
    What the dashboard currently shows.

    ``unfiltered_results`` always holds the last applied search outcome so
    filters can be re-applied or cleared without another network call.

    Attributes:
        results: Records shown per source tab
        unfiltered_results: Records of the last search before filtering
        is_filtered: True if ``results`` were produced by active criteria
        criteria: Criteria behind ``results`` (empty when unfiltered)
        request_token: Token of the search that produced this state (0 = none yet)
    """

    results: Dict[JobSource, List[JobRecord]] = field(default_factory=empty_results)
    unfiltered_results: Dict[JobSource, List[JobRecord]] = field(default_factory=empty_results)
    is_filtered: bool = False
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    request_token: int = 0
