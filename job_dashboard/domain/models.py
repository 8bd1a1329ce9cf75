"""Core domain models for job records, filter criteria, and search requests.

This module defines the data structures used throughout the application:
- JobSource: the three upstream providers feeding the dashboard
- JobRecord: canonical job posting, independent of source-specific field naming
- FilterCriteria: user-specified constraints applied by the filter engine
- ResumeProfile: structured fields returned by the resume extraction service
- SearchParameters: request body sent to the job-search service
"""

from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_dashboard.utils.text import (
    extract_numeric_value,
    has_leading_number,
    parse_leading_float,
    strip_list_prefix,
)


class JobSource(str, Enum):
    """Upstream job providers. Values are the tab labels used by the search service."""

    LINKEDIN = "LinkedIn Jobs"
    NAUKRI = "Naukri Jobs"
    CAREERJET = "CareerJet Jobs"

    @classmethod
    def from_label(cls, label: str) -> "JobSource":
        """Resolve a source from its tab label or a short name like "naukri".

        Raises:
            ValueError: If the label does not name a known source
        """
        wanted = label.strip().lower()
        for source in cls:
            if wanted in (source.value.lower(), source.name.lower()):
                return source
        valid = ", ".join(s.name.lower() for s in cls)
        raise ValueError(f"Unknown job source '{label}'. Expected one of: {valid}")


class JobRecord(BaseModel):
    """Canonical representation of one job posting.

    Records are immutable once built by the normalizer, so ``source`` is set
    exactly once. Headers the normalizer does not recognize are kept verbatim
    in ``extra`` and remain readable through ``get()``.

    A record has no identity beyond its position in a search result; running
    the same search twice yields a new, disjoint set of records.
    """

    CANONICAL_FIELDS: ClassVar[Tuple[str, ...]] = (
        "title",
        "company",
        "company_link",
        "location",
        "description",
        "url",
        "posted_at",
        "experience",
        "salary",
        "job_type",
        "work_mode",
        "industry",
        "rating",
        "tech_stack",
    )

    title: Optional[str] = Field(None, description="Job title")
    company: Optional[str] = Field(None, description="Company name")
    company_link: Optional[str] = Field(None, description="Link to the company page")
    location: Optional[str] = Field(None, description="Free-text location")
    description: Optional[str] = Field(None, description="Job description text")
    url: Optional[str] = Field(None, description="Link to the job posting")
    posted_at: Optional[str] = Field(None, description="Posting time, free text or timestamp")
    experience: Optional[str] = Field(None, description="Raw experience requirement")
    salary: Optional[str] = Field(None, description="Raw salary / CTC text")
    job_type: Optional[str] = Field(None, description="Employment type")
    work_mode: Optional[str] = Field(None, description="Remote / hybrid / on-site")
    industry: Optional[str] = Field(None, description="Industry")
    rating: Optional[str] = Field(None, description="Company rating")
    tech_stack: Optional[str] = Field(None, description="Skills or tech stack")
    source: JobSource = Field(..., description="Provider this record came from")
    extra: Dict[str, str] = Field(
        default_factory=dict, description="Unrecognized attributes keyed by original header"
    )

    model_config = ConfigDict(frozen=True)

    def get(self, name: str) -> Optional[str]:
        """Read a canonical attribute or an extra attribute by name."""
        if name in self.CANONICAL_FIELDS:
            return getattr(self, name)
        return self.extra.get(name)

    @property
    def experience_years(self) -> float:
        """Experience extracted with the lossy numeric heuristic (0.0 if unknown)."""
        return extract_numeric_value(self.experience)

    @property
    def salary_value(self) -> float:
        """Salary extracted with the lossy numeric heuristic (0.0 if unknown)."""
        return extract_numeric_value(self.salary)


class FilterCriteria(BaseModel):
    """Constraints applied to an in-memory record collection.

    Every field defaults to "unset" (empty string or zero), which imposes no
    constraint. Text fields are stripped; numeric fields accept strings and
    use their leading number ("12 LPA" -> 12.0). Text with no leading number
    is rejected.
    """

    keyword: str = Field("", description="Matched against title, company, or description")
    location: str = Field("", description="Matched against location")
    company: str = Field("", description="Matched against company")
    experience_ceiling: float = Field(0, ge=0, description="Maximum years of experience (0 = unset)")
    job_type: str = Field("", description="Matched against job type")
    work_mode: str = Field("", description="Matched against work mode")
    minimum_salary: float = Field(0, ge=0, description="Minimum extracted salary (0 = unset)")
    industry: str = Field("", description="Matched against industry")

    TEXT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "keyword",
        "location",
        "company",
        "job_type",
        "work_mode",
        "industry",
    )

    @field_validator("keyword", "location", "company", "job_type", "work_mode", "industry", mode="before")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> str:
        """Strip whitespace; None becomes unset."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("experience_ceiling", "minimum_salary", mode="before")
    @classmethod
    def parse_number(cls, v):
        """Accept numbers or numeric strings; blank becomes unset."""
        if v is None:
            return 0
        if isinstance(v, str):
            if not v.strip():
                return 0
            if not has_leading_number(v):
                raise ValueError(f"'{v.strip()}' is not a number")
            return parse_leading_float(v)
        return v

    def is_active(self) -> bool:
        """Whether any constraint is set."""
        if self.experience_ceiling > 0 or self.minimum_salary > 0:
            return True
        return any(getattr(self, name) for name in self.TEXT_FIELDS)


class ResumeProfile(BaseModel):
    """Structured fields extracted from an uploaded resume.

    The extraction service may prefix list items with numbers ("4. Python");
    those prefixes are removed from every string field.
    """

    name: str = ""
    branch: str = ""
    college: str = ""
    keyword: str = ""
    location: str = ""
    experience: int = 0
    job_type: str = ""
    remote: str = ""
    date_posted: str = ""
    company: str = ""
    industry: str = ""
    ctc_filters: str = ""
    radius: str = ""

    @field_validator(
        "name",
        "branch",
        "college",
        "keyword",
        "location",
        "job_type",
        "remote",
        "date_posted",
        "company",
        "industry",
        "ctc_filters",
        "radius",
        mode="before",
    )
    @classmethod
    def clean_text(cls, v) -> str:
        """Drop numbered-list prefixes and surrounding whitespace."""
        if v is None:
            return ""
        return strip_list_prefix(str(v))

    @field_validator("experience", mode="before")
    @classmethod
    def coerce_experience(cls, v) -> int:
        """Experience may arrive as text ("3 years"); keep its leading number."""
        if v is None or v == "":
            return 0
        return int(parse_leading_float(v))


class SearchParameters(BaseModel):
    """Request body for the job-search service.

    ``College`` and ``Branch`` keep the capitalized keys the service expects;
    use ``to_request_body()`` to serialize with those keys.
    """

    name: str = ""
    college: str = Field("", alias="College")
    branch: str = Field("", alias="Branch")
    keyword: str = ""
    location: str = "india"
    experience: int = Field(0, ge=0)
    job_type: str = "fulltime"
    remote: str = "on-site"
    date_posted: str = "week"
    company: str = ""
    industry: str = ""
    ctc_filters: str = ""
    radius: str = "10"

    model_config = ConfigDict(populate_by_name=True)

    def to_request_body(self) -> Dict[str, object]:
        """Serialize with the service's field names."""
        return self.model_dump(by_alias=True)
