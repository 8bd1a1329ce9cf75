"""Domain models for the Job Search Dashboard."""

from .models import FilterCriteria, JobRecord, JobSource, ResumeProfile, SearchParameters

__all__ = ["JobSource", "JobRecord", "FilterCriteria", "ResumeProfile", "SearchParameters"]
