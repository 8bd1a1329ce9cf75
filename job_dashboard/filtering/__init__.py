"""Filter engine for narrowing job records to user-specified criteria.

This module provides:
- FilterEngine: Service to evaluate records against FilterCriteria
- FilterResult: Filtered subset plus explicit filter state
- filter_records: Pure function form of the engine
"""

from .engine import FilterEngine, build_search_pattern, filter_records
from .models import FilterResult

__all__ = ["FilterEngine", "FilterResult", "build_search_pattern", "filter_records"]
