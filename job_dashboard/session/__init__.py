"""Search session: runs dashboard actions and tracks what is displayed."""

from .models import DisplayState, SearchOutcome, empty_results
from .service import SearchInputError, SearchSession

__all__ = [
    "DisplayState",
    "SearchInputError",
    "SearchOutcome",
    "SearchSession",
    "empty_results",
]
