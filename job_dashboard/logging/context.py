"""Scoped logging context.

Fields pushed here (request token, source, action) are attached to every log
record emitted inside the scope by ContextualFilter. Storage is a ContextVar,
so concurrent actions on different threads keep separate contexts.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

_log_context: ContextVar[Dict[str, Any]] = ContextVar("job_dashboard_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active context fields."""
    return dict(_log_context.get())


def push_log_context(**fields: Any) -> Token:
    """Layer new fields over the active context.

    Returns:
        Token for pop_log_context()
    """
    return _log_context.set({**_log_context.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before push_log_context()."""
    _log_context.reset(token)


def clear_log_context() -> None:
    """Drop all context fields (used by tests)."""
    _log_context.set({})


class log_context:
    """Context manager that pushes fields on entry and restores on exit.

    Example:
        >>> with log_context(request_token=3, action="search"):
        ...     logger.info("Searching")  # record carries request_token and action
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self._token: Optional[Token] = None

    def __enter__(self) -> "log_context":
        self._token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self._token is not None:
            pop_log_context(self._token)
            self._token = None
        return False
