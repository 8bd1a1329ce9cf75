"""Structured logging helpers for the Job Search Dashboard."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that tags records with a component and keeps call-site extras."""

    def process(self, msg, kwargs):
        """Merge the adapter's component into the call's extra; call values win."""
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger, optionally tagging every record with a component field.

    Args:
        name: Logger name (typically __name__)
        component: Component label such as "session" or "client"

    Returns:
        Logger, or ComponentLoggerAdapter when a component is given

    Example:
        >>> logger = get_logger(__name__, component="session")
        >>> logger.info("Search started", extra={"event": "session.search.started"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger
