"""Soft configuration checks that warn instead of failing."""

import warnings
from typing import Any, Dict, List
from urllib.parse import urlparse

_LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    services = config_dict.get("services", {})
    if isinstance(services, dict):
        for key, url in services.items():
            if not isinstance(url, str):
                continue
            parsed = urlparse(url.strip())
            if parsed.scheme == "http" and parsed.hostname and parsed.hostname not in _LOCAL_HOSTS:
                warning_messages.append(
                    f"Service '{key}' uses plain HTTP to a remote host ({parsed.hostname}); "
                    "resume uploads will travel unencrypted"
                )

    advanced = config_dict.get("advanced", {})
    if isinstance(advanced, dict):
        max_records = advanced.get("max_records_per_source", 500)
        if isinstance(max_records, int) and max_records > 5000:
            warning_messages.append(
                f"Large max_records_per_source ({max_records}) may slow down filtering and display"
            )

        timeout = advanced.get("http_request_timeout")
        if isinstance(timeout, int) and timeout < 15:
            warning_messages.append(
                f"Short http_request_timeout ({timeout}s); job searches often take longer"
            )

    defaults = config_dict.get("search_defaults", {})
    if isinstance(defaults, dict):
        radius = defaults.get("radius")
        if radius is not None and not str(radius).strip().isdigit():
            warning_messages.append(
                f"search_defaults.radius ({radius!r}) is not a whole number; services may ignore it"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
