"""Environment variable loading and validation."""

import os
from typing import Optional
from urllib.parse import urlparse

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        resume_extractor_url: Optional[str] = None,
        job_search_url: Optional[str] = None,
        careerjet_proxy_url: Optional[str] = None,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize environment configuration."""
        self.resume_extractor_url = resume_extractor_url
        self.job_search_url = job_search_url
        self.careerjet_proxy_url = careerjet_proxy_url
        self.log_level = log_level
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional; when set they override the config file.
    - RESUME_EXTRACTOR_URL: Resume extraction endpoint
    - JOB_SEARCH_URL: Job-search endpoint
    - CAREERJET_PROXY_URL: Job listing proxy endpoint
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment label attached to log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If any variable is set to an invalid value
    """
    errors = []

    urls = {
        name: os.getenv(name) or None
        for name in ("RESUME_EXTRACTOR_URL", "JOB_SEARCH_URL", "CAREERJET_PROXY_URL")
    }
    log_level = os.getenv("LOG_LEVEL") or None
    environment = os.getenv("ENVIRONMENT") or None

    for name, value in urls.items():
        if value and not _is_http_url(value):
            errors.append(f"Invalid {name}: '{value}'. Must be an http(s) URL.")

    if log_level and log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Service URLs must include the scheme, e.g. http://localhost:5000/job-search",
            ],
        )

    return EnvironmentConfig(
        resume_extractor_url=urls["RESUME_EXTRACTOR_URL"],
        job_search_url=urls["JOB_SEARCH_URL"],
        careerjet_proxy_url=urls["CAREERJET_PROXY_URL"],
        log_level=log_level.upper() if log_level else None,
        environment=environment,
    )


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
