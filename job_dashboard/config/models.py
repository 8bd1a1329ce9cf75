"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


def _validate_http_url(v: str) -> str:
    stripped = v.strip()
    parsed = urlparse(stripped)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Must be an http(s) URL, got: '{v}'")
    return stripped


class ServicesConfig(BaseModel):
    """Endpoints of the external services the dashboard talks to."""

    resume_extractor_url: str = Field(..., description="Resume extraction endpoint (multipart POST)")
    job_search_url: str = Field(..., description="Job-search endpoint (JSON POST)")
    careerjet_proxy_url: str = Field(..., description="Job listing proxy endpoint (GET)")

    @field_validator("resume_extractor_url", "job_search_url", "careerjet_proxy_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        return _validate_http_url(v)


class SearchDefaults(BaseModel):
    """Fallback search parameters when the resume does not supply them."""

    location: str = Field("india", min_length=1)
    job_type: str = Field("fulltime", min_length=1)
    remote: str = Field("on-site", min_length=1)
    date_posted: str = Field("week", min_length=1)
    radius: str = Field("10", description="Search radius sent to the job services")

    @field_validator("radius", mode="before")
    @classmethod
    def coerce_radius(cls, v) -> str:
        """YAML may give the radius as a number; the services expect text."""
        if v is None:
            return "10"
        return str(v).strip()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AdvancedConfig(BaseModel):
    """Advanced runtime settings."""

    http_request_timeout: int = Field(
        45, ge=5, le=300, description="Request timeout for service calls (seconds)"
    )
    user_agent: str = Field(
        "JobSearchDashboard/1.0",
        min_length=1,
        description="User-Agent string for HTTP requests",
    )
    max_records_per_source: int = Field(
        500, ge=0, description="Maximum records kept per source (0 = unlimited)"
    )

    @field_validator("user_agent")
    @classmethod
    def strip_user_agent(cls, v: str) -> str:
        """Strip whitespace from user agent."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("user_agent cannot be empty")
        return stripped


class AppConfig(BaseModel):
    """Root configuration object for the Job Search Dashboard."""

    services: ServicesConfig = Field(..., description="External service endpoints")
    search_defaults: SearchDefaults = Field(
        default_factory=SearchDefaults, description="Fallback search parameters"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    advanced: AdvancedConfig = Field(
        default_factory=AdvancedConfig, description="Advanced runtime settings"
    )

    def with_service_overrides(
        self,
        resume_extractor_url: Optional[str] = None,
        job_search_url: Optional[str] = None,
        careerjet_proxy_url: Optional[str] = None,
    ) -> "AppConfig":
        """Return a copy with any given service URLs replaced (validated)."""
        overrides = {
            key: value
            for key, value in {
                "resume_extractor_url": resume_extractor_url,
                "job_search_url": job_search_url,
                "careerjet_proxy_url": careerjet_proxy_url,
            }.items()
            if value
        }
        if not overrides:
            return self
        services = ServicesConfig.model_validate({**self.services.model_dump(), **overrides})
        return self.model_copy(update={"services": services})
