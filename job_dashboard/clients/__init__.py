"""Clients for the external services behind the dashboard.

- ResumeExtractorClient: resume upload -> ResumeProfile
- JobSearchClient: SearchParameters -> raw payloads per source
- CareerjetProxyClient: keyword/location -> JSON postings

Use the factory to build all three from configuration:
    from job_dashboard.clients import build_clients
    clients = build_clients(app_config)
"""

from .base import BaseClient
from .careerjet import CareerjetProxyClient
from .exceptions import (
    ClientConfigurationError,
    ClientError,
    ClientHTTPError,
    ClientResponseError,
    ClientTimeoutError,
)
from .factory import ServiceClients, build_clients
from .job_search import JobSearchClient
from .resume_extractor import ResumeExtractorClient, parse_extraction_response

__all__ = [
    # Base and factory
    "BaseClient",
    "ServiceClients",
    "build_clients",
    # Clients
    "ResumeExtractorClient",
    "JobSearchClient",
    "CareerjetProxyClient",
    "parse_extraction_response",
    # Exceptions
    "ClientError",
    "ClientHTTPError",
    "ClientTimeoutError",
    "ClientResponseError",
    "ClientConfigurationError",
]
