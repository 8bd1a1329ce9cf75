"""Factory for building the service clients from configuration."""

from dataclasses import dataclass

from job_dashboard.config.models import AppConfig

from .careerjet import CareerjetProxyClient
from .exceptions import ClientConfigurationError
from .job_search import JobSearchClient
from .resume_extractor import ResumeExtractorClient


@dataclass
class ServiceClients:
    """The three clients a search session needs."""

    resume_extractor: ResumeExtractorClient
    job_search: JobSearchClient
    careerjet: CareerjetProxyClient


def build_clients(app_config: AppConfig) -> ServiceClients:
    """Instantiate all service clients with shared timeout and User-Agent.

    Args:
        app_config: Application configuration

    Returns:
        ServiceClients bundle

    Raises:
        ClientConfigurationError: If any client rejects its settings
    """
    services = app_config.services
    advanced = app_config.advanced
    common = {"timeout": advanced.http_request_timeout, "user_agent": advanced.user_agent}

    try:
        return ServiceClients(
            resume_extractor=ResumeExtractorClient(services.resume_extractor_url, **common),
            job_search=JobSearchClient(services.job_search_url, **common),
            careerjet=CareerjetProxyClient(services.careerjet_proxy_url, **common),
        )
    except ClientConfigurationError:
        raise
    except Exception as e:
        raise ClientConfigurationError(f"Failed to create service clients: {e}") from e
