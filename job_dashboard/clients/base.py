"""Base client with shared HTTP handling for the external services.

Every client talks to one endpoint through a requests.Session carrying the
configured User-Agent and timeout. Transport and status failures are logged
and re-raised as ClientError subclasses.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from job_dashboard.logging import get_logger

from .exceptions import (
    ClientConfigurationError,
    ClientHTTPError,
    ClientResponseError,
    ClientTimeoutError,
)

logger = get_logger(__name__, component="client")


class BaseClient:
    """Shared HTTP plumbing for service clients.

    Attributes:
        endpoint: Absolute URL of the service endpoint
        timeout: HTTP request timeout in seconds
        user_agent: User-Agent header for HTTP requests
    """

    SERVICE_NAME = "service"

    def __init__(
        self,
        endpoint: str,
        timeout: int = 45,
        user_agent: str = "JobSearchDashboard/1.0",
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize client with configuration.

        Args:
            endpoint: Absolute http(s) URL of the service
            timeout: HTTP request timeout in seconds (range 5-300)
            user_agent: User-Agent header for requests
            session: Optional pre-built session (mainly for tests)

        Raises:
            ClientConfigurationError: If endpoint, timeout, or user_agent is invalid
        """
        parsed = urlparse(endpoint or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ClientConfigurationError(
                f"{self.SERVICE_NAME} endpoint must be an http(s) URL, got: {endpoint!r}"
            )
        if not 5 <= timeout <= 300:
            raise ClientConfigurationError(
                f"Timeout must be between 5 and 300 seconds, got: {timeout}"
            )
        if not user_agent or not user_agent.strip():
            raise ClientConfigurationError("user_agent cannot be empty")

        self.endpoint = endpoint
        self.timeout = timeout
        self.user_agent = user_agent.strip()

        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": self.user_agent})

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def _request(
        self,
        method: str = "GET",
        params: Optional[Dict[str, str]] = None,
        json_data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        url: Optional[str] = None,
    ) -> requests.Response:
        """Send a request and return the successful response.

        Args:
            method: HTTP method
            params: Query parameters
            json_data: JSON body
            files: Multipart file fields
            url: Override URL (defaults to the client endpoint)

        Returns:
            Response with a status below 400

        Raises:
            ClientHTTPError: On 4xx/5xx status or connection failure
            ClientTimeoutError: On request timeout
        """
        url = url or self.endpoint
        logger.debug(
            f"HTTP {method} request to {url}",
            extra={
                "event": "client.request.started",
                "client": self.SERVICE_NAME,
                "method": method,
                "url": url,
                "timeout": self.timeout,
            },
        )

        try:
            response = self._session.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                files=files,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.warning(
                f"Request to {url} timed out after {self.timeout} seconds",
                extra={
                    "event": "client.request.timeout",
                    "client": self.SERVICE_NAME,
                    "url": url,
                },
            )
            raise ClientTimeoutError(
                f"Request to {url} timed out after {self.timeout} seconds", url=url
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(
                f"Request to {url} failed: {e}",
                extra={
                    "event": "client.request.failed",
                    "client": self.SERVICE_NAME,
                    "error_type": type(e).__name__,
                    "url": url,
                },
            )
            raise ClientHTTPError(f"Request to {url} failed: {e}", status_code=0, url=url) from e

        if response.status_code >= 400:
            log_level = logging.WARNING if response.status_code >= 500 else logging.ERROR
            logger.log(
                log_level,
                f"HTTP {response.status_code} error from {url}",
                extra={
                    "event": "client.request.error_status",
                    "client": self.SERVICE_NAME,
                    "status_code": response.status_code,
                    "url": url,
                },
            )
            raise ClientHTTPError(
                f"{self.SERVICE_NAME} returned HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                url=url,
            )

        logger.debug(
            "HTTP request succeeded",
            extra={
                "event": "client.request.succeeded",
                "client": self.SERVICE_NAME,
                "status_code": response.status_code,
                "url": url,
            },
        )
        return response

    def _request_json(self, method: str = "GET", **kwargs) -> Any:
        """Send a request and decode its JSON body.

        Raises:
            ClientResponseError: If the body is not valid JSON
            ClientHTTPError, ClientTimeoutError: As for _request()
        """
        response = self._request(method, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"Failed to parse JSON response from {response.url or self.endpoint}",
                extra={
                    "event": "client.response.invalid_json",
                    "client": self.SERVICE_NAME,
                },
            )
            raise ClientResponseError(
                f"{self.SERVICE_NAME} returned a response that is not valid JSON"
            ) from e
