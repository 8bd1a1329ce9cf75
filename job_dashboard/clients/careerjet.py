"""Client for the third-party job listing proxy (CareerJet)."""

from __future__ import annotations

from typing import Any, Dict, List

from job_dashboard.logging import get_logger
from job_dashboard.utils.text import strip_list_prefix

from .base import BaseClient
from .exceptions import ClientResponseError

logger = get_logger(__name__, component="client")


class CareerjetProxyClient(BaseClient):
    """Fetches postings scraped by the listing proxy.

    API Details:
        Method: GET with "keyword" and "location" query parameters
        Response: JSON array of postings with Title, Company, Location,
            Description, JobLink and TimePosted keys
    """

    SERVICE_NAME = "careerjet-proxy"

    def fetch_jobs(self, keyword: str, location: str, radius: str = "") -> List[Dict[str, Any]]:
        """Fetch postings for a keyword and location.

        Numbered-list prefixes ("4. Python") are stripped from both terms.

        Args:
            keyword: Search keyword
            location: Search location
            radius: Optional search radius

        Returns:
            List of posting objects as returned by the proxy

        Raises:
            ClientResponseError: If the response is not a JSON array
            ClientHTTPError, ClientTimeoutError: On transport failures
        """
        params = {
            "keyword": strip_list_prefix(keyword),
            "location": strip_list_prefix(location),
        }
        if radius:
            params["radius"] = radius

        data = self._request_json("GET", params=params)
        if not isinstance(data, list):
            raise ClientResponseError("Invalid response format from CareerJet API")

        logger.info(
            "Fetched postings from CareerJet proxy",
            extra={"event": "client.careerjet.received", "count": len(data)},
        )
        return data
