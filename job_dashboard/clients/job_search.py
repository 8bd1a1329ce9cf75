"""Client for the custom job-search service."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from job_dashboard.domain.models import JobSource, SearchParameters
from job_dashboard.logging import get_logger

from .base import BaseClient
from .exceptions import ClientResponseError

logger = get_logger(__name__, component="client")


class JobSearchClient(BaseClient):
    """Runs a job search and returns raw per-source payloads.

    API Details:
        Method: POST with a JSON body of SearchParameters
        Response: JSON object keyed by source tab label ("LinkedIn Jobs",
            "Naukri Jobs"); each value is delimited text or a list of postings
    """

    SERVICE_NAME = "job-search"

    def search(self, parameters: SearchParameters) -> Dict[JobSource, Any]:
        """Query the job-search service.

        Args:
            parameters: Search parameters to send

        Returns:
            Mapping of JobSource to its raw payload; sources the service did not
            return are absent

        Raises:
            ClientResponseError: If the response is not a JSON object
            ClientHTTPError, ClientTimeoutError: On transport failures
        """
        body = parameters.to_request_body()
        logger.info(
            "Sending job search request",
            extra={
                "event": "client.job_search.requested",
                "keyword": parameters.keyword,
                "location": parameters.location,
            },
        )

        data = self._request_json("POST", json_data=body)
        if not isinstance(data, Mapping):
            raise ClientResponseError(
                f"Job search returned {type(data).__name__}, expected an object of results per source"
            )

        payloads: Dict[JobSource, Any] = {}
        for source in JobSource:
            if source.value in data:
                payloads[source] = data[source.value]

        logger.info(
            "Job search response received",
            extra={
                "event": "client.job_search.received",
                "sources": [source.value for source in payloads],
            },
        )
        return payloads
