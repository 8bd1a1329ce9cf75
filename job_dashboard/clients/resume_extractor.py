"""Client for the resume extraction service."""

from __future__ import annotations

import mimetypes
from typing import Any, Dict, Mapping

from job_dashboard.domain.models import ResumeProfile
from job_dashboard.logging import get_logger

from .base import BaseClient
from .exceptions import ClientResponseError

logger = get_logger(__name__, component="client")

# Optional search hints the service may return next to extracted_info
HINT_FIELDS = (
    "experience",
    "job_type",
    "remote",
    "date_posted",
    "company",
    "industry",
    "ctc_filters",
    "radius",
)


class ResumeExtractorClient(BaseClient):
    """Uploads a resume and returns the structured fields extracted from it.

    API Details:
        Method: POST (multipart/form-data, field "file")
        Response: JSON object with an "extracted_info" payload plus optional
            search hints (experience, job_type, remote, ...)
    """

    SERVICE_NAME = "resume-extractor"

    def extract(self, file_name: str, content: bytes) -> ResumeProfile:
        """Upload a resume file and parse the extraction result.

        There is no retry; a failure is reported to the caller as-is.

        Args:
            file_name: Original file name (used for the multipart part)
            content: File bytes

        Returns:
            ResumeProfile with extracted fields and search hints

        Raises:
            ClientResponseError: If no information could be extracted
            ClientHTTPError, ClientTimeoutError: On transport failures
        """
        content_type = mimetypes.guess_type(file_name)[0] or "application/octet-stream"
        data = self._request_json("POST", files={"file": (file_name, content, content_type)})

        if not isinstance(data, Mapping) or not data.get("extracted_info"):
            raise ClientResponseError("No information could be extracted from the resume")

        profile = parse_extraction_response(data)
        logger.info(
            "Resume information extracted",
            extra={
                "event": "client.resume.extracted",
                "file_name": file_name,
                "has_keyword": bool(profile.keyword),
                "has_location": bool(profile.location),
            },
        )
        return profile


def parse_extraction_response(data: Mapping[str, Any]) -> ResumeProfile:
    """Build a ResumeProfile from the extraction service's response.

    ``extracted_info`` may be an object or a block of "Key: value" lines.
    The search keyword comes from "keyword" if present, otherwise from the
    first listed skill.

    Args:
        data: Decoded JSON response

    Returns:
        ResumeProfile
    """
    info = _info_as_mapping(data.get("extracted_info"))

    keyword = info.get("keyword") or info.get("skills") or info.get("skill") or ""
    if isinstance(keyword, (list, tuple)):
        keyword = next((str(item) for item in keyword if item), "")

    fields: Dict[str, Any] = {
        "name": info.get("name"),
        "branch": info.get("branch"),
        "college": info.get("college"),
        "location": info.get("location"),
        "keyword": keyword,
    }
    for hint in HINT_FIELDS:
        if data.get(hint) not in (None, ""):
            fields[hint] = data[hint]

    return ResumeProfile.model_validate(fields)


def _info_as_mapping(info: Any) -> Dict[str, Any]:
    """Normalize extracted_info to a dict with lowercase keys."""
    if isinstance(info, Mapping):
        return {str(key).strip().lower(): value for key, value in info.items()}

    result: Dict[str, Any] = {}
    if isinstance(info, str):
        for line in info.splitlines():
            key, sep, value = line.partition(":")
            if sep and key.strip():
                result.setdefault(key.strip().lower(), value.strip())
    return result
