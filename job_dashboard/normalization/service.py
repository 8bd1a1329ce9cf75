"""Record normalization service for converting source payloads to JobRecord.

This module implements the normalization logic that:
1. Splits delimited-text payloads into a header row and data rows
2. Maps each header onto a canonical JobRecord attribute via the alias table
3. Keeps unrecognized headers verbatim as extra attributes
4. Maps JSON postings (already near-canonical) through the same alias table
5. Absorbs empty, short, ragged, or unreadable payloads instead of raising
"""

import csv
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from job_dashboard.domain.models import JobRecord, JobSource
from job_dashboard.logging import get_logger

from .delimited import DEFAULT_DELIMITER, DEFAULT_QUOTECHAR, split_delimited_line, split_lines
from .fields import canonical_field_for

logger = get_logger(__name__, component="normalization")


class RecordNormalizer:
    """Normalizes raw source payloads into canonical JobRecord values.

    Responsibilities:
    - Parse delimited text with a header row, respecting quoted fields
    - Resolve header aliases case-insensitively
    - Assign fields positionally, tolerating rows with too few or too many values
    - Convert JSON postings to records
    - Never raise on bad input: failures become an empty result plus a log entry
    """

    def __init__(
        self,
        max_records: int = 0,
        delimiter: str = DEFAULT_DELIMITER,
        quotechar: str = DEFAULT_QUOTECHAR,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize RecordNormalizer.

        Args:
            max_records: Maximum records to keep per payload (0 = unlimited)
            delimiter: Field separator for delimited payloads
            quotechar: Quote character for delimited payloads
            logger_instance: Logger instance (defaults to module logger)
        """
        self.max_records = max_records
        self.delimiter = delimiter
        self.quotechar = quotechar
        self.logger = logger_instance or logger

    def normalize(self, text: Optional[str], source: JobSource) -> List[JobRecord]:
        """Normalize a delimited-text payload.

        The first line is the header. Each later non-blank line becomes one
        record. A row that cannot be tokenized is skipped without affecting
        the other rows.

        Args:
            text: Raw payload, possibly empty
            source: Provider the payload came from

        Returns:
            List of JobRecord; empty if the payload has no data rows or is unreadable
        """
        if not text:
            return []

        try:
            if isinstance(text, bytes):
                text = text.decode("utf-8", errors="replace")

            lines = split_lines(text)
            if len(lines) < 2:
                self.logger.debug(
                    "Payload has no data rows",
                    extra={
                        "event": "normalization.payload.empty",
                        "source": source.value,
                        "line_count": len(lines),
                    },
                )
                return []

            headers = split_delimited_line(lines[0], self.delimiter, self.quotechar)
            if not any(headers):
                self.logger.warning(
                    "Payload header row is blank",
                    extra={"event": "normalization.payload.no_header", "source": source.value},
                )
                return []

            records: List[JobRecord] = []
            skipped = 0
            ragged = 0

            for line_number, line in enumerate(lines[1:], start=2):
                if not line.strip():
                    continue

                try:
                    values = split_delimited_line(line, self.delimiter, self.quotechar)
                except csv.Error as e:
                    skipped += 1
                    self.logger.warning(
                        f"Skipping unreadable row {line_number}: {e}",
                        extra={
                            "event": "normalization.row.skipped",
                            "source": source.value,
                            "line_number": line_number,
                        },
                    )
                    continue

                if len(values) != len(headers):
                    ragged += 1

                records.append(self._build_record(zip(headers, values), source))

            records = self._truncate(records, source)

            self.logger.info(
                f"Normalized {len(records)} records",
                extra={
                    "event": "normalization.payload.normalized",
                    "source": source.value,
                    "record_count": len(records),
                    "skipped_rows": skipped,
                    "ragged_rows": ragged,
                },
            )
            return records

        except Exception as e:
            self.logger.error(
                f"Failed to parse payload from {source.value}: {e}",
                extra={
                    "event": "normalization.payload.failed",
                    "source": source.value,
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            return []

    def normalize_items(
        self, items: Optional[Iterable[Mapping[str, Any]]], source: JobSource
    ) -> List[JobRecord]:
        """Normalize JSON postings (a list of objects) into records.

        Keys go through the same alias table as delimited headers. Items that
        are not objects are skipped.

        Args:
            items: Iterable of posting objects
            source: Provider the postings came from

        Returns:
            List of JobRecord
        """
        if not items:
            return []

        records: List[JobRecord] = []
        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                self.logger.warning(
                    "Skipping non-object posting",
                    extra={
                        "event": "normalization.item.skipped",
                        "source": source.value,
                        "index": index,
                        "item_type": type(item).__name__,
                    },
                )
                continue

            pairs = ((str(key), self._stringify(value)) for key, value in item.items())
            records.append(self._build_record(pairs, source))

        return self._truncate(records, source)

    def normalize_payload(self, payload: Any, source: JobSource) -> List[JobRecord]:
        """Normalize a payload of any supported shape.

        Supported shapes:
        - str / bytes: delimited text with a header row
        - list: JSON postings
        - dict with a "data" list: JSON postings in an envelope

        Anything else is treated as empty.

        Args:
            payload: Raw payload from a job source
            source: Provider the payload came from

        Returns:
            List of JobRecord
        """
        if payload is None:
            return []
        if isinstance(payload, (str, bytes)):
            return self.normalize(payload, source)
        if isinstance(payload, list):
            return self.normalize_items(payload, source)
        if isinstance(payload, Mapping) and isinstance(payload.get("data"), list):
            return self.normalize_items(payload["data"], source)

        self.logger.warning(
            f"Unsupported payload type from {source.value}: {type(payload).__name__}",
            extra={
                "event": "normalization.payload.unsupported",
                "source": source.value,
                "payload_type": type(payload).__name__,
            },
        )
        return []

    @staticmethod
    def _build_record(pairs: Iterable[Tuple[str, Optional[str]]], source: JobSource) -> JobRecord:
        """Assign (header, value) pairs to canonical or extra attributes.

        Empty values are skipped so the record simply lacks that attribute.
        When two headers map to the same attribute, the later one wins.
        """
        fields: Dict[str, str] = {}
        extra: Dict[str, str] = {}

        for header, value in pairs:
            if value is None or value == "":
                continue
            header = header.strip()
            if not header:
                continue
            field_name = canonical_field_for(header)
            if field_name:
                fields[field_name] = value
            else:
                extra[header] = value

        return JobRecord(source=source, extra=extra, **fields)

    @staticmethod
    def _stringify(value: Any) -> Optional[str]:
        """Render a JSON value as a trimmed string; None stays None."""
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return "|".join(str(v).strip() for v in value if v is not None)
        return str(value).strip()

    def _truncate(self, records: List[JobRecord], source: JobSource) -> List[JobRecord]:
        """Truncate to max_records if configured."""
        if self.max_records > 0 and len(records) > self.max_records:
            self.logger.warning(
                "Truncating records to max_records limit",
                extra={
                    "event": "normalization.payload.truncated",
                    "source": source.value,
                    "total": len(records),
                    "max": self.max_records,
                },
            )
            return records[: self.max_records]
        return records
