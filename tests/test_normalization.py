"""Unit tests for the record normalizer and field helpers."""

import csv
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from job_dashboard.domain.models import JobRecord, JobSource
from job_dashboard.normalization import (
    HEADER_ALIASES,
    RecordNormalizer,
    canonical_field_for,
    extract_numeric_value,
    lookup_property,
    split_delimited_line,
)
from job_dashboard.normalization.fields import header_key

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def normalizer():
    """Create a RecordNormalizer without a record cap."""
    return RecordNormalizer()


# ============================================================================
# Field helpers
# ============================================================================


class TestHeaderAliases:
    """Tests for header alias resolution."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Job Title", "title"),
            ("title", "title"),
            ("job_title", "title"),
            ("COMPANY NAME", "company"),
            ("Job Link", "url"),
            ("Job Posting Link", "url"),
            ("Time Posted", "posted_at"),
            ("Tech Stack", "tech_stack"),
            ("skills", "tech_stack"),
            ("Company Link", "company_link"),
            ("  Rating ", "rating"),
        ],
    )
    def test_known_aliases(self, header, expected):
        assert canonical_field_for(header) == expected

    def test_unknown_header(self):
        assert canonical_field_for("Hiring Manager") is None

    def test_header_key_normalizes(self):
        assert header_key("  Job_Posting   Link ") == "job posting link"

    def test_every_alias_targets_a_record_field(self):
        assert set(HEADER_ALIASES.values()) <= set(JobRecord.CANONICAL_FIELDS)


class TestLookupProperty:
    """Tests for alias-list property lookup."""

    def test_first_present_value_wins(self):
        record = JobRecord(title="Backend Dev", source=JobSource.LINKEDIN, extra={"Title": "Other"})

        assert lookup_property(record, ("title", "Title")) == "backend dev"

    def test_falls_back_to_extra(self):
        record = JobRecord(source=JobSource.LINKEDIN, extra={"JobTitle": "Data Engineer"})

        assert lookup_property(record, ("title", "Title", "JobTitle")) == "data engineer"

    def test_empty_values_skipped(self):
        assert lookup_property({"a": "", "b": None, "c": "Value"}, ("a", "b", "c")) == "value"

    def test_missing_returns_empty_string(self):
        record = JobRecord(source=JobSource.NAUKRI)

        assert lookup_property(record, ("industry", "Industry")) == ""


class TestNumericExtraction:
    """Numeric extraction as used by the filter engine."""

    def test_rupee_range(self):
        assert extract_numeric_value("₹12-15 LPA") == 1215.0

    def test_empty(self):
        assert extract_numeric_value("") == 0

    def test_plain_number(self):
        assert extract_numeric_value("15") == 15.0


class TestSplitDelimitedLine:
    """Tests for delimited line splitting."""

    def test_simple_line(self):
        assert split_delimited_line("a, b ,c") == ["a", "b", "c"]

    def test_quoted_delimiter(self):
        assert split_delimited_line('Dev,"Bangalore, India",Acme') == [
            "Dev",
            "Bangalore, India",
            "Acme",
        ]

    def test_doubled_quotes(self):
        assert split_delimited_line('"He said ""hi""",x') == ['He said "hi"', "x"]

    def test_empty_fields_kept(self):
        assert split_delimited_line("a,,c") == ["a", "", "c"]


# ============================================================================
# RecordNormalizer.normalize
# ============================================================================


class TestNormalizeDelimited:
    """Tests for delimited text normalization."""

    @pytest.mark.parametrize("payload", ["", None, "Job Title,Company", "Job Title,Company\n"])
    def test_fewer_than_two_lines_is_empty(self, normalizer, payload):
        assert normalizer.normalize(payload, JobSource.LINKEDIN) == []

    def test_two_column_payload(self, normalizer):
        records = normalizer.normalize("Job Title,Company\nDev,Acme", JobSource.LINKEDIN)

        assert len(records) == 1
        assert records[0].title == "Dev"
        assert records[0].company == "Acme"
        assert records[0].source == JobSource.LINKEDIN

    def test_headers_matched_case_insensitively(self, normalizer):
        records = normalizer.normalize("JOB TITLE,company name\nDev,Acme", JobSource.NAUKRI)

        assert records[0].title == "Dev"
        assert records[0].company == "Acme"

    def test_unknown_headers_kept_as_extra(self, normalizer):
        records = normalizer.normalize("Title,Hiring Manager\nDev,Priya", JobSource.NAUKRI)

        assert records[0].extra == {"Hiring Manager": "Priya"}
        assert records[0].get("Hiring Manager") == "Priya"

    def test_empty_value_leaves_attribute_unset(self, normalizer):
        records = normalizer.normalize("Title,Company,Location\nDev,,Pune", JobSource.NAUKRI)

        assert records[0].company is None
        assert records[0].location == "Pune"

    def test_quoted_field_with_delimiter(self, normalizer):
        payload = 'Title,Location,Company\nDev,"Bangalore, India",Acme'
        records = normalizer.normalize(payload, JobSource.LINKEDIN)

        assert records[0].location == "Bangalore, India"
        assert records[0].company == "Acme"

    def test_blank_lines_skipped(self, normalizer):
        payload = "Title,Company\n\nDev,Acme\n   \nQA,Globex\n"
        records = normalizer.normalize(payload, JobSource.LINKEDIN)

        assert [r.title for r in records] == ["Dev", "QA"]

    def test_crlf_line_breaks(self, normalizer):
        records = normalizer.normalize("Title,Company\r\nDev,Acme\r\n", JobSource.LINKEDIN)

        assert records[0].company == "Acme"

    def test_short_row_assigns_positionally(self, normalizer):
        payload = "Title,Company,Location\nDev,Acme\nQA,Globex,Delhi"
        records = normalizer.normalize(payload, JobSource.LINKEDIN)

        assert len(records) == 2
        assert records[0].title == "Dev"
        assert records[0].company == "Acme"
        assert records[0].location is None
        assert records[1].location == "Delhi"

    def test_long_row_drops_unmatched_values(self, normalizer):
        payload = "Title,Company\nDev,Acme,Surplus\nQA,Globex"
        records = normalizer.normalize(payload, JobSource.LINKEDIN)

        assert len(records) == 2
        assert records[0].extra == {}
        assert records[1].company == "Globex"

    def test_later_duplicate_header_wins(self, normalizer):
        records = normalizer.normalize("Title,Job Title\nFirst,Second", JobSource.LINKEDIN)

        assert records[0].title == "Second"

    def test_bytes_payload(self, normalizer):
        records = normalizer.normalize(b"Title,Company\nDev,Acme", JobSource.LINKEDIN)

        assert records[0].title == "Dev"

    def test_blank_header_row(self, normalizer):
        assert normalizer.normalize(" , \nDev,Acme", JobSource.LINKEDIN) == []

    def test_unreadable_row_skipped_others_kept(self, normalizer):
        """One row that cannot be tokenized does not discard the rest."""
        real_split = split_delimited_line

        def flaky_split(line, delimiter=",", quotechar='"'):
            if line.startswith("BAD"):
                raise csv.Error("unreadable")
            return real_split(line, delimiter, quotechar)

        with patch("job_dashboard.normalization.service.split_delimited_line", side_effect=flaky_split):
            records = normalizer.normalize("Title,Company\nDev,Acme\nBAD,row\nQA,Globex", JobSource.NAUKRI)

        assert [r.title for r in records] == ["Dev", "QA"]

    def test_unexpected_failure_returns_empty(self, normalizer, caplog):
        with patch(
            "job_dashboard.normalization.service.split_lines", side_effect=RuntimeError("boom")
        ):
            with caplog.at_level(logging.ERROR):
                records = normalizer.normalize("Title\nDev", JobSource.NAUKRI)

        assert records == []
        assert "Failed to parse payload" in caplog.text

    def test_max_records_truncates(self):
        normalizer = RecordNormalizer(max_records=2)
        payload = "Title\nA\nB\nC"

        records = normalizer.normalize(payload, JobSource.LINKEDIN)

        assert [r.title for r in records] == ["A", "B"]

    def test_sample_fixture(self, normalizer):
        text = (FIXTURES_DIR / "sample_jobs.csv").read_text(encoding="utf-8")
        records = normalizer.normalize(text, JobSource.NAUKRI)

        assert len(records) == 3
        first = records[0]
        assert first.title == "Senior Python Developer"
        assert first.location == "Bangalore, India"
        assert first.experience == "5 years"
        assert first.salary == "18 LPA"
        assert first.url == "https://jobs.example.com/1"
        assert first.posted_at == "2 days ago"
        assert first.extra == {"Hiring Manager": "Priya"}
        assert records[1].extra == {}
        assert records[2].experience is None


# ============================================================================
# RecordNormalizer JSON payloads
# ============================================================================


class TestNormalizeItems:
    """Tests for JSON posting normalization."""

    def test_careerjet_shape(self, normalizer):
        items = [
            {
                "Title": "Python Developer",
                "Company": "Acme",
                "Location": "Pune",
                "Description": "Build APIs",
                "JobLink": "https://careerjet.example/1",
                "TimePosted": "3 days ago",
            }
        ]

        records = normalizer.normalize_items(items, JobSource.CAREERJET)

        assert len(records) == 1
        record = records[0]
        assert record.title == "Python Developer"
        assert record.description == "Build APIs"
        assert record.url == "https://careerjet.example/1"
        assert record.posted_at == "3 days ago"
        assert record.source == JobSource.CAREERJET

    def test_non_mapping_items_skipped(self, normalizer):
        records = normalizer.normalize_items(["junk", {"title": "Dev"}, 42], JobSource.LINKEDIN)

        assert [r.title for r in records] == ["Dev"]

    def test_values_stringified(self, normalizer):
        records = normalizer.normalize_items(
            [{"title": "Dev", "experience": 3, "skills": ["Python", "SQL"], "company": None}],
            JobSource.LINKEDIN,
        )

        assert records[0].experience == "3"
        assert records[0].tech_stack == "Python|SQL"
        assert records[0].company is None

    def test_none_items(self, normalizer):
        assert normalizer.normalize_items(None, JobSource.LINKEDIN) == []


class TestNormalizePayload:
    """Tests for payload shape dispatch."""

    def test_text(self, normalizer):
        records = normalizer.normalize_payload("Title\nDev", JobSource.LINKEDIN)
        assert records[0].title == "Dev"

    def test_list(self, normalizer):
        records = normalizer.normalize_payload([{"title": "Dev"}], JobSource.NAUKRI)
        assert records[0].title == "Dev"

    def test_data_envelope(self, normalizer):
        records = normalizer.normalize_payload({"data": [{"title": "Dev"}]}, JobSource.NAUKRI)
        assert records[0].title == "Dev"

    @pytest.mark.parametrize("payload", [None, 42, {"error": "oops"}])
    def test_unsupported_is_empty(self, normalizer, payload):
        assert normalizer.normalize_payload(payload, JobSource.LINKEDIN) == []
