"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from job_dashboard.domain.models import (
    FilterCriteria,
    JobRecord,
    JobSource,
    ResumeProfile,
    SearchParameters,
)


class TestJobSource:
    """Tests for JobSource."""

    def test_values_are_tab_labels(self):
        assert JobSource.LINKEDIN.value == "LinkedIn Jobs"
        assert JobSource.NAUKRI.value == "Naukri Jobs"
        assert JobSource.CAREERJET.value == "CareerJet Jobs"

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("linkedin", JobSource.LINKEDIN),
            ("NAUKRI", JobSource.NAUKRI),
            ("CareerJet Jobs", JobSource.CAREERJET),
            ("  naukri jobs ", JobSource.NAUKRI),
        ],
    )
    def test_from_label(self, label, expected):
        assert JobSource.from_label(label) is expected

    def test_from_label_unknown(self):
        with pytest.raises(ValueError, match="Unknown job source"):
            JobSource.from_label("indeed")


class TestJobRecord:
    """Tests for JobRecord model."""

    def test_minimal_record(self):
        record = JobRecord(source=JobSource.LINKEDIN)

        assert record.source == JobSource.LINKEDIN
        assert record.title is None
        assert record.extra == {}

    def test_source_is_required(self):
        with pytest.raises(ValidationError):
            JobRecord(title="Engineer")

    def test_record_is_immutable(self):
        record = JobRecord(title="Engineer", source=JobSource.NAUKRI)

        with pytest.raises(ValidationError):
            record.source = JobSource.LINKEDIN

    def test_get_reads_canonical_and_extra(self):
        record = JobRecord(
            title="Engineer",
            source=JobSource.NAUKRI,
            extra={"Hiring Manager": "Priya"},
        )

        assert record.get("title") == "Engineer"
        assert record.get("Hiring Manager") == "Priya"
        assert record.get("company") is None
        assert record.get("missing") is None

    def test_numeric_properties(self):
        record = JobRecord(experience="3-5 years", salary="12 LPA", source=JobSource.NAUKRI)

        assert record.experience_years == 35.0
        assert record.salary_value == 12.0

    def test_numeric_properties_default_to_zero(self):
        record = JobRecord(source=JobSource.LINKEDIN)

        assert record.experience_years == 0.0
        assert record.salary_value == 0.0


class TestFilterCriteria:
    """Tests for FilterCriteria model."""

    def test_defaults_are_inactive(self):
        criteria = FilterCriteria()

        assert criteria.keyword == ""
        assert criteria.experience_ceiling == 0
        assert criteria.is_active() is False

    def test_text_is_stripped(self):
        criteria = FilterCriteria(keyword="  python ", location=None)

        assert criteria.keyword == "python"
        assert criteria.location == ""

    def test_whitespace_only_is_inactive(self):
        assert FilterCriteria(keyword="   ").is_active() is False

    def test_numeric_strings_use_leading_number(self):
        criteria = FilterCriteria(experience_ceiling="5 years", minimum_salary="10 LPA")

        assert criteria.experience_ceiling == 5.0
        assert criteria.minimum_salary == 10.0
        assert criteria.is_active() is True

    def test_blank_numeric_is_unset(self):
        criteria = FilterCriteria(experience_ceiling="", minimum_salary=None)

        assert criteria.experience_ceiling == 0
        assert criteria.minimum_salary == 0

    def test_negative_numbers_rejected(self):
        with pytest.raises(ValidationError):
            FilterCriteria(experience_ceiling=-1)

        with pytest.raises(ValidationError):
            FilterCriteria(minimum_salary="-5")

    @pytest.mark.parametrize("field", ["experience_ceiling", "minimum_salary"])
    def test_non_numeric_text_rejected(self, field):
        with pytest.raises(ValidationError):
            FilterCriteria(**{field: "five"})

    @pytest.mark.parametrize("field", ["keyword", "location", "company", "job_type", "work_mode", "industry"])
    def test_any_text_field_activates(self, field):
        assert FilterCriteria(**{field: "x"}).is_active() is True


class TestResumeProfile:
    """Tests for ResumeProfile model."""

    def test_list_prefixes_removed(self):
        profile = ResumeProfile(keyword="4. Python", location="1. Bangalore", name=" Asha ")

        assert profile.keyword == "Python"
        assert profile.location == "Bangalore"
        assert profile.name == "Asha"

    def test_none_becomes_empty(self):
        profile = ResumeProfile(college=None, branch=None)

        assert profile.college == ""
        assert profile.branch == ""

    def test_experience_coerced(self):
        assert ResumeProfile(experience="3 years").experience == 3
        assert ResumeProfile(experience="").experience == 0
        assert ResumeProfile(experience=2.7).experience == 2

    def test_radius_number_becomes_text(self):
        assert ResumeProfile(radius=25).radius == "25"


class TestSearchParameters:
    """Tests for SearchParameters model."""

    def test_defaults(self):
        params = SearchParameters(keyword="python")

        assert params.location == "india"
        assert params.job_type == "fulltime"
        assert params.remote == "on-site"
        assert params.date_posted == "week"
        assert params.radius == "10"
        assert params.experience == 0

    def test_request_body_uses_service_keys(self):
        params = SearchParameters(name="Asha", college="IIT", branch="CSE", keyword="python")
        body = params.to_request_body()

        assert body["College"] == "IIT"
        assert body["Branch"] == "CSE"
        assert "college" not in body
        assert body["keyword"] == "python"
        assert set(body) == {
            "name",
            "College",
            "Branch",
            "keyword",
            "location",
            "experience",
            "job_type",
            "remote",
            "date_posted",
            "company",
            "industry",
            "ctc_filters",
            "radius",
        }

    def test_accepts_alias_keys(self):
        params = SearchParameters.model_validate({"College": "NIT", "Branch": "ECE"})

        assert params.college == "NIT"
        assert params.branch == "ECE"

    def test_negative_experience_rejected(self):
        with pytest.raises(ValidationError):
            SearchParameters(experience=-1)
