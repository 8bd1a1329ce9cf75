"""Tests for results rendering."""

import json

import pytest

from job_dashboard.domain.models import FilterCriteria, JobRecord, JobSource
from job_dashboard.rendering import ResultsRenderer
from job_dashboard.session import DisplayState, empty_results


@pytest.fixture
def renderer():
    """Create a ResultsRenderer with packaged templates."""
    return ResultsRenderer()


@pytest.fixture
def results():
    """Results with records for LinkedIn only."""
    data = empty_results()
    data[JobSource.LINKEDIN] = [
        JobRecord(
            title="Python Developer",
            company="Acme",
            location="Bangalore, India",
            salary="18 LPA",
            url="https://jobs.example.com/1",
            source=JobSource.LINKEDIN,
        ),
        JobRecord(source=JobSource.LINKEDIN),
    ]
    return data


def test_context_has_section_per_source(renderer, results):
    context = renderer.build_context(results)

    assert [s["label"] for s in context["sections"]] == [
        "LinkedIn Jobs",
        "Naukri Jobs",
        "CareerJet Jobs",
    ]
    assert context["sections"][0]["count"] == 2
    assert context["sections"][0]["jobs"][1]["title"] == ""


def test_context_limited_to_given_sources(renderer, results):
    context = renderer.build_context(results, sources=[JobSource.NAUKRI])

    assert [s["label"] for s in context["sections"]] == ["Naukri Jobs"]


def test_render_text_lists_jobs(renderer, results):
    text = renderer.render_text(renderer.build_context(results))

    assert "=== LinkedIn Jobs (2) ===" in text
    assert "1. Python Developer - Acme" in text
    assert "   Location: Bangalore, India" in text
    assert "   Salary: 18 LPA" in text
    assert "   Apply: https://jobs.example.com/1" in text
    assert "2. Untitled position" in text
    assert "Experience:" not in text


def test_empty_source_says_no_jobs(renderer, results):
    text = renderer.render_text(renderer.build_context(results))

    assert "=== Naukri Jobs (0) ===\nNo jobs found" in text
    assert "No matching jobs found" not in text


def test_filtered_empty_source_message(renderer, results):
    filtered = empty_results()
    context = renderer.build_context(filtered, is_filtered=True, unfiltered_results=results)

    text = renderer.render_text(context)

    assert "=== LinkedIn Jobs (0 of 2) ===" in text
    assert "No matching jobs found for your filters" in text
    assert "No jobs found" not in text


def test_errors_listed_first(renderer, results):
    context = renderer.build_context(results, errors=["CareerJet search failed: timeout"])

    text = renderer.render_text(context)

    assert text.startswith("! CareerJet search failed: timeout")


def test_render_json(renderer, results):
    output = renderer.render_json(renderer.build_context(results, errors=["oops"]))

    data = json.loads(output)
    assert data["errors"] == ["oops"]
    assert data["sections"][0]["jobs"][0]["company"] == "Acme"
    assert data["is_filtered"] is False


def test_render_state(renderer, results):
    state = DisplayState(
        results={JobSource.LINKEDIN: results[JobSource.LINKEDIN][:1]},
        unfiltered_results=results,
        is_filtered=True,
        criteria=FilterCriteria(keyword="python"),
        request_token=4,
    )

    text = renderer.render_state(state)
    data = json.loads(renderer.render_state(state, format_type="json"))

    assert "=== LinkedIn Jobs (1 of 2) ===" in text
    assert data["sections"][0]["total"] == 2
    assert data["sections"][1]["count"] == 0
