"""Tests for logging context propagation."""

from job_dashboard.logging.context import (
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


def test_empty_context():
    """Test that context starts empty."""
    assert get_log_context() == {}


def test_push_and_pop():
    """Test pushing fields and restoring the previous context."""
    token = push_log_context(request_token=1, action="resume_search")
    assert get_log_context() == {"request_token": 1, "action": "resume_search"}
    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_context():
    """Inner scopes layer over outer scopes and restore them on exit."""
    with log_context(request_token=3, action="resume_search"):
        with log_context(source="Naukri Jobs"):
            assert get_log_context() == {
                "request_token": 3,
                "action": "resume_search",
                "source": "Naukri Jobs",
            }
        assert get_log_context() == {"request_token": 3, "action": "resume_search"}
    assert get_log_context() == {}


def test_inner_scope_overrides_field():
    with log_context(source="LinkedIn Jobs"):
        with log_context(source="CareerJet Jobs"):
            assert get_log_context()["source"] == "CareerJet Jobs"
        assert get_log_context()["source"] == "LinkedIn Jobs"


def test_context_restored_after_exception():
    try:
        with log_context(request_token=9):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert get_log_context() == {}


def test_get_returns_copy():
    with log_context(request_token=1):
        snapshot = get_log_context()
        snapshot["request_token"] = 99
        assert get_log_context()["request_token"] == 1

