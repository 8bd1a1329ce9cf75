"""Shared pytest fixtures."""

import pytest

from job_dashboard.logging.context import clear_log_context

SERVICE_ENV_VARS = (
    "RESUME_EXTRACTOR_URL",
    "JOB_SEARCH_URL",
    "CAREERJET_PROXY_URL",
    "LOG_LEVEL",
    "ENVIRONMENT",
)


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Start every config test from an environment without overrides."""
    for name in SERVICE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_log_context():
    """Keep log context from leaking between tests."""
    clear_log_context()
    yield
    clear_log_context()
