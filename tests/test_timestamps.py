"""Unit tests for timestamp utilities."""

from datetime import datetime, timezone

from job_dashboard.utils.timestamps import utc_now


class TestUtcNow:
    """Tests for utc_now function."""

    def test_utc_now_returns_utc_datetime(self):
        """Test that utc_now returns a timezone-aware datetime in UTC."""
        now = utc_now()

        assert now.tzinfo == timezone.utc
        assert isinstance(now, datetime)

    def test_utc_now_is_recent(self):
        """Test that utc_now returns a recent timestamp."""
        before = datetime.now(timezone.utc)
        now = utc_now()
        after = datetime.now(timezone.utc)

        assert before <= now <= after
