"""Tests for isodatetime module."""

from datetime import datetime, timedelta, timezone, UTC

from todovault.utils import isodatetime


class TestToTimestamp:
    """Tests for to_timestamp function."""

    def test_converts_naive_datetime_to_utc(self):
        """Naive datetime should be treated as UTC."""
        assert isodatetime.to_timestamp(datetime(2025, 12, 23, 10, 30, 0)) == "2025-12-23T10:30:00Z"

    def test_converts_aware_datetime_to_utc(self):
        dt = datetime(2025, 12, 23, 10, 30, 0, tzinfo=UTC)
        assert isodatetime.to_timestamp(dt) == "2025-12-23T10:30:00Z"

    def test_converts_other_offsets_to_utc(self):
        dt = datetime(2025, 12, 23, 18, 30, 0, tzinfo=timezone(timedelta(hours=8)))
        assert isodatetime.to_timestamp(dt) == "2025-12-23T10:30:00Z"

    def test_handles_microseconds(self):
        dt = datetime(2025, 12, 23, 10, 30, 0, 123456, tzinfo=UTC)
        assert isodatetime.to_timestamp(dt) == "2025-12-23T10:30:00.123456Z"


class TestUnix:
    """Tests for Unix timestamp helpers."""

    def test_to_unix_truncates_to_seconds(self):
        dt = datetime(1970, 1, 1, 0, 1, 0, 999999, tzinfo=UTC)
        assert isodatetime.to_unix(dt) == 60

    def test_naive_datetime_is_utc(self):
        assert isodatetime.to_unix(datetime(1970, 1, 1, 0, 0, 10)) == 10

    def test_from_unix_is_aware_utc(self):
        assert isodatetime.from_unix(60) == datetime(1970, 1, 1, 0, 1, 0, tzinfo=UTC)


class TestUtcnow:
    """Tests for utcnow."""

    def test_utcnow_is_aware(self):
        assert isodatetime.utcnow().tzinfo is not None
