"""Tests for hrmodule.dates — date-only <-> timestamp convention."""

from hrmodule.dates import from_timestamp, to_timestamp


class TestToTimestamp:
    def test_date_only_gets_midnight_utc(self) -> None:
        assert to_timestamp("2025-03-01") == "2025-03-01T00:00:00Z"

    def test_timestamp_passes_through(self) -> None:
        assert to_timestamp("2025-03-01T08:30:00+02:00") == "2025-03-01T08:30:00+02:00"

    def test_empty(self) -> None:
        assert to_timestamp("") is None
        assert to_timestamp(None) is None


class TestFromTimestamp:
    def test_takes_date_portion(self) -> None:
        assert from_timestamp("2025-03-01T08:30:00Z") == "2025-03-01"

    def test_date_only_unchanged(self) -> None:
        assert from_timestamp("2025-03-01") == "2025-03-01"

    def test_empty(self) -> None:
        assert from_timestamp(None) == ""
        assert from_timestamp("") == ""
