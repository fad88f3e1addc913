"""
Tests for Timestamp Normalization

Covers the three stored encodings, the epoch sentinel and naive-datetime
handling.
"""
import pytest
from datetime import date, datetime, timedelta, timezone


class BoxedTimestamp:
    """Stand-in for a document-store Timestamp object"""

    def __init__(self, value: datetime):
        self._value = value

    def to_datetime(self) -> datetime:
        return self._value


class BrokenBoxedTimestamp:
    """Boxed value whose accessor fails"""

    def to_datetime(self):
        raise ValueError("bad box")


class TestNormalizeTimestamp:
    """Tests for normalize_timestamp dispatch"""

    def test_none_is_epoch(self):
        from hostdash.api.core.temporal import EPOCH, normalize_timestamp

        assert normalize_timestamp(None) == EPOCH

    def test_aware_datetime_unchanged(self):
        from hostdash.api.core.temporal import normalize_timestamp

        value = datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)
        assert normalize_timestamp(value) == value

    def test_naive_datetime_treated_as_utc(self):
        from hostdash.api.core.temporal import normalize_timestamp

        result = normalize_timestamp(datetime(2024, 3, 1, 8, 30))
        assert result.tzinfo is not None
        assert result == datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)

    def test_non_utc_offset_preserved_as_instant(self):
        from hostdash.api.core.temporal import normalize_timestamp

        plus_two = timezone(timedelta(hours=2))
        value = datetime(2024, 3, 1, 10, 0, tzinfo=plus_two)
        assert normalize_timestamp(value) == datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)

    def test_iso_string_with_z_suffix(self):
        from hostdash.api.core.temporal import normalize_timestamp

        result = normalize_timestamp("2024-03-01T08:30:00Z")
        assert result == datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)

    def test_iso_string_with_offset(self):
        from hostdash.api.core.temporal import normalize_timestamp

        result = normalize_timestamp("2024-03-01T10:30:00+02:00")
        assert result == datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)

    def test_date_only_string(self):
        from hostdash.api.core.temporal import normalize_timestamp

        assert normalize_timestamp("2024-03-01") == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_boxed_timestamp_uses_accessor(self):
        from hostdash.api.core.temporal import normalize_timestamp

        value = datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)
        assert normalize_timestamp(BoxedTimestamp(value)) == value

    def test_boxed_naive_timestamp_treated_as_utc(self):
        from hostdash.api.core.temporal import normalize_timestamp

        result = normalize_timestamp(BoxedTimestamp(datetime(2024, 3, 1)))
        assert result == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_boxed_accessor_raising_is_epoch(self):
        from hostdash.api.core.temporal import EPOCH, normalize_timestamp

        assert normalize_timestamp(BrokenBoxedTimestamp()) == EPOCH

    @pytest.mark.parametrize("value", [date(2024, 3, 1), "2024-03-01", None, 1709280000])
    def test_boxed_accessor_non_datetime_is_epoch(self, value):
        from hostdash.api.core.temporal import EPOCH, normalize_timestamp

        assert normalize_timestamp(BoxedTimestamp(value)) == EPOCH

    @pytest.mark.parametrize("raw", ["garbage", "", "   ", "2024-13-45", "yesterday"])
    def test_unparsable_string_matches_missing(self, raw):
        """Unparsable strings and missing values share the sentinel"""
        from hostdash.api.core.temporal import normalize_timestamp

        assert normalize_timestamp(raw) == normalize_timestamp(None)

    @pytest.mark.parametrize("raw", [12345, 3.5, object(), ["2024-01-01"]])
    def test_unsupported_types_map_to_epoch(self, raw):
        from hostdash.api.core.temporal import EPOCH, normalize_timestamp

        assert normalize_timestamp(raw) == EPOCH

    def test_boxed_timestamp_satisfies_protocol(self):
        from hostdash.api.core.temporal import SupportsToDatetime

        assert isinstance(BoxedTimestamp(datetime.now()), SupportsToDatetime)


class TestParseIso8601:
    """Tests for the ISO-8601 helper"""

    def test_returns_none_for_garbage(self):
        from hostdash.api.core.temporal import parse_iso8601

        assert parse_iso8601("not a date") is None

    def test_lowercase_z(self):
        from hostdash.api.core.temporal import parse_iso8601

        assert parse_iso8601("2024-03-01T00:00:00z") == datetime(2024, 3, 1, tzinfo=timezone.utc)
