"""Tests for upstream timestamp decoding."""

from datetime import datetime, timedelta, timezone

import pytest

from levelup.core.dates import (
    TIMESTAMP_PARSERS,
    InvalidTimestampError,
    parse_iso_with_offset,
    parse_iso_with_offset_fractional,
    parse_no_timezone,
    parse_no_timezone_fractional,
    parse_optional_timestamp,
    parse_timestamp,
)


class TestParseTimestamp:
    def test_offset_without_fraction(self):
        parsed = parse_timestamp("2025-12-13T18:29:21Z")
        assert parsed == datetime(2025, 12, 13, 18, 29, 21, tzinfo=timezone.utc)

    def test_non_utc_offset(self):
        parsed = parse_timestamp("2025-12-13T20:29:21+02:00")
        assert parsed == datetime(2025, 12, 13, 18, 29, 21, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_offset_with_fraction(self):
        parsed = parse_timestamp("2025-12-13T18:29:21.349Z")
        assert parsed == datetime(2025, 12, 13, 18, 29, 21, 349000, tzinfo=timezone.utc)

    def test_no_timezone_with_fraction_is_utc(self):
        parsed = parse_timestamp("2025-12-13T18:29:21.349613")
        assert parsed == datetime(2025, 12, 13, 18, 29, 21, 349613, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_no_timezone_without_fraction_is_utc(self):
        parsed = parse_timestamp("2026-01-12T18:27:02")
        assert parsed == datetime(2026, 1, 12, 18, 27, 2, tzinfo=timezone.utc)

    def test_result_is_always_aware(self):
        for value in [
            "2025-12-13T18:29:21Z",
            "2025-12-13T18:29:21.5+00:00",
            "2025-12-13T18:29:21.349613",
            "2025-12-13T18:29:21",
        ]:
            assert parse_timestamp(value).tzinfo is not None

    def test_surrounding_whitespace_ignored(self):
        assert parse_timestamp(" 2026-01-12T18:27:02\n") == datetime(2026, 1, 12, 18, 27, 2, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["", "yesterday", "2025-12-13", "13/12/2025 18:29", "2025-13-40T00:00:00"])
    def test_garbage_raises(self, value):
        with pytest.raises(InvalidTimestampError) as exc_info:
            parse_timestamp(value)
        assert exc_info.value.value == value.strip()
        assert "Invalid date" in str(exc_info.value)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_timestamp("nope")


class TestParsers:
    def test_chain_order(self):
        assert TIMESTAMP_PARSERS == (
            parse_iso_with_offset,
            parse_iso_with_offset_fractional,
            parse_no_timezone_fractional,
            parse_no_timezone,
        )

    def test_each_parser_only_accepts_its_shape(self):
        samples = {
            parse_iso_with_offset: "2025-12-13T18:29:21Z",
            parse_iso_with_offset_fractional: "2025-12-13T18:29:21.349Z",
            parse_no_timezone_fractional: "2025-12-13T18:29:21.349613",
            parse_no_timezone: "2025-12-13T18:29:21",
        }
        for parser in TIMESTAMP_PARSERS:
            for other, sample in samples.items():
                result = parser(sample)
                if other is parser:
                    assert result is not None
                else:
                    assert result is None


class TestParseOptionalTimestamp:
    def test_none_passes_through(self):
        assert parse_optional_timestamp(None) is None

    def test_delegates(self):
        assert parse_optional_timestamp("2026-01-12T18:27:02") == datetime(2026, 1, 12, 18, 27, 2, tzinfo=timezone.utc)

    def test_invalid_still_raises(self):
        with pytest.raises(InvalidTimestampError):
            parse_optional_timestamp("not a date")


class TestStrictShape:
    @pytest.mark.parametrize(
        "value",
        ["2025-1-3T1:2:3", "2025-01-03T1:02:03Z", "2025-12-13T18:29:21.Z", "25-12-13T18:29:21", "2025-12-13T18:29:21 extra"],
    )
    def test_short_or_trailing_fields_rejected(self, value):
        with pytest.raises(InvalidTimestampError):
            parse_timestamp(value)

    def test_no_single_parser_accepts_short_fields(self):
        for parser in TIMESTAMP_PARSERS:
            assert parser("2025-1-3T1:2:3") is None

    def test_offset_without_colon_still_accepted(self):
        assert parse_timestamp("2025-12-13T20:29:21+0200") == datetime(2025, 12, 13, 18, 29, 21, tzinfo=timezone.utc)


class TestNonStringInput:
    @pytest.mark.parametrize("value", [1765645200, 1765645200.5, ["2025-12-13T18:29:21Z"], {"date": "x"}])
    def test_raises_invalid_timestamp(self, value):
        with pytest.raises(InvalidTimestampError) as exc_info:
            parse_timestamp(value)
        assert exc_info.value.value == value
        assert repr(value) in str(exc_info.value)

    def test_none_is_rejected_when_required(self):
        with pytest.raises(InvalidTimestampError) as exc_info:
            parse_timestamp(None)
        assert exc_info.value.value is None

    def test_optional_rejects_non_string(self):
        with pytest.raises(InvalidTimestampError):
            parse_optional_timestamp(1765645200)
