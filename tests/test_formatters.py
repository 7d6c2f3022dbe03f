"""test_formatters: 날짜/시간 헬퍼 단위 테스트."""

from datetime import datetime, timedelta, timezone

import pytest

from utils.formatters import (
    current_local_time,
    float_or_zero,
    string_to_time,
    string_with_tz_to_local_time,
    time_to_string,
    to_local_time,
)

JAKARTA = timezone(timedelta(hours=7))


class TestTimeToString:
    def test_formats_datetime(self):
        assert time_to_string(datetime(2023, 10, 1, 12, 34, 56)) == "2023-10-01 12:34:56"

    def test_round_trip(self):
        value = datetime(2024, 2, 29, 23, 59, 59)
        assert string_to_time(time_to_string(value)) == value


class TestStringToTime:
    def test_valid_string(self):
        assert string_to_time("2023-10-01 12:34:56") == datetime(2023, 10, 1, 12, 34, 56)

    @pytest.mark.parametrize(
        "value",
        ["2023/10/01 12:34:56", "", "2023-10-01", "2023-1-1 1:2:3", "2023-10-01 12:34:56 "],
    )
    def test_invalid_string_raises(self, value):
        with pytest.raises(ValueError):
            string_to_time(value)


class TestToLocalTime:
    def test_converts_utc_to_target_zone(self):
        utc = datetime(2023, 10, 1, 12, 0, 0, tzinfo=timezone.utc)

        converted = to_local_time(utc, JAKARTA)

        assert converted == utc
        assert converted.hour == 19
        assert converted.utcoffset() == timedelta(hours=7)

    def test_default_is_aware_local(self):
        converted = to_local_time(datetime(2023, 10, 1, 12, 0, 0, tzinfo=timezone.utc))
        assert converted.tzinfo is not None


class TestStringWithTzToLocalTime:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2023-10-01T12:34:56+07:00", datetime(2023, 10, 1, 12, 34, 56)),
            ("2023-10-01T05:34:56Z", datetime(2023, 10, 1, 12, 34, 56)),
            ("2023-10-01T05:34:56.250Z", datetime(2023, 10, 1, 12, 34, 56, 250000)),
            ("2023-10-01 20:34:56-07:00", datetime(2023, 10, 2, 10, 34, 56)),
        ],
    )
    def test_supported_layouts(self, value, expected):
        converted = string_with_tz_to_local_time(value, JAKARTA)

        assert converted.replace(tzinfo=None) == expected
        assert converted.utcoffset() == timedelta(hours=7)

    @pytest.mark.parametrize(
        "value",
        [
            "2023/10/01 12:34:56+07:00",
            "",
            "2023-10-01 12:34:56",
            "2023-10-01T12:34:56+0700",
            "2023-10-01 12:34:56+0700",
            "2023-1-1T1:2:3+07:00",
            "2023-10-01 12:34:56Z",
        ],
    )
    def test_invalid_or_missing_offset_raises(self, value):
        with pytest.raises(ValueError):
            string_with_tz_to_local_time(value, JAKARTA)


class TestCurrentLocalTime:
    def test_between_before_and_after(self):
        before = datetime.now(timezone.utc)
        now = current_local_time(JAKARTA)
        after = datetime.now(timezone.utc)

        assert before <= now <= after
        assert now.utcoffset() == timedelta(hours=7)


class TestFloatOrZero:
    def test_none_is_zero(self):
        assert float_or_zero(None) == 0.0

    def test_value_passthrough(self):
        assert float_or_zero(3.5) == 3.5
