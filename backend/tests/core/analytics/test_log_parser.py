from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from core.analytics.log_parser import parse_log, parse_record, parse_timestamp
from core.domain.check_record import CheckOutcome
from core.exceptions.invalid_window_size_error import InvalidWindowSizeError
from core.exceptions.log_parse_error import LogParseError

UTC = timezone.utc


def test_parse_timestamp_reads_dashed_timestamp_as_utc() -> None:
    parsed = parse_timestamp("2024-01-01 10:00:00")

    assert parsed == datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value",
    [
        "2024/01/01 10:00:00",
        "2024.01.01 10:00:00",
        " 2024-01-01 10:00 ",
        "2024-01-01T10:00:00",
        "2024-1-1 10:00:00",
    ],
)
def test_parse_timestamp_accepts_separator_variants(value: str) -> None:
    assert parse_timestamp(value) == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["2024-01-01 10:00:00.500", "2024.01.01T10:00:00.5"])
def test_parse_timestamp_keeps_fractional_seconds(value: str) -> None:
    assert parse_timestamp(value) == datetime(2024, 1, 1, 10, 0, 0, 500_000, tzinfo=timezone.utc)


def test_parse_log_accepts_dotted_dates() -> None:
    parsed = parse_log("2024.01.01 10:00:00,success\n2024.01.01 10:00:30.250,failure", tz=UTC)

    assert parsed.by_day[date(2024, 1, 1)].results == [1, 0]
    assert parsed.up_time_percent == "50.00%"


def test_parse_timestamp_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="unrecognized timestamp"):
        parse_timestamp("yesterday at noon")


def test_parse_record_requires_exact_success_token() -> None:
    assert parse_record("2024-01-01 10:00:00, success ", 1).outcome is CheckOutcome.SUCCESS
    assert parse_record("2024-01-01 10:00:00,Success", 1).outcome is CheckOutcome.FAILURE
    assert parse_record("2024-01-01 10:00:00,", 1).outcome is CheckOutcome.FAILURE
    assert parse_record("2024-01-01 10:00:00,timeout", 1).outcome is CheckOutcome.FAILURE


def test_parse_record_ignores_fields_after_second_comma() -> None:
    record = parse_record("2024-01-01 10:00:00,success,200ms", 1)

    assert record.is_success is True


def test_parse_log_without_failures_reports_full_uptime() -> None:
    raw = "\n".join(f"2024-01-0{day} 1{hour}:00:00,success" for day in (3, 2, 1) for hour in range(3))

    parsed = parse_log(raw, tz=UTC)

    assert parsed.up_time_percent == "100.00%"
    assert parsed.incident_count == 0
    assert parsed.total_downtime_minutes == 0
    assert parsed.record_count == 9
    assert list(parsed.by_day) == [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)]


@pytest.mark.parametrize("raw", ["", "\n\n", None])
def test_parse_log_without_records_is_not_an_error(raw) -> None:
    parsed = parse_log(raw, tz=UTC)

    assert parsed.up_time_percent == "--%"
    assert parsed.incident_count == 0
    assert parsed.record_count == 0
    assert parsed.by_day == {}


def test_parse_log_skips_blank_lines_without_counting_them() -> None:
    raw = "\n2024-01-01 10:00:00,success\n   \r\n2024-01-01 11:00:00,failure\n"

    parsed = parse_log(raw, tz=UTC)

    assert parsed.record_count == 2
    assert parsed.up_time_percent == "50.00%"


def test_parse_log_tracks_first_and_last_failure_times() -> None:
    raw = "\n".join(
        [
            "2024-01-01 08:15:00,success",
            "2024-01-01 09:30:00,failure",
            "2024-01-01 10:00:00,success",
            "2024-01-01 13:45:00,error",
            "2024-01-01 17:05:00,failure",
        ]
    )

    bucket = parse_log(raw, tz=UTC).by_day[date(2024, 1, 1)]

    assert bucket.results == [1, 0, 1, 0, 0]
    assert bucket.first_failure_time == "09:30"
    assert bucket.last_failure_time == "17:05"


def test_parse_log_counts_incidents_and_downtime_per_day() -> None:
    raw = "\n".join(
        [
            "2024-01-03 10:00:00,success",
            "2024-01-03 11:00:00,failure",
            "2024-01-02 10:00:00,success",
            "2024-01-01 10:00:00,failure",
            "2024-01-01 11:00:00,success",
            "2024-01-01 12:00:00,success",
            "2024-01-01 13:00:00,success",
        ]
    )

    parsed = parse_log(raw, tz=UTC)

    assert parsed.incident_count == 2
    assert parsed.total_downtime_minutes == 720 + 360
    assert parsed.up_time_percent == "71.43%"


def test_parse_log_stops_once_window_is_full() -> None:
    raw = "\n".join(
        [
            "2024-01-03 10:00:00,success",
            "2024-01-03 11:00:00,failure",
            "2024-01-02 10:00:00,success",
            "2024-01-01 10:00:00,failure",
            "2024-01-02 23:00:00,failure",
            "not a record at all",
        ]
    )

    parsed = parse_log(raw, max_days=2, tz=UTC)

    assert list(parsed.by_day) == [date(2024, 1, 3), date(2024, 1, 2)]
    assert parsed.record_count == 3
    assert parsed.up_time_percent == "66.67%"
    assert parsed.incident_count == 1
    assert parsed.by_day[date(2024, 1, 2)].results == [1]


def test_parse_log_never_keeps_more_days_than_the_window() -> None:
    raw = "\n".join(f"2024-02-{day:02d} 12:00:00,failure" for day in range(28, 0, -1))

    parsed = parse_log(raw, max_days=7, tz=UTC)

    assert len(parsed) == 7
    assert parsed.incident_count == 7


def test_parse_log_keys_days_in_rendering_zone() -> None:
    new_york = ZoneInfo("America/New_York")

    parsed = parse_log("2024-01-02 03:00:00,failure", tz=new_york)

    bucket = parsed.by_day[date(2024, 1, 1)]
    assert bucket.first_failure_time == "22:00"


def test_parse_log_reports_line_without_comma() -> None:
    raw = "2024-01-01 10:00:00,success\n\n2024-01-01 11:00:00 success"

    with pytest.raises(LogParseError) as exc_info:
        parse_log(raw, tz=UTC)

    assert exc_info.value.line_number == 3
    assert exc_info.value.raw_line == "2024-01-01 11:00:00 success"
    assert "missing ','" in exc_info.value.reason


def test_parse_log_reports_unparseable_timestamp() -> None:
    with pytest.raises(LogParseError, match="line 1: unrecognized timestamp"):
        parse_log("13/45/2024 99:00,success", tz=UTC)


@pytest.mark.parametrize("max_days", [0, -3])
def test_parse_log_rejects_non_positive_window(max_days: int) -> None:
    with pytest.raises(InvalidWindowSizeError, match="positive number of days"):
        parse_log("2024-01-01 10:00:00,success", max_days=max_days)
