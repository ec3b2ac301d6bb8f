"""Parse a health-check report log into calendar-day buckets.

Each line of a report log looks like ``2024-01-01 10:00:00,success``. The
timestamp carries no zone information and is always read as UTC, while the
day a record belongs to is decided in the local rendering zone. Both rules
are kept for compatibility with existing report logs and consumers.

The log is expected to list its most recent days first: parsing stops as soon
as a record would open day number ``max_days + 1``.
"""

import re
from datetime import date, datetime, timezone, tzinfo
from typing import Optional

import structlog

from core.analytics.formatters import format_percent
from core.domain.check_record import CheckOutcome, CheckRecord
from core.domain.day_bucket import DayBucket
from core.domain.parsed_log import ParsedLog
from core.exceptions.invalid_window_size_error import InvalidWindowSizeError
from core.exceptions.log_parse_error import LogParseError

logger = structlog.stdlib.get_logger(__name__)

DEFAULT_MAX_DAYS = 30

DATE_SEPARATORS = re.compile(r"^(\d{4})[-./](\d{1,2})[-./](\d{1,2})")

TIMESTAMP_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S.%f",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%dT%H:%M:%S",
    "%Y/%m/%dT%H:%M:%S.%f",
)


def parse_timestamp(value: str) -> datetime:
    # only the date part is rewritten, fractional seconds keep their dot
    normalized = DATE_SEPARATORS.sub(r"\1/\2/\3", value.strip())

    for timestamp_format in TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(normalized, timestamp_format)
        except ValueError:
            continue

        return parsed.replace(tzinfo=timezone.utc)

    raise ValueError(f"unrecognized timestamp '{value.strip()}'")


def parse_record(line: str, line_number: int) -> CheckRecord:
    date_time_field, separator, remainder = line.partition(",")

    if not separator:
        raise LogParseError(line_number, line, "missing ',' between timestamp and outcome")

    try:
        timestamp = parse_timestamp(date_time_field)
    except ValueError as e:
        raise LogParseError(line_number, line, str(e)) from e

    # anything after a second comma is not part of the outcome
    outcome_field = remainder.split(",", 1)[0]

    return CheckRecord(timestamp=timestamp, outcome=CheckOutcome.from_field(outcome_field))


def parse_log(raw_text: Optional[str], max_days: int = DEFAULT_MAX_DAYS, tz: Optional[tzinfo] = None) -> ParsedLog:
    """Bucket the records of ``raw_text`` by local calendar day.

    ``tz`` is the rendering zone used for day keys and failure times; ``None``
    means the host's local zone.

    Raises:
        InvalidWindowSizeError: ``max_days`` is not positive.
        LogParseError: a non-blank line has no comma or an unreadable timestamp.
    """
    if max_days <= 0:
        raise InvalidWindowSizeError(max_days)

    by_day: dict[date, DayBucket] = {}
    successes = 0
    record_count = 0

    for line_number, line in enumerate((raw_text or "").splitlines(), start=1):
        if not line.strip():
            continue

        record = parse_record(line, line_number)
        local_time = record.timestamp.astimezone(tz)
        day = local_time.date()

        bucket = by_day.get(day)
        if bucket is None:
            if len(by_day) >= max_days:
                logger.debug(f"Window of {max_days} days reached at line {line_number}, ignoring the rest of the log")
                break

            bucket = DayBucket(day=day)
            by_day[day] = bucket

        if record.is_success:
            bucket.add_success()
        else:
            bucket.add_failure(local_time.strftime("%H:%M"))

        successes += record.outcome.result
        record_count += 1

    return ParsedLog(
        by_day=by_day,
        up_time_percent=format_percent(successes, record_count),
        incident_count=sum(1 for bucket in by_day.values() if bucket.has_failures),
        total_downtime_minutes=sum(bucket.estimated_downtime_minutes for bucket in by_day.values()),
        record_count=record_count,
    )
