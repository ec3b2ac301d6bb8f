import math
from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional, Sequence

from core.analytics.formatters import format_minutes
from core.analytics.log_parser import DEFAULT_MAX_DAYS, parse_log
from core.domain.daily_stat import DailyStat
from core.domain.day_bucket import DayBucket
from core.domain.parsed_log import ParsedLog
from core.domain.uptime_summary import UptimeSummary
from core.exceptions.invalid_window_size_error import InvalidWindowSizeError

SECONDS_PER_DAY = 86_400


def relative_days(now: datetime, day: date, tz: Optional[tzinfo] = None) -> int:
    if tz is None:
        day_start = datetime.combine(day, time.min).astimezone()
    else:
        day_start = datetime.combine(day, time.min, tzinfo=tz)

    elapsed_seconds = abs((now.astimezone(tz) - day_start).total_seconds())

    return math.floor(elapsed_seconds / SECONDS_PER_DAY)


def day_average(results: Sequence[int]) -> Optional[float]:
    if not results:
        return None

    return sum(results) / len(results)


def summarize_day(bucket: DayBucket) -> DailyStat:
    return DailyStat(
        total_checks=bucket.total_checks,
        failed_checks=bucket.failed_checks,
        estimated_downtime=format_minutes(bucket.estimated_downtime_minutes),
        first_failure_time=bucket.first_failure_time,
        last_failure_time=bucket.last_failure_time,
    )


def summarize(
    parsed: ParsedLog,
    now: datetime,
    max_days: int = DEFAULT_MAX_DAYS,
    tz: Optional[tzinfo] = None,
) -> UptimeSummary:
    if max_days <= 0:
        raise InvalidWindowSizeError(max_days)

    daily_averages: dict[int, Optional[float]] = {}
    daily_stats: dict[int, DailyStat] = {}

    for day, bucket in parsed.by_day.items():
        offset = relative_days(now, day, tz)

        daily_averages[offset] = day_average(bucket.results)
        daily_stats[offset] = summarize_day(bucket)

    return UptimeSummary(
        daily_averages=daily_averages,
        daily_stats=daily_stats,
        up_time=parsed.up_time_percent,
        incident_count=parsed.incident_count,
        total_estimated_downtime=format_minutes(parsed.total_downtime_minutes),
        window_days=max_days,
    )


def build_summary(
    raw_text: Optional[str],
    now: Optional[datetime] = None,
    max_days: int = DEFAULT_MAX_DAYS,
    tz: Optional[tzinfo] = None,
) -> UptimeSummary:
    parsed = parse_log(raw_text, max_days=max_days, tz=tz)

    return summarize(parsed, now or datetime.now(timezone.utc), max_days=max_days, tz=tz)
