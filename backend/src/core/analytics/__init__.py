from core.analytics.formatters import format_minutes
from core.analytics.log_parser import DEFAULT_MAX_DAYS, parse_log, parse_record, parse_timestamp
from core.analytics.summary_builder import build_summary, day_average, relative_days, summarize, summarize_day

__all__ = [
    "DEFAULT_MAX_DAYS",
    "build_summary",
    "day_average",
    "format_minutes",
    "parse_log",
    "parse_record",
    "parse_timestamp",
    "relative_days",
    "summarize",
    "summarize_day",
]
