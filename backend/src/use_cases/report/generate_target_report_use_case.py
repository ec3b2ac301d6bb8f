from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional

import structlog

from core.analytics.summary_builder import build_summary
from core.domain.monitored_target import MonitoredTarget
from core.domain.target_report import TargetReport
from core.exceptions.invalid_window_size_error import InvalidWindowSizeError
from core.exceptions.log_parse_error import LogParseError
from core.port.log_source import LogSource

logger = structlog.stdlib.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenerateTargetReportUseCase:
    def __init__(
        self,
        log_source: LogSource,
        max_days: int,
        clock: Callable[[], datetime] = utc_now,
        tz: Optional[tzinfo] = None,
    ):
        if max_days <= 0:
            raise InvalidWindowSizeError(max_days)

        self.log_source = log_source
        self.max_days = max_days
        self.clock = clock
        self.tz = tz

    async def execute(self, target: MonitoredTarget) -> TargetReport:
        raw_text = await self.log_source.fetch(target)
        now = self.clock()

        try:
            summary = build_summary(raw_text, now=now, max_days=self.max_days, tz=self.tz)
        except LogParseError as e:
            logger.error(f"Report log for '{target.key}' is malformed at line {e.line_number}: {e.reason}")
            raise

        report = TargetReport(target=target, summary=summary, generated_at=now)

        logger.debug(
            f"Report for '{target.key}': up_time={summary.up_time}, "
            f"incidents={summary.incident_count}, downtime={summary.total_estimated_downtime}"
        )

        return report
