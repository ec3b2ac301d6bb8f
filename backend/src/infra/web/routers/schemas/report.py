from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from pydantic import Field

from core.analytics.descriptions import describe_day
from core.domain.status_color import StatusColor
from core.domain.target_report import TargetReport
from infra.web.routers.schemas import CamelModel


class DailyStatResponseDTO(CamelModel):
    total_checks: int
    failed_checks: int
    estimated_downtime: str
    first_failure_time: Optional[str] = None
    last_failure_time: Optional[str] = None


class ReportDayResponseDTO(CamelModel):
    offset: int
    day: date
    average: Optional[float] = None
    color: StatusColor
    status_text: str
    description: str


class TargetReportResponseDTO(CamelModel):
    key: str
    url: str
    color: StatusColor
    status: str
    up_time: str
    incident_count: int
    total_estimated_downtime: str
    generated_at: datetime
    daily_averages: dict[int, Optional[float]] = Field(default_factory=dict)
    daily_stats: dict[int, DailyStatResponseDTO] = Field(default_factory=dict)
    days: list[ReportDayResponseDTO] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: TargetReport, tz: Optional[tzinfo] = None) -> "TargetReportResponseDTO":
        summary = report.summary
        today = report.generated_at.astimezone(tz).date()

        days = []
        for day in summary.days():
            color = StatusColor.from_average(day.average)
            days.append(
                ReportDayResponseDTO(
                    offset=day.offset,
                    day=today - timedelta(days=day.offset),
                    average=day.average,
                    color=color,
                    status_text=color.status_text,
                    description=describe_day(color, day.stat),
                )
            )

        return cls(
            key=report.target.key,
            url=report.target.url,
            color=report.color,
            status=report.status_text,
            up_time=summary.up_time,
            incident_count=summary.incident_count,
            total_estimated_downtime=summary.total_estimated_downtime,
            generated_at=report.generated_at,
            daily_averages=summary.daily_averages,
            daily_stats={
                offset: DailyStatResponseDTO(
                    total_checks=stat.total_checks,
                    failed_checks=stat.failed_checks,
                    estimated_downtime=stat.estimated_downtime,
                    first_failure_time=stat.first_failure_time,
                    last_failure_time=stat.last_failure_time,
                )
                for offset, stat in summary.daily_stats.items()
            },
            days=days,
        )
