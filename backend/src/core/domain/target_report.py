from dataclasses import dataclass
from datetime import datetime

from core.domain.monitored_target import MonitoredTarget
from core.domain.status_color import StatusColor
from core.domain.uptime_summary import UptimeSummary


@dataclass(frozen=True)
class TargetReport:
    target: MonitoredTarget
    summary: UptimeSummary
    generated_at: datetime

    @property
    def color(self) -> StatusColor:
        return StatusColor.from_average(self.summary.latest_average)

    @property
    def status_text(self) -> str:
        return self.color.status_text
