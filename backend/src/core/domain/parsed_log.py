from dataclasses import dataclass, field
from datetime import date

from core.domain.day_bucket import DayBucket


@dataclass(frozen=True)
class ParsedLog:
    by_day: dict[date, DayBucket] = field(default_factory=dict)
    up_time_percent: str = "--%"
    incident_count: int = 0
    total_downtime_minutes: int = 0
    record_count: int = 0

    def __len__(self) -> int:
        return len(self.by_day)
