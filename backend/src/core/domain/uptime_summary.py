from dataclasses import dataclass, field
from typing import Iterator, Optional

from core.domain.daily_stat import DailyStat


@dataclass(frozen=True)
class SummaryDay:
    offset: int
    average: Optional[float]
    stat: Optional[DailyStat]


@dataclass(frozen=True)
class UptimeSummary:
    daily_averages: dict[int, Optional[float]] = field(default_factory=dict)
    daily_stats: dict[int, DailyStat] = field(default_factory=dict)
    up_time: str = "--%"
    incident_count: int = 0
    total_estimated_downtime: str = "0m"
    window_days: int = 30

    @property
    def latest_average(self) -> Optional[float]:
        return self.daily_averages.get(0)

    def days(self) -> Iterator[SummaryDay]:
        """Yield every offset of the window, oldest first.

        Offsets without observations come back with ``average`` and ``stat``
        set to ``None``.
        """
        for offset in range(self.window_days - 1, -1, -1):
            yield SummaryDay(
                offset=offset,
                average=self.daily_averages.get(offset),
                stat=self.daily_stats.get(offset),
            )
