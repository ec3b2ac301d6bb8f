import math
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

MINUTES_PER_DAY = 1_440


def estimate_downtime_minutes(failed_checks: int, total_checks: int) -> int:
    if total_checks == 0:
        return 0

    # half-up, not banker's rounding
    return math.floor(failed_checks / total_checks * MINUTES_PER_DAY + 0.5)


@dataclass
class DayBucket:
    day: date
    results: list[int] = field(default_factory=list)
    first_failure_time: Optional[str] = None
    last_failure_time: Optional[str] = None

    @property
    def total_checks(self) -> int:
        return len(self.results)

    @property
    def failed_checks(self) -> int:
        return self.results.count(0)

    @property
    def has_failures(self) -> bool:
        return self.failed_checks > 0

    @property
    def estimated_downtime_minutes(self) -> int:
        return estimate_downtime_minutes(self.failed_checks, self.total_checks)

    def add_success(self) -> None:
        self.results.append(1)

    def add_failure(self, time_of_day: str) -> None:
        if self.first_failure_time is None:
            self.first_failure_time = time_of_day

        self.last_failure_time = time_of_day
        self.results.append(0)
