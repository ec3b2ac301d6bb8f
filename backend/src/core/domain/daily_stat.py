from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DailyStat:
    total_checks: int
    failed_checks: int
    estimated_downtime: str
    first_failure_time: Optional[str] = None
    last_failure_time: Optional[str] = None
