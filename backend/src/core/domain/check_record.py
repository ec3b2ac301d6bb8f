from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class CheckOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def result(self) -> int:
        return 1 if self is CheckOutcome.SUCCESS else 0

    @classmethod
    def from_field(cls, value: str) -> "CheckOutcome":
        if value.strip() == cls.SUCCESS.value:
            return cls.SUCCESS

        return cls.FAILURE


@dataclass(frozen=True)
class CheckRecord:
    timestamp: datetime
    outcome: CheckOutcome

    @property
    def is_success(self) -> bool:
        return self.outcome is CheckOutcome.SUCCESS
