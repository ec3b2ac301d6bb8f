from enum import Enum
from typing import Optional

MAJOR_OUTAGE_THRESHOLD = 0.3


class StatusColor(str, Enum):
    NODATA = "nodata"
    SUCCESS = "success"
    FAILURE = "failure"
    PARTIAL = "partial"

    @property
    def status_text(self) -> str:
        mapping = {
            StatusColor.NODATA: "No Data Available",
            StatusColor.SUCCESS: "Fully Operational",
            StatusColor.FAILURE: "Major Outage",
            StatusColor.PARTIAL: "Partial Outage",
        }

        return mapping[self]

    @classmethod
    def from_average(cls, average: Optional[float]) -> "StatusColor":
        if average is None:
            return cls.NODATA

        if average == 1:
            return cls.SUCCESS

        if average < MAJOR_OUTAGE_THRESHOLD:
            return cls.FAILURE

        return cls.PARTIAL
