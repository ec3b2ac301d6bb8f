from typing import Optional

from core.domain.daily_stat import DailyStat
from core.domain.status_color import StatusColor


def describe_day(color: StatusColor, stat: Optional[DailyStat]) -> str:
    if color is StatusColor.NODATA:
        return "No Data Available: Health check was not performed."

    failed_checks = stat.failed_checks if stat else 0
    total_checks = stat.total_checks if stat else 0
    downtime = stat.estimated_downtime if stat else "0m"

    if color is StatusColor.SUCCESS:
        return f"No downtime recorded on this day. {total_checks} checks ran."

    if stat and stat.first_failure_time:
        outage_window = f"Outage window: {stat.first_failure_time} - {stat.last_failure_time}."
    else:
        outage_window = "No failed checks in this period."

    return f"{failed_checks} failed checks out of {total_checks}. Estimated downtime: {downtime}. {outage_window}"
