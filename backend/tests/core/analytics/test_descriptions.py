from core.analytics.descriptions import describe_day
from core.domain.daily_stat import DailyStat
from core.domain.status_color import StatusColor


def test_describe_day_without_data() -> None:
    assert describe_day(StatusColor.NODATA, None) == "No Data Available: Health check was not performed."


def test_describe_day_fully_operational() -> None:
    stat = DailyStat(total_checks=48, failed_checks=0, estimated_downtime="0m")

    assert describe_day(StatusColor.SUCCESS, stat) == "No downtime recorded on this day. 48 checks ran."


def test_describe_day_with_outage_window() -> None:
    stat = DailyStat(
        total_checks=4,
        failed_checks=1,
        estimated_downtime="6h",
        first_failure_time="09:00",
        last_failure_time="09:00",
    )

    assert describe_day(StatusColor.PARTIAL, stat) == (
        "1 failed checks out of 4. Estimated downtime: 6h. Outage window: 09:00 - 09:00."
    )


def test_describe_day_without_stats_falls_back_to_zero_counts() -> None:
    assert describe_day(StatusColor.FAILURE, None) == (
        "0 failed checks out of 0. Estimated downtime: 0m. No failed checks in this period."
    )
