import pytest

from core.domain.status_color import StatusColor


@pytest.mark.parametrize(
    ("average", "expected"),
    [
        (None, StatusColor.NODATA),
        (1.0, StatusColor.SUCCESS),
        (0.0, StatusColor.FAILURE),
        (0.29, StatusColor.FAILURE),
        (0.3, StatusColor.PARTIAL),
        (0.99, StatusColor.PARTIAL),
    ],
)
def test_status_color_from_average(average, expected: StatusColor) -> None:
    assert StatusColor.from_average(average) is expected


def test_status_color_text() -> None:
    assert StatusColor.NODATA.status_text == "No Data Available"
    assert StatusColor.SUCCESS.status_text == "Fully Operational"
    assert StatusColor.FAILURE.status_text == "Major Outage"
    assert StatusColor.PARTIAL.status_text == "Partial Outage"
