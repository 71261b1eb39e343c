from datetime import datetime, timezone

from src.models.data_models import CheckResult
from src.utils.display import (
    format_checked_time,
    format_response_time,
    status_color,
    status_headline,
)


def test_up_result_formatting():
    result = CheckResult(url="https://a.com", status="UP", response_time=250)
    assert status_headline(result).startswith("It's UP!")
    assert status_color(result) == "green"
    assert format_response_time(result) == "Response Time: 250ms"


def test_non_up_status_is_shown_as_down():
    result = CheckResult(url="https://a.com", status="UNKNOWN")
    assert status_headline(result).startswith("It's DOWN")
    assert status_color(result) == "red"


def test_checked_time_format():
    ts = datetime(2024, 1, 1, 12, 30, 5, tzinfo=timezone.utc)
    formatted = format_checked_time(ts)
    assert len(formatted) == 8
    assert formatted.endswith(":05")
