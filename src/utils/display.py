"""Formatting helpers for rendering check results."""
from datetime import datetime

from ..models.data_models import CheckResult


def status_headline(result: CheckResult) -> str:
    return "It's UP! 🎉" if result.is_up else "It's DOWN 😞"


def status_icon(result: CheckResult) -> str:
    return "✅" if result.is_up else "❌"


def status_color(result: CheckResult) -> str:
    """Streamlit markdown color name for a result."""
    return "green" if result.is_up else "red"


def format_response_time(result: CheckResult) -> str:
    return f"Response Time: {result.response_time}ms"


def format_checked_time(timestamp: datetime) -> str:
    """Time of day in local time, e.g. 14:03:27."""
    return timestamp.astimezone().strftime("%H:%M:%S")


def format_checked_datetime(timestamp: datetime) -> str:
    return timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
