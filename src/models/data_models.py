"""Data models for the website status checker."""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

STATUS_UP = "UP"
STATUS_DOWN = "DOWN"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckResult(BaseModel):
    """Display record for a single status check."""
    url: str
    status: str
    response_time: Union[int, float] = 0  # milliseconds
    timestamp: datetime = Field(default_factory=_utc_now)
    status_code: Optional[int] = None
    message: str = ""

    @property
    def is_up(self) -> bool:
        return self.status == STATUS_UP

    @classmethod
    def from_response(cls, url: str, data: Dict[str, Any]) -> "CheckResult":
        """
        Map a check service response body into a display record.

        The service is not strict about field naming, so both snake_case and
        camelCase keys are accepted.

        Args:
            url: The normalized URL that was submitted
            data: Decoded JSON object returned by the service

        Returns:
            CheckResult for display
        """
        status = data.get("status") or (STATUS_UP if data.get("is_up") else STATUS_DOWN)

        return cls(
            url=url,
            status=str(status),
            response_time=data.get("response_time") or data.get("responseTime") or 0,
            status_code=data.get("status_code") or data.get("statusCode"),
            message=data.get("message") or "",
        )


class HistoryEntry(CheckResult):
    """A check result as kept in the session history."""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def from_result(cls, result: CheckResult) -> "HistoryEntry":
        return cls(**result.model_dump())
