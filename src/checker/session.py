"""Check orchestration and in-memory session history."""
import logging
from collections import deque
from enum import Enum
from typing import List, Optional

from ..models.data_models import CheckResult, HistoryEntry
from .status_client import StatusCheckClient, StatusCheckError
from .url_validator import validate_url

logger = logging.getLogger("status_checker")

EMPTY_URL_ERROR = "Please enter a website URL"
INVALID_URL_ERROR = "Please enter a valid URL (e.g., google.com or https://google.com)"


class CheckState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


class CheckSession:
    """Runs one check at a time and keeps the most recent results."""

    def __init__(self, client: StatusCheckClient, history_size: int = 5):
        """
        Initialize the session.

        Args:
            client: Client used to reach the check service
            history_size: Number of results to keep, newest first
        """
        self.client = client
        self.state = CheckState.IDLE
        self.result: Optional[CheckResult] = None
        self.error = ""
        self._history = deque(maxlen=history_size)

    @property
    def history(self) -> List[HistoryEntry]:
        return list(self._history)

    def check(self, raw_url: str) -> Optional[CheckResult]:
        """
        Validate user input, submit it to the service and record the result.

        Args:
            raw_url: URL text as typed by the user

        Returns:
            The new CheckResult, or None if validation or the check failed
            (the reason is left in ``self.error``)
        """
        if not raw_url or not raw_url.strip():
            return self._fail(EMPTY_URL_ERROR)

        url = validate_url(raw_url)
        if not url:
            return self._fail(INVALID_URL_ERROR)

        self.state = CheckState.LOADING
        self.error = ""
        self.result = None

        try:
            result = self.client.check(url)
        except StatusCheckError as e:
            logger.error(f"Check failed for {url}: {e}")
            return self._fail(f"Failed to check website: {e}. Please try again.")
        except Exception as e:
            # Leave LOADING before the caller sees the error
            self._fail(f"Failed to check website: {e}. Please try again.")
            raise

        self.result = result
        self.state = CheckState.RESULT
        self._history.appendleft(HistoryEntry.from_result(result))
        logger.info(f"{url} is {result.status} ({result.response_time}ms)")

        return result

    def clear_history(self):
        """Forget all previous results and return to the idle state."""
        self._history.clear()
        self.result = None
        self.error = ""
        self.state = CheckState.IDLE

    def _fail(self, message: str) -> None:
        self.error = message
        self.state = CheckState.ERROR
        return None
