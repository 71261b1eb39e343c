"""Client for the remote uptime-check service."""
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from ..models.data_models import CheckResult

logger = logging.getLogger("status_checker")


class StatusCheckError(Exception):
    """Raised when the check service cannot produce a usable result."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StatusCheckClient:
    """Submits URLs to the uptime-check service."""

    def __init__(self, endpoint: str, timeout: float = 30.0):
        """
        Initialize the client.

        Args:
            endpoint: URL of the check service
            timeout: Request timeout in seconds
        """
        self.endpoint = endpoint
        self.timeout = timeout

    def check(self, url: str) -> CheckResult:
        """
        Ask the service whether a website is up.

        Args:
            url: Normalized URL of the website to check

        Returns:
            CheckResult mapped from the service response

        Raises:
            StatusCheckError: On network failure, a non-2xx response or an
                unreadable response body
        """
        payload = {"url": url}
        logger.info(f"Checking {url} via {self.endpoint}")

        try:
            response = requests.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise StatusCheckError("Request timed out") from e
        except requests.exceptions.ConnectionError as e:
            raise StatusCheckError("Could not connect to the check service") from e
        except requests.exceptions.RequestException as e:
            raise StatusCheckError(f"Request error: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            raise StatusCheckError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise StatusCheckError("Invalid JSON in response") from e

        if not isinstance(data, dict):
            raise StatusCheckError("Unexpected response format")

        logger.debug(f"Service response for {url}: {data}")

        try:
            return CheckResult.from_response(url, data)
        except ValidationError as e:
            raise StatusCheckError(f"Unexpected response format: {e.error_count()} invalid field(s)") from e
