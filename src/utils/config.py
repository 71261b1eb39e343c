"""Configuration loading for the website status checker."""
import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, HttpUrl, ValidationError

DEFAULT_ENDPOINT = "https://nqs65ghim4dte2aghjwivmjkd40tlmmd.lambda-url.us-east-1.on.aws/"


class ConfigError(Exception):
    """Raised when settings are missing or malformed."""


class CheckerConfig(BaseModel):
    """Settings for talking to the check service."""
    endpoint: HttpUrl = Field(default=DEFAULT_ENDPOINT, validate_default=True)
    timeout: float = Field(default=30.0, gt=0)
    history_size: int = Field(default=5, ge=1)


def load_config(fallback: Optional[Mapping[str, Any]] = None) -> CheckerConfig:
    """
    Build the configuration from environment variables.

    Args:
        fallback: Optional secondary source (e.g. Streamlit secrets) used for
            any variable not set in the environment

    Returns:
        CheckerConfig

    Raises:
        ConfigError: If a value cannot be parsed
    """
    fallback = fallback or {}
    names = {
        "endpoint": "STATUS_CHECK_ENDPOINT",
        "timeout": "STATUS_CHECK_TIMEOUT",
        "history_size": "STATUS_HISTORY_SIZE",
    }

    values = {}
    for field, env_name in names.items():
        value = os.getenv(env_name)
        if value is None or value == "":
            value = fallback.get(env_name)
        # 0 from a TOML secret is a real value
        if value is not None and value != "":
            values[field] = value

    try:
        return CheckerConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
