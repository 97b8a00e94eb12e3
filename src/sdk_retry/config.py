"""
Configuration settings for SDK retry strategies.

Settings are read from process environment variables only (no .env file),
so building a strategy never touches the disk. Each setting lives in its
own settings class: a bad value only fails the code path that reads it.
"""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sdk_retry.models.enums import RetryMode


class MaxAttemptsSettings(BaseSettings):
    """Max attempts override applied when configuring a strategy builder."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    SDK_MAX_ATTEMPTS: Optional[int] = Field(default=None, ge=1)  # None -> variant default


class RetryModeSettings(BaseSettings):
    """Process-wide retry mode, used when the caller does not pick one."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    SDK_RETRY_MODE: RetryMode = RetryMode.LEGACY

    @field_validator("SDK_RETRY_MODE", mode="before")
    @classmethod
    def parse_retry_mode(cls, value: Any) -> Any:
        """Accept retry mode names in any case (e.g. STANDARD, Adaptive_V2)."""
        if isinstance(value, str):
            return RetryMode.from_string(value)
        return value


def get_max_attempts_override() -> Optional[int]:
    """
    Read the SDK_MAX_ATTEMPTS override from the current environment.

    Not cached: overrides applied after import are honored.

    Returns:
        The override, or None when unset

    Raises:
        pydantic.ValidationError: If SDK_MAX_ATTEMPTS is not an integer >= 1
    """
    return MaxAttemptsSettings().SDK_MAX_ATTEMPTS


def get_configured_retry_mode() -> RetryMode:
    """
    Read the SDK_RETRY_MODE setting from the current environment.

    Raises:
        pydantic.ValidationError: If SDK_RETRY_MODE names no known mode
    """
    return RetryModeSettings().SDK_RETRY_MODE
