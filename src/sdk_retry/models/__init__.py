"""Data models for SDK retry configuration."""

from sdk_retry.models.enums import RetryMode

__all__ = ["RetryMode"]
