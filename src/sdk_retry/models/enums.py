"""
Enumerations for SDK retry configuration.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class RetryMode(str, Enum):
    """
    Retry mode selecting which strategy variant to use.

    - STANDARD: standard strategy (3 attempts, token-free exponential backoff)
    - ADAPTIVE: legacy adaptive behavior, served through a RetryPolicy adapter
    - ADAPTIVE_V2: new adaptive strategy
    - LEGACY: legacy strategy (4 attempts, shorter throttling backoff)
    """

    STANDARD = "standard"
    ADAPTIVE = "adaptive"
    ADAPTIVE_V2 = "adaptive_v2"
    LEGACY = "legacy"

    @classmethod
    def from_string(cls, value: str) -> "RetryMode":
        """Parse a retry mode name case-insensitively."""
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(
            f"Unknown retry mode '{value}'. "
            f"Expected one of: {', '.join(m.value for m in cls)}"
        )

    @classmethod
    def default_retry_mode(cls) -> "RetryMode":
        """Resolve the process-wide retry mode from settings."""
        from sdk_retry.config import get_configured_retry_mode

        return get_configured_retry_mode()
