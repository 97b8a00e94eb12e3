"""
Retry strategy selection and configuration for SDK clients.

Maps a retry mode (standard, adaptive, adaptive_v2, legacy) to a fully
configured retry strategy, and decorates any strategy builder with the
generic SDK retry conditions:

- Inherently retryable failures (I/O errors, connection resets)
- Retryable service status codes (500, 502, 503, 504)
- Clock skew rejections
- Throttling responses (also classified for throttled backoff)

Configuration: SDK_RETRY_MODE and SDK_MAX_ATTEMPTS environment variables.
"""

from sdk_retry.models.enums import RetryMode
from sdk_retry.sdk_default import (
    adaptive_retry_strategy,
    adaptive_retry_strategy_builder,
    configure,
    configure_strategy,
    default_retry_strategy,
    for_retry_mode,
    legacy_retry_strategy,
    legacy_retry_strategy_builder,
    retry_mode,
    retry_strategy_defaults,
    standard_retry_strategy,
    standard_retry_strategy_builder,
)

__version__ = "0.1.0"

__all__ = [
    "RetryMode",
    "adaptive_retry_strategy",
    "adaptive_retry_strategy_builder",
    "configure",
    "configure_strategy",
    "default_retry_strategy",
    "for_retry_mode",
    "legacy_retry_strategy",
    "legacy_retry_strategy_builder",
    "retry_mode",
    "retry_strategy_defaults",
    "standard_retry_strategy",
    "standard_retry_strategy_builder",
]
