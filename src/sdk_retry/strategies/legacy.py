"""
Legacy retry strategy.

Kept for clients that depend on the historical defaults: one more attempt
than the standard strategy and a shorter throttled backoff.
"""

from dataclasses import dataclass
from typing import ClassVar

from sdk_retry.retry_settings import (
    BASE_DELAY_SECONDS,
    LEGACY_MAX_ATTEMPTS,
    LEGACY_THROTTLED_BASE_DELAY_SECONDS,
    MAX_BACKOFF_SECONDS,
)
from sdk_retry.strategies.base import (
    BaseRetryStrategy,
    BaseRetryStrategyBuilder,
    DefaultAwareBuilderMixin,
)


@dataclass(frozen=True)
class LegacyRetryStrategy(BaseRetryStrategy):
    """Legacy strategy: 4 attempts, 0.1s base delay, 0.5s throttled base delay."""

    kind: ClassVar[str] = "legacy"

    @classmethod
    def builder(cls) -> "LegacyRetryStrategyBuilder":
        return LegacyRetryStrategyBuilder()


class LegacyRetryStrategyBuilder(DefaultAwareBuilderMixin, BaseRetryStrategyBuilder):
    strategy_class = LegacyRetryStrategy
    default_max_attempts = LEGACY_MAX_ATTEMPTS
    default_base_delay = BASE_DELAY_SECONDS
    default_throttled_base_delay = LEGACY_THROTTLED_BASE_DELAY_SECONDS
    default_max_backoff = MAX_BACKOFF_SECONDS