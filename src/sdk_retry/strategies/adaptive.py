"""
Adaptive retry strategy.

Same delay tiers as the standard strategy. Client-side rate limiting keys
off the throttling classifier, so building without one is an error.
"""

from dataclasses import dataclass
from typing import ClassVar

from sdk_retry.retry_settings import (
    ADAPTIVE_MAX_ATTEMPTS,
    BASE_DELAY_SECONDS,
    MAX_BACKOFF_SECONDS,
    STANDARD_THROTTLED_BASE_DELAY_SECONDS,
)
from sdk_retry.strategies.base import (
    BaseRetryStrategy,
    BaseRetryStrategyBuilder,
    DefaultAwareBuilderMixin,
)


@dataclass(frozen=True)
class AdaptiveRetryStrategy(BaseRetryStrategy):
    kind: ClassVar[str] = "adaptive"

    @classmethod
    def builder(cls) -> "AdaptiveRetryStrategyBuilder":
        return AdaptiveRetryStrategyBuilder()


class AdaptiveRetryStrategyBuilder(DefaultAwareBuilderMixin, BaseRetryStrategyBuilder):
    strategy_class = AdaptiveRetryStrategy
    default_max_attempts = ADAPTIVE_MAX_ATTEMPTS
    default_base_delay = BASE_DELAY_SECONDS
    default_throttled_base_delay = STANDARD_THROTTLED_BASE_DELAY_SECONDS
    default_max_backoff = MAX_BACKOFF_SECONDS

    def build(self) -> AdaptiveRetryStrategy:
        if self._throttling_condition is None:
            raise ValueError("Adaptive retry strategy requires a throttling classifier")
        return super().build()
