"""
Standard retry strategy.

Exponential backoff with a longer base delay for throttled failures.
Use case: the default for most services.
"""

from dataclasses import dataclass
from typing import ClassVar

from sdk_retry.retry_settings import (
    BASE_DELAY_SECONDS,
    MAX_BACKOFF_SECONDS,
    STANDARD_MAX_ATTEMPTS,
    STANDARD_THROTTLED_BASE_DELAY_SECONDS,
)
from sdk_retry.strategies.base import (
    BaseRetryStrategy,
    BaseRetryStrategyBuilder,
    DefaultAwareBuilderMixin,
)


@dataclass(frozen=True)
class StandardRetryStrategy(BaseRetryStrategy):
    """Standard strategy: 3 attempts, 0.1s base delay, 1s throttled base delay."""

    kind: ClassVar[str] = "standard"

    @classmethod
    def builder(cls) -> "StandardRetryStrategyBuilder":
        return StandardRetryStrategyBuilder()


class StandardRetryStrategyBuilder(DefaultAwareBuilderMixin, BaseRetryStrategyBuilder):
    strategy_class = StandardRetryStrategy
    default_max_attempts = STANDARD_MAX_ATTEMPTS
    default_base_delay = BASE_DELAY_SECONDS
    default_throttled_base_delay = STANDARD_THROTTLED_BASE_DELAY_SECONDS
    default_max_backoff = MAX_BACKOFF_SECONDS