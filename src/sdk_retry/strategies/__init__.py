"""
Retry strategy variants and builder capabilities.

Variants:
    - StandardRetryStrategy: exponential backoff, 3 attempts
    - LegacyRetryStrategy: historical defaults, 4 attempts
    - AdaptiveRetryStrategy: standard delays, requires a throttling classifier

Each variant has a builder created through ``<Strategy>.builder()``.
"""

from sdk_retry.strategies.adaptive import AdaptiveRetryStrategy, AdaptiveRetryStrategyBuilder
from sdk_retry.strategies.base import (
    BaseRetryStrategy,
    BaseRetryStrategyBuilder,
    DefaultAwareRetryStrategyBuilder,
    RetryStrategy,
    RetryStrategyBuilder,
    RetryStrategyDefaults,
)
from sdk_retry.strategies.legacy import LegacyRetryStrategy, LegacyRetryStrategyBuilder
from sdk_retry.strategies.standard import StandardRetryStrategy, StandardRetryStrategyBuilder

__all__ = [
    "AdaptiveRetryStrategy",
    "AdaptiveRetryStrategyBuilder",
    "BaseRetryStrategy",
    "BaseRetryStrategyBuilder",
    "DefaultAwareRetryStrategyBuilder",
    "LegacyRetryStrategy",
    "LegacyRetryStrategyBuilder",
    "RetryStrategy",
    "RetryStrategyBuilder",
    "RetryStrategyDefaults",
    "StandardRetryStrategy",
    "StandardRetryStrategyBuilder",
]
