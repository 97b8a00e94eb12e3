"""
Retry strategies used by SDK clients.

This module selects a retry strategy for a retry mode and decorates
strategy builders with the generic SDK retry conditions:

1. **Retryable**: the failure is inherently retryable (I/O failures, ...)
2. **Status codes**: the service reported a retryable status code
3. **Clock skew**: the request was rejected for client/server time divergence
4. **Throttling**: the service rate-limited the request

Failures whose type (or whose direct cause's type) is in
RETRYABLE_EXCEPTIONS are retried too, and throttled failures are
classified so backoff can apply the throttled delay tier.

Usage:
    >>> from sdk_retry import for_retry_mode, RetryMode
    >>> strategy = for_retry_mode(RetryMode.STANDARD)
    >>> strategy.should_retry(error, attempt=1)
"""

from typing import Callable, TypeVar

import structlog

from sdk_retry import conditions
from sdk_retry.config import get_max_attempts_override
from sdk_retry.models.enums import RetryMode
from sdk_retry.retry_policy import RetryPolicy, RetryPolicyAdapter
from sdk_retry.retry_settings import RETRYABLE_EXCEPTIONS
from sdk_retry.strategies.adaptive import AdaptiveRetryStrategy, AdaptiveRetryStrategyBuilder
from sdk_retry.strategies.base import (
    DefaultAwareRetryStrategyBuilder,
    RetryStrategy,
    RetryStrategyBuilder,
    RetryStrategyDefaults,
)
from sdk_retry.strategies.legacy import LegacyRetryStrategy, LegacyRetryStrategyBuilder
from sdk_retry.strategies.standard import StandardRetryStrategy, StandardRetryStrategyBuilder

logger = structlog.get_logger(__name__)

DEFAULTS_NAME = "sdk"

T = TypeVar("T", bound=RetryStrategyBuilder)


class _SdkRetryStrategyDefaults(RetryStrategyDefaults):
    """The "sdk" defaults bundle. Stateless; one shared instance."""

    __slots__ = ()

    def name(self) -> str:
        return DEFAULTS_NAME

    def apply_defaults(self, builder: RetryStrategyBuilder) -> None:
        if (
            isinstance(builder, DefaultAwareRetryStrategyBuilder)
            and not builder.should_add_defaults(DEFAULTS_NAME)
        ):
            logger.debug(
                "SDK retry defaults already applied",
                builder=type(builder).__name__,
            )
            return
        configure_strategy(builder)
        _mark_defaults_added(builder)

    def __repr__(self) -> str:
        return f"RetryStrategyDefaults(name={DEFAULTS_NAME!r})"


_DEFAULTS_PREDICATES = _SdkRetryStrategyDefaults()


def default_retry_strategy() -> RetryStrategy:
    """Retry strategy for the process-wide configured retry mode."""
    return for_retry_mode(RetryMode.default_retry_mode())


def for_retry_mode(mode: RetryMode) -> RetryStrategy:
    """
    Retry strategy for a retry mode, with SDK retry conditions added.

    Args:
        mode: Retry mode to select the strategy variant

    Returns:
        Fully configured, immutable strategy

    Raises:
        RuntimeError: If mode is not a known RetryMode
    """
    factory = _STRATEGY_FACTORIES.get(mode) if isinstance(mode, RetryMode) else None
    if factory is None:
        raise RuntimeError(f"unknown retry mode: {mode!r}")
    strategy = factory()
    logger.debug("Selected retry strategy", retry_mode=mode.value, kind=strategy.kind)
    return strategy


def retry_mode(retry_strategy: RetryStrategy) -> RetryMode:
    """
    Retry mode for a strategy created by this module.

    Raises:
        ValueError: If the strategy is not one of the known variants
    """
    kind = getattr(type(retry_strategy), "kind", None)
    mode = _RETRY_MODES_BY_KIND.get(kind) if isinstance(kind, str) else None
    if mode is None:
        raise ValueError(
            f"unknown retry strategy class: {type(retry_strategy).__module__}."
            f"{type(retry_strategy).__qualname__}"
        )
    return mode


def standard_retry_strategy() -> StandardRetryStrategy:
    return standard_retry_strategy_builder().build()


def legacy_retry_strategy() -> LegacyRetryStrategy:
    return legacy_retry_strategy_builder().build()


def adaptive_retry_strategy() -> AdaptiveRetryStrategy:
    return adaptive_retry_strategy_builder().build()


def standard_retry_strategy_builder() -> StandardRetryStrategyBuilder:
    """Standard strategy builder, preconfigured with SDK retry conditions."""
    return configure(StandardRetryStrategy.builder())


def legacy_retry_strategy_builder() -> LegacyRetryStrategyBuilder:
    """Legacy strategy builder, preconfigured with SDK retry conditions."""
    return configure(LegacyRetryStrategy.builder())


def adaptive_retry_strategy_builder() -> AdaptiveRetryStrategyBuilder:
    """Adaptive strategy builder, preconfigured with SDK retry conditions."""
    return configure(AdaptiveRetryStrategy.builder())


def configure(builder: T) -> T:
    """
    Add the SDK retry conditions to a strategy builder.

    Also applies the SDK_MAX_ATTEMPTS override when set, and marks the
    "sdk" defaults bundle as applied on defaults-aware builders.

    Args:
        builder: Any builder satisfying RetryStrategyBuilder

    Returns:
        The same builder, for chaining
    """
    configure_strategy(builder)
    max_attempts = get_max_attempts_override()
    if max_attempts is not None:
        builder.max_attempts(max_attempts)
        logger.debug(
            "Applied max attempts override",
            builder=type(builder).__name__,
            max_attempts=max_attempts,
        )
    _mark_defaults_added(builder)
    return builder


def configure_strategy(builder: T) -> T:
    """
    Add the SDK retry conditions to a strategy builder.

    Unlike configure(), never applies the max attempts override or the
    defaults marker.
    """
    for condition in conditions.SDK_RETRY_CONDITIONS:
        builder.retry_on_exception(condition)
    for exception_type in RETRYABLE_EXCEPTIONS:
        builder.retry_on_exception_or_cause_instance_of(exception_type)
    builder.treat_as_throttling(conditions.treat_as_throttling)
    logger.debug(
        "Added SDK retry conditions",
        builder=type(builder).__name__,
        conditions_count=len(conditions.SDK_RETRY_CONDITIONS),
        exception_types=[t.__name__ for t in RETRYABLE_EXCEPTIONS],
    )
    return builder


def retry_strategy_defaults() -> RetryStrategyDefaults:
    """The "sdk" defaults bundle, for merge-based configuration."""
    return _DEFAULTS_PREDICATES


def _legacy_adaptive_retry_strategy() -> RetryPolicyAdapter:
    return RetryPolicyAdapter(RetryPolicy.for_retry_mode(RetryMode.ADAPTIVE))


def _mark_defaults_added(builder: RetryStrategyBuilder) -> None:
    if isinstance(builder, DefaultAwareRetryStrategyBuilder):
        builder.mark_default_added(DEFAULTS_NAME)


_STRATEGY_FACTORIES: dict[RetryMode, Callable[[], RetryStrategy]] = {
    RetryMode.STANDARD: standard_retry_strategy,
    RetryMode.ADAPTIVE: _legacy_adaptive_retry_strategy,
    RetryMode.ADAPTIVE_V2: adaptive_retry_strategy,
    RetryMode.LEGACY: legacy_retry_strategy,
}

_RETRY_MODES_BY_KIND: dict[str, RetryMode] = {
    StandardRetryStrategy.kind: RetryMode.STANDARD,
    AdaptiveRetryStrategy.kind: RetryMode.ADAPTIVE_V2,
    LegacyRetryStrategy.kind: RetryMode.LEGACY,
    RetryPolicyAdapter.kind: RetryMode.ADAPTIVE,
}
