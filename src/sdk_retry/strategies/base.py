"""
Retry strategy and builder abstractions.

This module defines the capabilities the SDK configuration routines rely on:

    - RetryStrategyBuilder: minimal builder capability every strategy builder
      satisfies (register conditions, exception-type rules, a throttling
      classifier, and a max attempt count).
    - DefaultAwareRetryStrategyBuilder: optional secondary capability that
      records which named defaults bundles were already applied.
    - RetryStrategyDefaults: a named, idempotently-applicable bundle of
      default retry conditions.

It also provides the shared implementation the concrete variants
(standard, legacy, adaptive) are built on.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Protocol, TypeVar, runtime_checkable

import structlog

from sdk_retry.conditions import RetryCondition, any_condition

logger = structlog.get_logger(__name__)

B = TypeVar("B", bound="BaseRetryStrategyBuilder")


@runtime_checkable
class RetryStrategy(Protocol):
    """
    Protocol for finalized retry strategies.

    A strategy is immutable once built and safe to share across threads.
    It answers, per failed attempt, whether to retry and how long to wait.
    """

    kind: ClassVar[str]
    max_attempts: int

    def is_retryable(self, error: BaseException) -> bool:
        ...

    def is_throttling(self, error: BaseException) -> bool:
        ...

    def should_retry(self, error: BaseException, attempt: int) -> bool:
        ...

    def compute_delay(self, attempt: int, error: BaseException) -> float:
        ...


@runtime_checkable
class RetryStrategyBuilder(Protocol):
    """
    Minimal builder capability required by the SDK configuration routines.

    All registration methods return the builder to allow chaining.
    """

    def retry_on_exception(self, predicate: RetryCondition) -> "RetryStrategyBuilder":
        ...

    def retry_on_exception_instance_of(
        self, exception_type: type[BaseException]
    ) -> "RetryStrategyBuilder":
        ...

    def retry_on_exception_or_cause_instance_of(
        self, exception_type: type[BaseException]
    ) -> "RetryStrategyBuilder":
        ...

    def treat_as_throttling(self, predicate: RetryCondition) -> "RetryStrategyBuilder":
        ...

    def max_attempts(self, max_attempts: int) -> "RetryStrategyBuilder":
        ...

    def build(self) -> RetryStrategy:
        ...


class DefaultAwareRetryStrategyBuilder(ABC):
    """
    Optional builder capability tracking applied defaults bundles.

    Builders implementing it let a defaults bundle detect that it was
    already applied and skip registering its conditions a second time.
    """

    @abstractmethod
    def mark_default_added(self, defaults_name: str) -> None:
        """Record that the named defaults bundle has been applied."""

    @abstractmethod
    def should_add_defaults(self, defaults_name: str) -> bool:
        """Whether the named defaults bundle still needs to be applied."""

    def add_defaults(self, defaults: "RetryStrategyDefaults"):
        """Apply a defaults bundle unless it was already applied to this builder."""
        if self.should_add_defaults(defaults.name()):
            defaults.apply_defaults(self)
        return self


class RetryStrategyDefaults(ABC):
    """A named bundle of default retry conditions."""

    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def apply_defaults(self, builder: RetryStrategyBuilder) -> None:
        ...


@dataclass(frozen=True)
class ExceptionInstanceOf:
    """Retry condition matching failures of a given type."""

    exception_type: type[BaseException]

    def __call__(self, error: BaseException) -> bool:
        return isinstance(error, self.exception_type)


@dataclass(frozen=True)
class ExceptionOrCauseInstanceOf:
    """Retry condition matching failures, or their direct cause, of a given type."""

    exception_type: type[BaseException]

    def __call__(self, error: BaseException) -> bool:
        return isinstance(error, self.exception_type) or isinstance(
            error.__cause__, self.exception_type
        )


def never_throttling(error: BaseException) -> bool:
    return False


@dataclass(frozen=True)
class BaseRetryStrategy(ABC):
    """
    Shared implementation of a finalized retry strategy.

    Attributes:
        max_attempts: Attempt budget, including the first attempt
        retry_conditions: Ordered conditions, OR-composed
        throttling_condition: Classifier picking the throttled delay tier
        base_delay: Base delay (seconds) for generic failures
        throttled_base_delay: Base delay (seconds) for throttled failures
        max_backoff: Upper bound (seconds) for any single delay
        defaults_added: Names of defaults bundles applied while building
    """

    kind: ClassVar[str] = ""

    max_attempts: int
    retry_conditions: tuple[RetryCondition, ...]
    throttling_condition: RetryCondition
    base_delay: float
    throttled_base_delay: float
    max_backoff: float
    defaults_added: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    @abstractmethod
    def builder(cls) -> "BaseRetryStrategyBuilder":
        """Return an empty builder for this strategy variant."""

    def is_retryable(self, error: BaseException) -> bool:
        """Whether any registered condition retries this failure."""
        return any_condition(self.retry_conditions, error)

    def is_throttling(self, error: BaseException) -> bool:
        return self.throttling_condition(error)

    def should_retry(self, error: BaseException, attempt: int) -> bool:
        """
        Decide whether a failed attempt should be retried.

        Args:
            error: Failure raised by the attempt
            attempt: Number of the attempt that failed (1-indexed)
        """
        if attempt >= self.max_attempts:
            return False
        return self.is_retryable(error)

    def compute_delay(self, attempt: int, error: BaseException) -> float:
        """Exponential backoff; throttled failures use the throttled tier."""
        base = self.throttled_base_delay if self.is_throttling(error) else self.base_delay
        return min(self.max_backoff, base * 2 ** (attempt - 1))

    def to_builder(self) -> "BaseRetryStrategyBuilder":
        """Return a builder pre-populated with this strategy's configuration."""
        builder = self.builder()
        for condition in self.retry_conditions:
            builder.retry_on_exception(condition)
        builder.treat_as_throttling(self.throttling_condition)
        builder.max_attempts(self.max_attempts)
        builder.backoff(self.base_delay, self.max_backoff)
        builder.throttling_backoff(self.throttled_base_delay)
        if isinstance(builder, DefaultAwareRetryStrategyBuilder):
            for name in self.defaults_added:
                builder.mark_default_added(name)
        return builder


class BaseRetryStrategyBuilder:
    """
    Shared builder implementation.

    Registrations are de-duplicated: registering the same condition object
    (or the same exception type rule) twice stores it once.
    """

    strategy_class: ClassVar[type[BaseRetryStrategy]] = BaseRetryStrategy
    default_max_attempts: ClassVar[int] = 3
    default_base_delay: ClassVar[float] = 0.1
    default_throttled_base_delay: ClassVar[float] = 1.0
    default_max_backoff: ClassVar[float] = 20.0

    def __init__(self) -> None:
        self._retry_conditions: list[RetryCondition] = []
        self._throttling_condition: Optional[RetryCondition] = None
        self._max_attempts = self.default_max_attempts
        self._base_delay = self.default_base_delay
        self._throttled_base_delay = self.default_throttled_base_delay
        self._max_backoff = self.default_max_backoff
        self._defaults_added: set[str] = set()

    @property
    def retry_conditions(self) -> tuple[RetryCondition, ...]:
        return tuple(self._retry_conditions)

    def retry_on_exception(self: B, predicate: RetryCondition) -> B:
        if predicate not in self._retry_conditions:
            self._retry_conditions.append(predicate)
        return self

    def retry_on_exception_instance_of(self: B, exception_type: type[BaseException]) -> B:
        return self.retry_on_exception(ExceptionInstanceOf(exception_type))

    def retry_on_exception_or_cause_instance_of(
        self: B, exception_type: type[BaseException]
    ) -> B:
        return self.retry_on_exception(ExceptionOrCauseInstanceOf(exception_type))

    def treat_as_throttling(self: B, predicate: RetryCondition) -> B:
        self._throttling_condition = predicate
        return self

    def max_attempts(self: B, max_attempts: int) -> B:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._max_attempts = max_attempts
        return self

    def backoff(self: B, base_delay: float, max_backoff: Optional[float] = None) -> B:
        if base_delay < 0:
            raise ValueError(f"base_delay must be >= 0, got {base_delay}")
        self._base_delay = base_delay
        if max_backoff is not None:
            self._max_backoff = max_backoff
        return self

    def throttling_backoff(self: B, base_delay: float) -> B:
        if base_delay < 0:
            raise ValueError(f"base_delay must be >= 0, got {base_delay}")
        self._throttled_base_delay = base_delay
        return self

    def build(self) -> BaseRetryStrategy:
        strategy = self.strategy_class(
            max_attempts=self._max_attempts,
            retry_conditions=tuple(self._retry_conditions),
            throttling_condition=self._throttling_condition or never_throttling,
            base_delay=self._base_delay,
            throttled_base_delay=self._throttled_base_delay,
            max_backoff=self._max_backoff,
            defaults_added=frozenset(self._defaults_added),
        )
        logger.debug(
            "Built retry strategy",
            kind=strategy.kind,
            max_attempts=strategy.max_attempts,
            conditions_count=len(strategy.retry_conditions),
            defaults_added=sorted(strategy.defaults_added),
        )
        return strategy


class DefaultAwareBuilderMixin(DefaultAwareRetryStrategyBuilder):
    """Defaults bookkeeping backed by the builder's ``_defaults_added`` set."""

    _defaults_added: set[str]

    def mark_default_added(self, defaults_name: str) -> None:
        self._defaults_added.add(defaults_name)

    def should_add_defaults(self, defaults_name: str) -> bool:
        return defaults_name not in self._defaults_added
