"""
Retry policy and its strategy adapter.

RetryPolicy is the original, pre-strategy retry configuration object. The
legacy ADAPTIVE retry mode is still served by a RetryPolicy; the
RetryPolicyAdapter exposes such a policy through the RetryStrategy
interface so callers see a single abstraction.
"""

from dataclasses import dataclass
from typing import ClassVar

import structlog

from sdk_retry.conditions import (
    SDK_RETRY_CONDITIONS,
    RetryCondition,
    any_condition,
    treat_as_throttling,
)
from sdk_retry.config import get_max_attempts_override
from sdk_retry.models.enums import RetryMode
from sdk_retry.retry_settings import (
    BASE_DELAY_SECONDS,
    LEGACY_MAX_ATTEMPTS,
    LEGACY_THROTTLED_BASE_DELAY_SECONDS,
    MAX_BACKOFF_SECONDS,
    RETRYABLE_EXCEPTIONS,
    STANDARD_MAX_ATTEMPTS,
    STANDARD_THROTTLED_BASE_DELAY_SECONDS,
)
from sdk_retry.strategies.base import ExceptionOrCauseInstanceOf

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry policy: retry condition, retry budget, and backoff tiers.

    Attributes:
        retry_mode: Mode this policy was created for
        num_retries: Retries allowed after the first attempt
        retry_conditions: Ordered conditions, OR-composed
        throttling_condition: Classifier picking the throttled delay tier
        base_delay: Base delay (seconds) for generic failures
        throttled_base_delay: Base delay (seconds) for throttled failures
        max_backoff: Upper bound (seconds) for any single delay
    """

    retry_mode: RetryMode
    num_retries: int
    retry_conditions: tuple[RetryCondition, ...]
    throttling_condition: RetryCondition
    base_delay: float
    throttled_base_delay: float
    max_backoff: float

    def __post_init__(self) -> None:
        if self.num_retries < 0:
            raise ValueError("num_retries must be >= 0")

    @classmethod
    def for_retry_mode(cls, retry_mode: RetryMode) -> "RetryPolicy":
        """
        Create the default policy for a retry mode.

        The retry budget honors the SDK_MAX_ATTEMPTS override when set.
        """
        max_attempts_override = get_max_attempts_override()
        if max_attempts_override is not None:
            num_retries = max_attempts_override - 1
        elif retry_mode == RetryMode.LEGACY:
            num_retries = LEGACY_MAX_ATTEMPTS - 1
        else:
            num_retries = STANDARD_MAX_ATTEMPTS - 1

        if retry_mode == RetryMode.LEGACY:
            throttled_base_delay = LEGACY_THROTTLED_BASE_DELAY_SECONDS
        else:
            throttled_base_delay = STANDARD_THROTTLED_BASE_DELAY_SECONDS

        logger.debug(
            "Created retry policy",
            retry_mode=retry_mode.value,
            num_retries=num_retries,
            max_attempts_override=max_attempts_override,
        )
        return cls(
            retry_mode=retry_mode,
            num_retries=num_retries,
            retry_conditions=SDK_RETRY_CONDITIONS
            + tuple(ExceptionOrCauseInstanceOf(t) for t in RETRYABLE_EXCEPTIONS),
            throttling_condition=treat_as_throttling,
            base_delay=BASE_DELAY_SECONDS,
            throttled_base_delay=throttled_base_delay,
            max_backoff=MAX_BACKOFF_SECONDS,
        )


@dataclass(frozen=True)
class RetryPolicyAdapter:
    """Exposes a RetryPolicy through the RetryStrategy interface."""

    kind: ClassVar[str] = "retry_policy_adapter"

    retry_policy: RetryPolicy

    @property
    def max_attempts(self) -> int:
        return self.retry_policy.num_retries + 1

    def is_retryable(self, error: BaseException) -> bool:
        return any_condition(self.retry_policy.retry_conditions, error)

    def is_throttling(self, error: BaseException) -> bool:
        return self.retry_policy.throttling_condition(error)

    def should_retry(self, error: BaseException, attempt: int) -> bool:
        if attempt >= self.max_attempts:
            return False
        return self.is_retryable(error)

    def compute_delay(self, attempt: int, error: BaseException) -> float:
        policy = self.retry_policy
        base = policy.throttled_base_delay if self.is_throttling(error) else policy.base_delay
        return min(policy.max_backoff, base * 2 ** (attempt - 1))
