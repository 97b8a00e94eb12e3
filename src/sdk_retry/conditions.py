"""
Retry conditions shared by every SDK retry strategy.

Each condition is a pure, total function over a failure. Anything outside
the SdkError taxonomy is not classifiable and yields False here; such
failures can still be retried through the exception-type rules registered
alongside these conditions.
"""

from typing import Callable

from sdk_retry import retry_utils
from sdk_retry.exceptions import SdkError, SdkServiceError
from sdk_retry.retry_settings import RETRYABLE_STATUS_CODES

RetryCondition = Callable[[BaseException], bool]


def retry_on_retryable_exception(error: BaseException) -> bool:
    if isinstance(error, SdkError):
        return retry_utils.is_retryable_exception(error)
    return False


def retry_on_status_codes(error: BaseException) -> bool:
    if isinstance(error, SdkServiceError):
        return error.status_code in RETRYABLE_STATUS_CODES
    return False


def retry_on_clock_skew_exception(error: BaseException) -> bool:
    if isinstance(error, SdkError):
        return retry_utils.is_clock_skew_exception(error)
    return False


def retry_on_throttling_condition(error: BaseException) -> bool:
    if isinstance(error, SdkError):
        return retry_utils.is_throttling_exception(error)
    return False


def treat_as_throttling(error: BaseException) -> bool:
    """Throttling classifier used by backoff to pick the throttled delay tier."""
    if isinstance(error, SdkError):
        return retry_utils.is_throttling_exception(error)
    return False


# Evaluated in order, first match wins
SDK_RETRY_CONDITIONS: tuple[RetryCondition, ...] = (
    retry_on_retryable_exception,
    retry_on_status_codes,
    retry_on_clock_skew_exception,
    retry_on_throttling_condition,
)


def any_condition(conditions: tuple[RetryCondition, ...], error: BaseException) -> bool:
    """OR-compose conditions, short-circuiting on the first that retries."""
    return any(condition(error) for condition in conditions)
