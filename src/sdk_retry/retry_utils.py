"""
Classification utility for SDK failures.

Answers the narrow questions the retry conditions ask about an SdkError:
is it inherently retryable, was it caused by clock skew, was it throttled.
"""

from sdk_retry.exceptions import SdkError, SdkServiceError
from sdk_retry.retry_settings import REQUEST_TOO_LONG_STATUS_CODE


def is_service_exception(exception: SdkError) -> bool:
    return isinstance(exception, SdkServiceError)


def is_retryable_exception(exception: SdkError) -> bool:
    """Whether the failure is inherently retryable (I/O failures, 5xx, ...)."""
    return exception.retryable()


def is_clock_skew_exception(exception: SdkError) -> bool:
    """Whether the service rejected the request because of client/server time divergence."""
    return is_service_exception(exception) and exception.is_clock_skew_exception()


def is_throttling_exception(exception: SdkError) -> bool:
    """Whether the service rate-limited the request."""
    return is_service_exception(exception) and exception.is_throttling_exception()


def is_request_entity_too_large_exception(exception: SdkError) -> bool:
    return (
        is_service_exception(exception)
        and exception.status_code == REQUEST_TOO_LONG_STATUS_CODE
    )
