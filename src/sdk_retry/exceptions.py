"""
Failure taxonomy for SDK client operations.

These exceptions give retry conditions a structured way to classify a
failed call: client-side failures (network, timeouts) versus errors
reported by the remote service (status code, error code). Only failures
in this hierarchy are inspected by the SDK retry predicates.
"""

from typing import Optional


class SdkError(Exception):
    """
    Base exception for all SDK errors.

    Attributes:
        message: Human-readable error message
        details: Free-form structured context for logging
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def retryable(self) -> bool:
        """Whether this failure is inherently retryable."""
        return False


class SdkClientError(SdkError):
    """
    Raised when the client fails before a service response is received.

    Includes network errors, DNS failures, and socket resets. A client
    error is retryable when flagged so explicitly, or when it wraps an
    I/O-level cause (``raise SdkClientError(...) from exc``).
    """
    def __init__(
        self,
        message: str,
        details: dict | None = None,
        retryable: Optional[bool] = None,
    ):
        super().__init__(message, details)
        self._retryable = retryable

    def retryable(self) -> bool:
        if self._retryable is not None:
            return self._retryable
        # retry_settings imports this module
        from sdk_retry.retry_settings import IO_EXCEPTIONS

        return isinstance(self.__cause__, IO_EXCEPTIONS)


class RetryableError(SdkClientError):
    """
    Marker for failures the caller explicitly wants retried.

    Always retryable, regardless of cause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details, retryable=True)


class ApiCallAttemptTimeoutError(SdkClientError):
    """
    Raised when a single attempt exceeds its timeout.

    The overall call may still succeed on a later attempt.
    """
    pass


class SdkServiceError(SdkError):
    """
    Raised when the remote service returns an error response.

    Attributes:
        status_code: HTTP status code reported by the service
        error_code: Service-specific error code (e.g. "ThrottlingException")
        request_id: Service request id, if any
    """
    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: Optional[str] = None,
        request_id: Optional[str] = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.error_code = error_code
        self.request_id = request_id

    def is_throttling_exception(self) -> bool:
        from sdk_retry.retry_settings import THROTTLING_ERROR_CODES, THROTTLING_STATUS_CODE

        return (
            self.status_code == THROTTLING_STATUS_CODE
            or self.error_code in THROTTLING_ERROR_CODES
        )

    def is_clock_skew_exception(self) -> bool:
        from sdk_retry.retry_settings import CLOCK_SKEW_ERROR_CODES

        return self.error_code in CLOCK_SKEW_ERROR_CODES

    def retryable(self) -> bool:
        from sdk_retry.retry_settings import RETRYABLE_STATUS_CODES

        return (
            self.status_code in RETRYABLE_STATUS_CODES
            or self.is_throttling_exception()
            or self.is_clock_skew_exception()
        )

    def __str__(self) -> str:
        code = f" ({self.error_code})" if self.error_code else ""
        return f"{self.message} [status {self.status_code}{code}]"
