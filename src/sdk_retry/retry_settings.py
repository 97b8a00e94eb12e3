"""
Fixed retry settings shared by every SDK retry strategy.

These sets are owned by configuration, not by the retry conditions that
consume them: conditions only test membership.
"""

import httpx

from sdk_retry.exceptions import ApiCallAttemptTimeoutError, RetryableError

# === Status codes ===
RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({500, 502, 503, 504})
THROTTLING_STATUS_CODE = 429
REQUEST_TOO_LONG_STATUS_CODE = 413

# === Service error codes ===
THROTTLING_ERROR_CODES: frozenset[str] = frozenset({
    "Throttling",
    "ThrottlingException",
    "ThrottledException",
    "ProvisionedThroughputExceededException",
    "SlowDown",
    "TooManyRequestsException",
    "RequestLimitExceeded",
    "BandwidthLimitExceeded",
    "RequestThrottled",
    "RequestThrottledException",
    "EC2ThrottledException",
    "PriorRequestNotComplete",
    "TransactionInProgressException",
})

CLOCK_SKEW_ERROR_CODES: frozenset[str] = frozenset({
    "RequestTimeTooSkewed",
    "RequestExpired",
    "InvalidSignatureException",
    "SignatureDoesNotMatch",
    "AuthFailure",
    "RequestInTheFuture",
})

# === Exception types ===
# I/O-level causes that make a client error retryable
IO_EXCEPTIONS: tuple[type[BaseException], ...] = (OSError, httpx.TransportError)

# Retried when the failure or its direct cause is an instance of one of these
RETRYABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    RetryableError,
    OSError,
    httpx.TransportError,
    ApiCallAttemptTimeoutError,
)

# === Per-variant defaults ===
STANDARD_MAX_ATTEMPTS = 3
LEGACY_MAX_ATTEMPTS = 4
ADAPTIVE_MAX_ATTEMPTS = 3

BASE_DELAY_SECONDS = 0.1
STANDARD_THROTTLED_BASE_DELAY_SECONDS = 1.0
LEGACY_THROTTLED_BASE_DELAY_SECONDS = 0.5
MAX_BACKOFF_SECONDS = 20.0
