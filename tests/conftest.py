"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import httpx
import pytest

from sdk_retry.exceptions import SdkClientError, SdkServiceError


@pytest.fixture(autouse=True)
def clean_retry_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without retry overrides from the host environment."""
    monkeypatch.delenv("SDK_RETRY_MODE", raising=False)
    monkeypatch.delenv("SDK_MAX_ATTEMPTS", raising=False)


@pytest.fixture
def set_max_attempts(monkeypatch: pytest.MonkeyPatch):
    """Factory fixture setting the SDK_MAX_ATTEMPTS override.

    Usage:
        def test_something(set_max_attempts):
            set_max_attempts(7)
    """
    def _set(value: int) -> None:
        monkeypatch.setenv("SDK_MAX_ATTEMPTS", str(value))

    return _set


@pytest.fixture
def throttling_error() -> SdkServiceError:
    """Service error classified as throttling by error code (not status code)."""
    return SdkServiceError(
        "Rate exceeded", status_code=400, error_code="ThrottlingException"
    )


@pytest.fixture
def too_many_requests_error() -> SdkServiceError:
    """Service error classified as throttling by status code only."""
    return SdkServiceError("Too Many Requests", status_code=429)


@pytest.fixture
def clock_skew_error() -> SdkServiceError:
    return SdkServiceError(
        "Signature expired", status_code=403, error_code="RequestTimeTooSkewed"
    )


@pytest.fixture
def server_error() -> SdkServiceError:
    return SdkServiceError("Service Unavailable", status_code=503)


@pytest.fixture
def non_retryable_error() -> SdkServiceError:
    return SdkServiceError(
        "Invalid parameter", status_code=400, error_code="ValidationException"
    )


@pytest.fixture
def connection_reset_error() -> SdkClientError:
    """Client error wrapping an I/O-level cause."""
    try:
        try:
            raise httpx.ConnectError("Connection reset by peer")
        except httpx.ConnectError as exc:
            raise SdkClientError("Unable to execute HTTP request") from exc
    except SdkClientError as error:
        return error
