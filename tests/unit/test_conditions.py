"""
Unit tests for SDK retry conditions.

Each condition is tested on its own: a failure only needs to satisfy one
condition to be retried once the conditions are OR-composed.
"""

import pytest

from sdk_retry.conditions import (
    SDK_RETRY_CONDITIONS,
    any_condition,
    retry_on_clock_skew_exception,
    retry_on_retryable_exception,
    retry_on_status_codes,
    retry_on_throttling_condition,
    treat_as_throttling,
)
from sdk_retry.exceptions import RetryableError, SdkClientError, SdkServiceError


ALL_CONDITIONS = SDK_RETRY_CONDITIONS + (treat_as_throttling,)


# ============================================================================
# Unclassifiable failures
# ============================================================================


@pytest.mark.parametrize("condition", ALL_CONDITIONS)
@pytest.mark.parametrize(
    "error",
    [ValueError("boom"), ConnectionResetError("reset"), KeyboardInterrupt()],
)
def test_conditions_reject_unclassifiable_failures(condition, error):
    """Failures outside the SdkError taxonomy are never retried by a condition."""
    assert condition(error) is False


def test_status_code_condition_ignores_objects_with_status_code_attribute():
    """Only SdkServiceError carries a trusted status code."""

    class HttpLikeError(Exception):
        status_code = 503

    assert retry_on_status_codes(HttpLikeError()) is False


# ============================================================================
# Status codes
# ============================================================================


@pytest.mark.parametrize("status_code", [500, 502, 503, 504])
def test_status_code_condition_retries_configured_codes(status_code):
    error = SdkServiceError("Server error", status_code=status_code)

    assert retry_on_status_codes(error) is True


@pytest.mark.parametrize("status_code", [400, 403, 404, 501])
def test_status_code_condition_rejects_other_codes(status_code):
    error = SdkServiceError("Client error", status_code=status_code)

    assert retry_on_status_codes(error) is False


def test_status_code_condition_alone_retries_unclassified_5xx():
    """A 502 is neither throttling nor clock skew: only the status code condition matches."""
    error = SdkServiceError("Bad Gateway", status_code=502)

    assert retry_on_status_codes(error) is True
    assert retry_on_clock_skew_exception(error) is False
    assert retry_on_throttling_condition(error) is False


# ============================================================================
# Clock skew
# ============================================================================


def test_clock_skew_condition(clock_skew_error):
    assert retry_on_clock_skew_exception(clock_skew_error) is True


@pytest.mark.parametrize("status_code", [200, 400, 403, 500])
def test_clock_skew_condition_independent_of_status_code(status_code):
    error = SdkServiceError("Skewed", status_code=status_code, error_code="RequestExpired")

    assert retry_on_clock_skew_exception(error) is True


def test_clock_skew_condition_rejects_client_errors():
    assert retry_on_clock_skew_exception(SdkClientError("timeout")) is False


# ============================================================================
# Throttling
# ============================================================================


def test_throttling_condition_by_error_code(throttling_error):
    assert retry_on_throttling_condition(throttling_error) is True
    assert treat_as_throttling(throttling_error) is True


def test_throttling_condition_by_status_code(too_many_requests_error):
    assert retry_on_throttling_condition(too_many_requests_error) is True
    assert treat_as_throttling(too_many_requests_error) is True


def test_throttling_classifier_rejects_server_errors(server_error):
    """5xx failures are retried but must not use the throttled delay tier."""
    assert treat_as_throttling(server_error) is False


# ============================================================================
# Generic retryable
# ============================================================================


def test_retryable_condition_for_explicitly_retryable_error():
    assert retry_on_retryable_exception(RetryableError("try again")) is True


def test_retryable_condition_for_io_cause(connection_reset_error):
    assert retry_on_retryable_exception(connection_reset_error) is True


def test_retryable_condition_for_client_error_without_cause():
    assert retry_on_retryable_exception(SdkClientError("bad request body")) is False


def test_retryable_condition_respects_explicit_opt_out(connection_reset_error):
    error = SdkClientError("do not retry", retryable=False)
    error.__cause__ = connection_reset_error.__cause__

    assert retry_on_retryable_exception(error) is False


# ============================================================================
# Composition
# ============================================================================


def test_composed_conditions_reject_unmatched_failure(non_retryable_error):
    assert any_condition(SDK_RETRY_CONDITIONS, non_retryable_error) is False


def test_composed_conditions_short_circuit(server_error):
    """Evaluation stops at the first condition that retries."""
    calls = []

    def first(error):
        calls.append("first")
        return True

    def second(error):
        calls.append("second")
        return True

    assert any_condition((first, second), server_error) is True
    assert calls == ["first"]


def test_sdk_conditions_order():
    assert SDK_RETRY_CONDITIONS == (
        retry_on_retryable_exception,
        retry_on_status_codes,
        retry_on_clock_skew_exception,
        retry_on_throttling_condition,
    )
