"""Unit test fixtures (recording builders and spies).

Provides builders for testing the configuration routines without depending
on a concrete strategy variant.
"""

from unittest.mock import MagicMock

import pytest

from sdk_retry.strategies.standard import StandardRetryStrategyBuilder


class RecordingBuilder:
    """
    Minimal builder satisfying only the builder capability.

    Not defaults-aware: it has no mark_default_added/should_add_defaults.
    Records every registration, duplicates included.
    """

    def __init__(self) -> None:
        self.conditions = []
        self.exception_types = []
        self.cause_exception_types = []
        self.throttling_conditions = []
        self.max_attempts_values = []

    def retry_on_exception(self, predicate):
        self.conditions.append(predicate)
        return self

    def retry_on_exception_instance_of(self, exception_type):
        self.exception_types.append(exception_type)
        return self

    def retry_on_exception_or_cause_instance_of(self, exception_type):
        self.cause_exception_types.append(exception_type)
        return self

    def treat_as_throttling(self, predicate):
        self.throttling_conditions.append(predicate)
        return self

    def max_attempts(self, max_attempts):
        self.max_attempts_values.append(max_attempts)
        return self

    def build(self):
        raise NotImplementedError("RecordingBuilder does not build strategies")


@pytest.fixture
def recording_builder() -> RecordingBuilder:
    return RecordingBuilder()


@pytest.fixture
def mock_builder():
    """Spy builder specced on a defaults-aware builder; chaining returns itself."""
    mock = MagicMock(spec=StandardRetryStrategyBuilder)
    mock.retry_on_exception.return_value = mock
    mock.retry_on_exception_or_cause_instance_of.return_value = mock
    mock.treat_as_throttling.return_value = mock
    mock.max_attempts.return_value = mock
    mock.should_add_defaults.return_value = True
    return mock
