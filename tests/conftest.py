"""Pytest configuration and fixtures."""

import pytest

from bank_account.notifications import RecordingNotificationSink
from bank_account.rates import FixedRateProvider


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_account_id() -> str:
    """Sample account ID."""
    return "acct-test-001"


@pytest.fixture
def fixed_rates() -> FixedRateProvider:
    """Rate provider with 1 EUR = 5.0 RON."""
    return FixedRateProvider("5.0")


@pytest.fixture
def recorder() -> RecordingNotificationSink:
    """Notification sink that records every call."""
    return RecordingNotificationSink()
