"""Pytest fixtures for the CheatHub test suite."""

import pytest

from cheathub.models import AppConfig

from helpers import BASE_URL


@pytest.fixture
def fast_config() -> AppConfig:
    """Configuration with short timers so expiry can be observed quickly."""
    return AppConfig(
        api_base_url=BASE_URL,
        notification_timeout=0.2,
        copy_feedback_delay=0.1,
    )
