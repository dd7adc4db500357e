"""Shared fixtures for the whole test suite."""

import pytest

from translatable.configuration import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop the cached Settings so environment changes never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
