"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings cache isolation between tests
"""

from collections.abc import Generator

import pytest

from src.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes do not leak across tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
