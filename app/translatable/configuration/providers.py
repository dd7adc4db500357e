"""
Factory functions for dependency injection.

Provides the application-scoped settings singleton.
"""

from functools import lru_cache

from translatable.configuration.settings import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment call `get_settings.cache_clear()`.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
