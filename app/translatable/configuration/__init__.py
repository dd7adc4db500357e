"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Locale defaults and fallback chain settings
    get_settings: Cached settings singleton

Example:
    ```python
    from translatable.configuration import get_settings

    settings = get_settings()
    fallback_locales = settings.translation.fallback_locales
    ```
"""

from translatable.configuration.providers import get_settings
from translatable.configuration.settings import Settings
from translatable.configuration.translation import TranslationSettings

__all__ = ["Settings", "TranslationSettings", "get_settings"]
