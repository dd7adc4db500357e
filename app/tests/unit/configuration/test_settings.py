"""Unit tests for translatable.configuration module.

Tests cover:
- TranslationSettings validation and defaults
- Settings class initialization
- get_settings singleton
"""

import pytest

from translatable.configuration import Settings, TranslationSettings, get_settings
from translatable.configuration.base import InfrastructureSettings


@pytest.fixture(autouse=True)
def clean_translation_env(monkeypatch):
    """Remove translation variables that could leak in from the host."""
    for name in (
        "TRANSLATION_DEFAULT_LOCALE",
        "TRANSLATION_FALLBACK_LOCALES",
        "TRANSLATION_SUPPORTED_LOCALES",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestTranslationSettings:
    """Test suite for TranslationSettings configuration."""

    def test_translation_settings_defaults(self):
        """Test TranslationSettings uses correct default values."""
        translation = TranslationSettings()

        assert translation.default_locale == "en"
        assert translation.fallback_locales == []
        assert translation.supported_locales == []

    def test_translation_settings_custom_values(self, monkeypatch):
        """Test TranslationSettings reads the environment."""
        monkeypatch.setenv("TRANSLATION_DEFAULT_LOCALE", "fr")
        monkeypatch.setenv("TRANSLATION_FALLBACK_LOCALES", '["en", "de"]')
        monkeypatch.setenv("TRANSLATION_SUPPORTED_LOCALES", '["fr", "en", "de"]')

        translation = TranslationSettings()

        assert translation.default_locale == "fr"
        assert translation.fallback_locales == ["en", "de"]
        assert translation.supported_locales == ["fr", "en", "de"]

    def test_translation_settings_by_field_name(self):
        """Test TranslationSettings accepts field names as well as aliases."""
        translation = TranslationSettings(default_locale="de", fallback_locales=["en"])

        assert translation.default_locale == "de"
        assert translation.fallback_locales == ["en"]

    def test_translation_settings_is_infrastructure_settings(self):
        """Test TranslationSettings shares the base configuration."""
        assert issubclass(TranslationSettings, InfrastructureSettings)


class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_builds_translation_section(self):
        """Test Settings instantiates subsettings automatically."""
        settings = Settings()

        assert isinstance(settings.translation, TranslationSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_accepts_section_override(self):
        """Test an explicit section replaces the default one."""
        translation = TranslationSettings(default_locale="it")

        settings = Settings(translation=translation)

        assert settings.translation.default_locale == "it"

    def test_is_production_without_prefix(self):
        """Test an empty PREFIX means production."""
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        """Test a PREFIX means a non-production environment."""
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        """Test get_settings returns a singleton."""
        get_settings.cache_clear()

        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
