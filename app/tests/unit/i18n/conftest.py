"""Feature-level fixtures for translation engine tests."""

import pytest

from tests.factories.i18n import ArticleTranslation, make_article, make_settings


@pytest.fixture
def article():
    """Article without translations or locale configuration."""
    return make_article()


@pytest.fixture
def en_fr_article():
    """Article with "en" and "fr" translations and "en" as fallback."""
    return make_article(locales=["en", "fr"], fallback_locale="en")


@pytest.fixture
def translation_factory():
    """Callable building fresh translations, as a resolver factory."""
    created = []

    def _factory():
        translation = ArticleTranslation()
        created.append(translation)
        return translation

    _factory.created = created
    return _factory


@pytest.fixture
def settings():
    """Settings with a default locale and a secondary fallback chain."""
    return make_settings(
        default_locale="en",
        fallback_locales=["de"],
        supported_locales=["en-US", "fr-FR", "de"],
    )


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "*,es;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
    }
