"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    Article,
    ArticleTranslation,
    make_article,
    make_settings,
    make_translation,
    translations_by_locale,
)

__all__ = [
    "Article",
    "ArticleTranslation",
    "make_article",
    "make_settings",
    "make_translation",
    "translations_by_locale",
]
