"""Test data factories for translation engine testing.

Provides deterministic test data builders for:
- A concrete translatable entity (Article) and its translation record
- Pre-populated entities with translations in given locales
- Translation settings
"""

from typing import Dict, Iterable, List, Optional

from translatable.configuration import Settings, TranslationSettings
from translatable.i18n import AbstractTranslatable, AbstractTranslation


class ArticleTranslation(AbstractTranslation):
    """Translation record carrying a localized title."""

    def __init__(self, locale: Optional[str] = None, title: str = ""):
        super().__init__(locale=locale)
        self.title = title


class Article(AbstractTranslatable):
    """Translatable entity used across tests.

    Counts factory calls so tests can assert how many records were created.
    """

    def __init__(self, translations=None):
        self.created_count = 0
        super().__init__(translations=translations)

    def create_translation(self) -> ArticleTranslation:
        self.created_count += 1
        return ArticleTranslation()


def make_translation(locale: str = "en", title: Optional[str] = None) -> ArticleTranslation:
    """Create an ArticleTranslation instance.

    Args:
        locale: Locale tag of the record.
        title: Localized title (default: "Title <locale>").

    Returns:
        ArticleTranslation instance, not attached to any entity.
    """
    return ArticleTranslation(locale=locale, title=title or f"Title {locale}")


def make_article(
    locales: Iterable[str] = (),
    current_locale: Optional[str] = None,
    fallback_locale: Optional[str] = None,
    fallback_locales: Optional[List[str]] = None,
) -> Article:
    """Create an Article with one translation per locale.

    Args:
        locales: Locales to pre-populate, in insertion order.
        current_locale: Current locale to configure.
        fallback_locale: Primary fallback locale to configure.
        fallback_locales: Secondary fallback locales to configure.

    Returns:
        Article instance.
    """
    article = Article(translations=[make_translation(locale) for locale in locales])
    article.set_current_locale(current_locale)
    article.set_fallback_locale(fallback_locale)
    article.set_fallback_locales(fallback_locales)
    return article


def translations_by_locale(article: Article) -> Dict[str, ArticleTranslation]:
    """Map each locale of `article` to its translation record."""
    return {translation.locale: translation for translation in article.get_translations()}


def make_settings(
    default_locale: str = "en",
    fallback_locales: Optional[List[str]] = None,
    supported_locales: Optional[List[str]] = None,
    prefix: str = "test",
) -> Settings:
    """Create a Settings instance with explicit translation settings.

    Args:
        default_locale: Default and primary fallback locale.
        fallback_locales: Secondary fallback locales.
        supported_locales: Locales accepted from Accept-Language.
        prefix: Environment prefix (non-empty means non-production).

    Returns:
        Settings instance.
    """
    translation = TranslationSettings(
        default_locale=default_locale,
        fallback_locales=fallback_locales or [],
        supported_locales=supported_locales or [],
    )
    return Settings(PREFIX=prefix, translation=translation)
