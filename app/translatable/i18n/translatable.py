"""Base class for entities owning locale-keyed translations.

Entities compose a TranslationResolver instead of inheriting its logic: the
base class only builds the resolver and forwards calls to it. Hosts that
cannot inherit can satisfy `TranslatableEntity` by composing a resolver
themselves.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from translatable.i18n.collection import TranslationCollection
from translatable.i18n.resolver import TranslationResolver
from translatable.i18n.types import Translation


class AbstractTranslatable(ABC):
    """Entity with translations resolved by locale.

    Subclasses implement `create_translation()` to build an empty record of
    their translation type.

    Example:
        class Article(AbstractTranslatable):
            def create_translation(self):
                return ArticleTranslation()

        article = Article()
        article.set_current_locale("en")
        article.get_translation().title = "Hello"
    """

    def __init__(self, translations: Optional[Iterable[Translation]] = None):
        """Initialize the entity.

        Args:
            translations: Existing records, e.g. hydrated from storage. They
                are attached with this entity as owner.
        """
        self._translation_resolver = TranslationResolver(
            owner=self,
            factory=self.create_translation,
            collection=TranslationCollection(),
        )
        for translation in translations or []:
            self._translation_resolver.add_translation(translation)

    @abstractmethod
    def create_translation(self) -> Translation:
        """Create a new, locale-unset translation record."""

    @property
    def translation_resolver(self) -> TranslationResolver:
        return self._translation_resolver

    @property
    def current_locale(self) -> Optional[str]:
        return self._translation_resolver.current_locale

    @property
    def fallback_locale(self) -> Optional[str]:
        return self._translation_resolver.fallback_locale

    @property
    def fallback_locales(self) -> Optional[List[str]]:
        return self._translation_resolver.fallback_locales

    def get_translation(self, locale: Optional[str] = None) -> Translation:
        return self._translation_resolver.resolve(locale)

    def get_translation_locales(self) -> List[str]:
        return self._translation_resolver.list_locales()

    def get_translations(self) -> TranslationCollection:
        return self._translation_resolver.translations

    def has_translation(self, translation: Translation) -> bool:
        return self._translation_resolver.has_translation(translation)

    def add_translation(self, translation: Translation) -> None:
        self._translation_resolver.add_translation(translation)

    def remove_translation(self, translation: Translation) -> None:
        self._translation_resolver.remove_translation(translation)

    def remove_translation_with_locale(self, locale: str) -> None:
        self._translation_resolver.remove_translation_with_locale(locale)

    def set_current_locale(self, current_locale: Optional[str]) -> None:
        self._translation_resolver.set_current_locale(current_locale)

    def set_fallback_locale(self, fallback_locale: Optional[str]) -> None:
        self._translation_resolver.set_fallback_locale(fallback_locale)

    def set_fallback_locales(self, fallback_locales: Optional[List[str]]) -> None:
        self._translation_resolver.set_fallback_locales(fallback_locales)
