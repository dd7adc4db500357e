"""Translation resolution with caching and locale fallback.

Resolves a requested locale to exactly one translation record of an entity.
Lookup order, first hit wins:

1. Cache hit on the effective locale
2. Scan of the authoritative collection (result is cached)
3. Primary fallback locale (cache, then scan)
4. Secondary fallback locales in order (cache, then scan)
5. Create a new record for the effective locale and attach it

Fallback hits are cached under the fallback locale only, never under the
requested one, so a later lookup of the same locale walks the chain again.
"""

import weakref
from typing import Any, Dict, List, Optional

from translatable.i18n.collection import TranslationCollection
from translatable.i18n.exceptions import NoLocaleError
from translatable.i18n.models import LocaleConfiguration
from translatable.i18n.types import Translation, TranslationFactory
from translatable.logging import get_module_logger

logger = get_module_logger()


class TranslationResolver:
    """Resolves, caches, attaches and detaches translations of one entity.

    Not thread-safe: one resolver belongs to one entity instance, and callers
    sharing an entity across threads must synchronize externally.

    Attributes:
        config: LocaleConfiguration with current and fallback locales.
    """

    def __init__(
        self,
        owner: Any,
        factory: TranslationFactory,
        collection: Optional[TranslationCollection] = None,
        current_locale: Optional[str] = None,
        fallback_locale: Optional[str] = None,
        fallback_locales: Optional[List[str]] = None,
    ):
        """Initialize the resolver.

        Args:
            owner: Entity that owns the translations. Held weakly.
            factory: Callable returning a new, locale-unset, unattached record.
            collection: Authoritative collection (default: empty).
            current_locale: Locale used when a lookup passes none.
            fallback_locale: Primary fallback locale.
            fallback_locales: Secondary fallback locales, tried in order.
        """
        self._owner_ref = weakref.ref(owner)
        self._factory = factory
        self._translations = (
            collection if collection is not None else TranslationCollection()
        )
        self._cache: Dict[str, Translation] = {}
        self.config = LocaleConfiguration(
            current_locale=current_locale,
            fallback_locale=fallback_locale,
            fallback_locales=fallback_locales,
        )

    @property
    def owner(self) -> Optional[Any]:
        return self._owner_ref()

    @property
    def translations(self) -> TranslationCollection:
        """Authoritative collection. Mutate it only through this resolver."""
        return self._translations

    @property
    def cached_locales(self) -> List[str]:
        """Locales currently memoized, in caching order."""
        return list(self._cache)

    @property
    def current_locale(self) -> Optional[str]:
        return self.config.current_locale

    @property
    def fallback_locale(self) -> Optional[str]:
        return self.config.fallback_locale

    @property
    def fallback_locales(self) -> Optional[List[str]]:
        return self.config.fallback_locales

    def resolve(self, locale: Optional[str] = None) -> Translation:
        """Return the translation for `locale`, creating it if needed.

        Args:
            locale: Requested locale. Empty or None means the current locale.

        Returns:
            Matching record, a fallback record, or a newly attached record
            for the effective locale.

        Raises:
            NoLocaleError: If neither `locale` nor the current locale is set.
        """
        effective_locale = locale or self.config.current_locale
        if not effective_locale:
            logger.warning("translation_locale_undefined")
            raise NoLocaleError()

        translation = self._find(effective_locale)
        if translation is not None:
            return translation

        for fallback_locale in self.config.fallback_chain(effective_locale):
            translation = self._find(fallback_locale)
            if translation is not None:
                logger.debug(
                    "used_fallback_translation",
                    requested_locale=effective_locale,
                    fallback_locale=fallback_locale,
                )
                return translation

        translation = self._factory()
        translation.locale = effective_locale
        self.add_translation(translation)
        # Cached explicitly: add_translation is a no-op if the key is taken
        self._cache[effective_locale] = translation
        logger.info("translation_created", locale=effective_locale)

        return translation

    get_translation = resolve

    def _find(self, locale: str) -> Optional[Translation]:
        """Cache lookup, then collection scan. Caches a scan hit."""
        cached = self._cache.get(locale)
        if cached is not None:
            return cached

        translation = self._translations.first_matching(
            lambda element: element.locale == locale
        )
        if translation is not None:
            self._cache[locale] = translation
        return translation

    def list_locales(self) -> List[str]:
        """Return the locale of every record, in collection order."""
        return [translation.locale for translation in self._translations]

    get_translation_locales = list_locales

    def has_translation(self, translation: Translation) -> bool:
        """Check whether a record with the same locale is known.

        Compares by locale key, not identity: two instances sharing a locale
        are indistinguishable here.
        """
        locale = translation.locale
        return locale in self._cache or self._translations.contains_key(locale)

    def add_translation(self, translation: Translation) -> None:
        """Attach `translation` unless its locale is already taken."""
        if self.has_translation(translation):
            return

        self._cache[translation.locale] = translation
        self._translations.set(translation.locale, translation)
        translation.set_translatable(self.owner)

    def remove_translation(self, translation: Translation) -> None:
        """Detach `translation` if this exact instance is in the collection.

        The cache entry at the record's locale is evicted even when it maps
        to a different instance.
        """
        if not self._translations.remove_element(translation):
            return

        self._cache.pop(translation.locale, None)
        translation.set_translatable(None)
        logger.info("translation_removed", locale=translation.locale)

    def remove_translation_with_locale(self, locale: str) -> None:
        """Detach every record whose locale equals `locale`."""
        for translation in self._translations.matching(
            lambda element: element.locale == locale
        ):
            self.remove_translation(translation)

    def set_current_locale(self, current_locale: Optional[str]) -> None:
        self.config.current_locale = current_locale

    def set_fallback_locale(self, fallback_locale: Optional[str]) -> None:
        self.config.fallback_locale = fallback_locale

    def set_fallback_locales(self, fallback_locales: Optional[List[str]]) -> None:
        self.config.fallback_locales = fallback_locales
