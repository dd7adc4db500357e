"""Locale assignment for translatable entities on lifecycle events.

A host ORM calls `post_load` after hydrating an entity and `pre_persist`
before storing a new one. Both give the entity the current locale and the
configured fallback chain so later `get_translation()` calls work without
an explicit locale.
"""

from typing import Any, List, Optional

from translatable.i18n.locale import LocaleResolver
from translatable.i18n.types import TranslatableEntity
from translatable.logging import get_module_logger

logger = get_module_logger()


class LocaleAssigner:
    """Applies current and fallback locales to translatable entities.

    Attributes:
        locale_resolver: Detects the current locale.
        fallback_locale: Primary fallback locale assigned to entities.
        fallback_locales: Secondary fallback locales, assigned when set.
    """

    def __init__(
        self,
        locale_resolver: LocaleResolver,
        fallback_locale: Optional[str] = None,
        fallback_locales: Optional[List[str]] = None,
    ):
        self.locale_resolver = locale_resolver
        self.fallback_locale = (
            fallback_locale
            if fallback_locale is not None
            else locale_resolver.default_locale
        )
        self.fallback_locales = list(fallback_locales) if fallback_locales else None

    def assign(
        self,
        entity: Any,
        requested_locale: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> bool:
        """Assign locales to `entity` if it is translatable.

        Args:
            entity: Any object; non-translatable objects are left untouched.
            requested_locale: Explicitly requested locale, if any.
            accept_language: Accept-Language header value, if any.

        Returns:
            True if locales were assigned, False if `entity` is not translatable.
        """
        if not isinstance(entity, TranslatableEntity):
            return False

        current_locale = self.locale_resolver.resolve_current_locale(
            requested_locale=requested_locale,
            accept_language=accept_language,
        )
        entity.set_current_locale(current_locale)
        entity.set_fallback_locale(self.fallback_locale)
        if self.fallback_locales:
            entity.set_fallback_locales(list(self.fallback_locales))

        logger.debug(
            "locale_assigned",
            entity_type=type(entity).__name__,
            current_locale=current_locale,
            fallback_locale=self.fallback_locale,
        )
        return True

    def post_load(
        self,
        entity: Any,
        requested_locale: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> bool:
        """Hook for entities hydrated from storage."""
        return self.assign(entity, requested_locale, accept_language)

    def pre_persist(
        self,
        entity: Any,
        requested_locale: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> bool:
        """Hook for entities about to be stored for the first time."""
        return self.assign(entity, requested_locale, accept_language)
