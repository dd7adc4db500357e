"""Translation models for the i18n engine.

Defines the locale configuration held by each resolver and the base class
for translation records.
"""

import weakref
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class LocaleConfiguration(BaseModel):
    """Locale settings of one translatable entity.

    Values are stored as given; `None` clears a setting. These are runtime
    settings, never part of persisted translation data.

    Attributes:
        current_locale: Locale used when none is passed to a lookup.
        fallback_locale: Primary fallback locale.
        fallback_locales: Secondary fallback locales, tried in order.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        from_attributes=True,
    )

    current_locale: Optional[str] = None
    fallback_locale: Optional[str] = None
    fallback_locales: Optional[List[str]] = None

    def fallback_chain(self, locale: str) -> List[str]:
        """Return the fallback locales to try for `locale`, in order.

        The primary fallback comes first, then the secondary list. Empty
        entries and entries equal to `locale` are skipped. Duplicates are
        kept; a repeated locale simply misses again.

        Args:
            locale: Effective locale of the lookup.

        Returns:
            Ordered list of locales to try after `locale` itself.
        """
        candidates = [self.fallback_locale, *(self.fallback_locales or [])]
        return [
            fallback_locale
            for fallback_locale in candidates
            if fallback_locale and fallback_locale != locale
        ]


class AbstractTranslation:
    """Base class for translation records.

    Subclasses add the localized payload fields. The owner back-reference is
    held weakly: a translation never keeps its entity alive.

    Attributes:
        locale: Locale tag of this record, None until assigned.
    """

    def __init__(self, locale: Optional[str] = None):
        self.locale: Optional[str] = locale
        self._translatable_ref: Optional[weakref.ref] = None

    @property
    def translatable(self) -> Optional[Any]:
        """Owning entity, or None when detached or garbage collected."""
        if self._translatable_ref is None:
            return None
        return self._translatable_ref()

    def set_translatable(self, translatable: Optional[Any]) -> None:
        """Attach this record to `translatable`, or detach it with None."""
        if translatable is None:
            self._translatable_ref = None
        else:
            self._translatable_ref = weakref.ref(translatable)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self.locale!r})"
