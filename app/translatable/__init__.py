"""Locale-based translation resolution for translatable entities."""

from translatable.i18n import (
    AbstractTranslatable,
    AbstractTranslation,
    NoLocaleError,
    TranslationCollection,
    TranslationResolver,
)

__all__ = [
    "AbstractTranslatable",
    "AbstractTranslation",
    "NoLocaleError",
    "TranslationCollection",
    "TranslationResolver",
]
