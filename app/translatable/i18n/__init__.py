"""i18n engine - locale-keyed translations of persisted entities.

Resolves a requested locale to one translation record of an entity, with
caching, a fallback chain and creation on demand.

Main components:
- resolver: TranslationResolver, the resolution and caching engine
- translatable: AbstractTranslatable entity base class
- models: AbstractTranslation record base class, LocaleConfiguration
- collection: TranslationCollection, the authoritative store
- locale: LocaleResolver and LanguageNegotiator for current locale detection
- assigner: LocaleAssigner for entity load/persist hooks
"""

from translatable.i18n.assigner import LocaleAssigner
from translatable.i18n.collection import TranslationCollection
from translatable.i18n.exceptions import NoLocaleError, TranslationError
from translatable.i18n.factory import create_locale_assigner, create_locale_resolver
from translatable.i18n.locale import LanguageNegotiator, LocaleResolver
from translatable.i18n.models import AbstractTranslation, LocaleConfiguration
from translatable.i18n.resolver import TranslationResolver
from translatable.i18n.translatable import AbstractTranslatable
from translatable.i18n.types import TranslatableEntity, Translation, TranslationFactory

__all__ = [
    "AbstractTranslatable",
    "AbstractTranslation",
    "LanguageNegotiator",
    "LocaleAssigner",
    "LocaleConfiguration",
    "LocaleResolver",
    "NoLocaleError",
    "TranslatableEntity",
    "Translation",
    "TranslationCollection",
    "TranslationError",
    "TranslationFactory",
    "TranslationResolver",
    "create_locale_assigner",
    "create_locale_resolver",
]
