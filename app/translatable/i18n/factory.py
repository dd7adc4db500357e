"""Factory functions for creating i18n components.

Provides convenience functions for building locale detection and assignment
components from application settings.
"""

from typing import Optional

from translatable.configuration import Settings, get_settings
from translatable.i18n.assigner import LocaleAssigner
from translatable.i18n.locale import LocaleResolver
from translatable.logging import get_module_logger

logger = get_module_logger()


def create_locale_resolver(settings: Optional[Settings] = None) -> LocaleResolver:
    """Create a LocaleResolver from translation settings.

    Args:
        settings: Settings instance (default: get_settings()).

    Returns:
        LocaleResolver: Resolver using the configured default and supported locales.
    """
    settings = settings or get_settings()
    resolver = LocaleResolver(
        default_locale=settings.translation.default_locale,
        supported_locales=settings.translation.supported_locales,
    )
    logger.info(
        "locale_resolver_created",
        default_locale=resolver.default_locale,
        supported_locale_count=len(resolver.supported_locales),
    )
    return resolver


def create_locale_assigner(settings: Optional[Settings] = None) -> LocaleAssigner:
    """Create a LocaleAssigner from translation settings.

    The default locale doubles as the primary fallback locale; the configured
    fallback list becomes the secondary chain.

    Args:
        settings: Settings instance (default: get_settings()).

    Returns:
        LocaleAssigner: Assigner ready to be hooked into entity lifecycle events.

    Usage:
        assigner = create_locale_assigner()

        # In the ORM's post-load hook
        assigner.post_load(entity, accept_language="fr-FR,fr;q=0.9")
    """
    settings = settings or get_settings()
    return LocaleAssigner(
        locale_resolver=create_locale_resolver(settings),
        fallback_locale=settings.translation.default_locale,
        fallback_locales=settings.translation.fallback_locales,
    )
