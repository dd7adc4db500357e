"""Translation engine settings."""

from typing import List

from pydantic import Field

from translatable.configuration.base import InfrastructureSettings


class TranslationSettings(InfrastructureSettings):
    """Locale configuration applied to translatable entities.

    Environment Variables:
        TRANSLATION_DEFAULT_LOCALE: Locale used when a request carries no
            preference; also assigned as the primary fallback locale
            (default: "en")
        TRANSLATION_FALLBACK_LOCALES: JSON list of secondary fallback locales
            tried in order after the primary one (default: [])
        TRANSLATION_SUPPORTED_LOCALES: JSON list of locales accepted from an
            Accept-Language header; empty means any tag is accepted (default: [])

    Example:
        ```python
        from translatable.configuration.providers import get_settings

        settings = get_settings()

        default_locale = settings.translation.default_locale
        # Assign to entities on load...
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="TRANSLATION_DEFAULT_LOCALE",
        description="Default locale and primary fallback locale",
    )
    fallback_locales: List[str] = Field(
        default_factory=list,
        alias="TRANSLATION_FALLBACK_LOCALES",
        description="Secondary fallback locales, tried in order",
    )
    supported_locales: List[str] = Field(
        default_factory=list,
        alias="TRANSLATION_SUPPORTED_LOCALES",
        description="Locales accepted from Accept-Language (empty: any)",
    )
