"""Current locale detection for translatable entities.

Determines which locale an entity should resolve translations in, from an
explicitly requested locale, an Accept-Language header value, or the
configured default. Inputs are plain strings; no request objects involved.
"""

from typing import List, Optional, Tuple

from translatable.logging import get_module_logger

logger = get_module_logger().bind(component="i18n.locale")


class LocaleResolver:
    """Resolves the current locale from various context sources.

    Fallback chain:
    1. Explicitly requested locale (e.g. a `locale` query parameter)
    2. Accept-Language header preference
    3. Default locale
    """

    def __init__(
        self,
        default_locale: str = "en",
        supported_locales: Optional[List[str]] = None,
    ):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference found.
            supported_locales: Locales accepted from the header. None or
                empty accepts any tag.
        """
        self.default_locale = default_locale
        self.supported_locales = list(supported_locales or [])
        self.log = logger.bind(default_locale=default_locale)

    @staticmethod
    def parse_accept_language(accept_language: str) -> List[Tuple[str, float]]:
        """Parse an Accept-Language value into tags ordered by quality.

        "en-US,en;q=0.9,fr;q=0.8" -> [("en-US", 1.0), ("en", 0.9), ("fr", 0.8)]

        Malformed quality values count as 1.0. Empty ranges are dropped.
        Ties keep header order.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            List of (language range, quality) sorted by quality, descending.
        """
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range:
                continue

            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        return sorted(preferences, key=lambda x: x[1], reverse=True)

    def resolve_from_header(self, accept_language: Optional[str]) -> str:
        """Resolve locale from an Accept-Language header value.

        With supported locales configured, returns the first supported match
        in preference order (exact first, then language-only). Otherwise
        returns the most preferred concrete tag. Wildcards and zero-quality
        ranges never match.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved locale, or the default if none match.
        """
        if not accept_language:
            return self.default_locale

        for lang_range, quality in self.parse_accept_language(accept_language):
            if lang_range == "*" or quality <= 0:
                continue

            if not self.supported_locales:
                self.log.debug("resolved_from_header", locale=lang_range)
                return lang_range

            match = LanguageNegotiator.find_best_match(
                [lang_range], self.supported_locales
            )
            if match:
                self.log.debug("resolved_from_header", locale=match)
                return match

        self.log.debug("no_matching_locale_in_header")
        return self.default_locale

    def resolve_current_locale(
        self,
        requested_locale: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> str:
        """Resolve the locale translations should be read in.

        Args:
            requested_locale: Explicitly requested locale; wins when non-empty.
            accept_language: Accept-Language header value.

        Returns:
            Resolved locale.
        """
        if requested_locale:
            return requested_locale

        return self.resolve_from_header(accept_language)


class LanguageNegotiator:
    """Performs language negotiation between locale tags.

    Handles the case where a user requests "pt-BR" but only "pt" is
    available, and the reverse.
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        # Tags may use "-" or "_" as separator ("en-US", "en_US")
        requested_lang = requested.replace("_", "-").split("-")[0].lower()
        available_lang = available.replace("_", "-").split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: List[str],
        available: List[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: List of requested language tags in preference order.
            available: List of available language tags.
            default: Default if no match found.

        Returns:
            Best matching language from available, or default if no match.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default
