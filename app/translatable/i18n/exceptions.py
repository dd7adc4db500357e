"""Custom exceptions for the translation engine."""


class TranslationError(Exception):
    """Base exception for all translation-related errors.

    Example:
        try:
            entity.get_translation()
        except TranslationError as e:
            logger.error("translation_error", error=str(e))
    """

    pass


class NoLocaleError(TranslationError):
    """Raised when a translation is requested without any usable locale.

    Happens when no locale argument is passed (or it is empty) and the
    entity has no current locale configured.

    Example:
        >>> entity.get_translation()
        Traceback (most recent call last):
        ...
        NoLocaleError: No locale has been set and current locale is undefined.
    """

    def __init__(
        self, message: str = "No locale has been set and current locale is undefined."
    ):
        super().__init__(message)
