"""Protocol contracts for translations and translatable entities.

These are NOT Pydantic models and do NOT provide runtime validation beyond
`isinstance` checks on runtime-checkable protocols. Host entity types can
satisfy them without inheriting from the base classes in `models` and
`translatable`.
"""

from typing import Any, Callable, Iterable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Translation(Protocol):
    """Protocol for a localized record owned by a translatable entity.

    The engine only reads and writes `locale` and the owner back-reference;
    everything else on the record is opaque payload.
    """

    locale: Optional[str]

    @property
    def translatable(self) -> Optional[Any]:  # pragma: no cover - typing helper
        ...

    def set_translatable(
        self, translatable: Optional[Any]
    ) -> None:  # pragma: no cover - typing helper
        ...


TranslationFactory = Callable[[], Translation]


@runtime_checkable
class TranslatableEntity(Protocol):
    """Protocol for entities owning locale-keyed translations."""

    def get_translation(
        self, locale: Optional[str] = None
    ) -> Translation:  # pragma: no cover - typing helper
        ...

    def get_translation_locales(self) -> List[str]:  # pragma: no cover
        ...

    def get_translations(self) -> Iterable[Translation]:  # pragma: no cover
        ...

    def has_translation(self, translation: Translation) -> bool:  # pragma: no cover
        ...

    def add_translation(self, translation: Translation) -> None:  # pragma: no cover
        ...

    def remove_translation(
        self, translation: Translation
    ) -> None:  # pragma: no cover
        ...

    def set_current_locale(
        self, current_locale: Optional[str]
    ) -> None:  # pragma: no cover
        ...

    def set_fallback_locale(
        self, fallback_locale: Optional[str]
    ) -> None:  # pragma: no cover
        ...

    def set_fallback_locales(
        self, fallback_locales: Optional[List[str]]
    ) -> None:  # pragma: no cover
        ...
