"""Authoritative locale-keyed collection of translations."""

from typing import Callable, Dict, Iterable, Iterator, List, Optional

from translatable.i18n.types import Translation


class TranslationCollection:
    """Insertion-ordered mapping of locale to translation record.

    This is the source of truth an entity persists. Records are keyed by
    their locale when inserted; removal is by identity, so a different
    instance carrying the same locale is never removed by accident.

    Attributes:
        elements: Underlying ordered dict (locale -> translation).
    """

    def __init__(self, translations: Optional[Iterable[Translation]] = None):
        """Initialize the collection.

        Args:
            translations: Records already carrying a locale, e.g. hydrated
                from storage. Each is keyed by its own locale.
        """
        self.elements: Dict[str, Translation] = {}
        for translation in translations or []:
            self.set(translation.locale, translation)

    def set(self, key: str, translation: Translation) -> None:
        """Insert `translation` under `key`, replacing any existing entry."""
        self.elements[key] = translation

    def get(self, key: str) -> Optional[Translation]:
        return self.elements.get(key)

    def contains_key(self, key: Optional[str]) -> bool:
        return key in self.elements

    def remove_element(self, translation: Translation) -> bool:
        """Remove `translation` by identity.

        Returns:
            True if the exact instance was found and removed.
        """
        for key, element in self.elements.items():
            if element is translation:
                del self.elements[key]
                return True
        return False

    def matching(self, predicate: Callable[[Translation], bool]) -> List[Translation]:
        """Return every record satisfying `predicate`, in collection order."""
        return [element for element in self.elements.values() if predicate(element)]

    def first_matching(
        self, predicate: Callable[[Translation], bool]
    ) -> Optional[Translation]:
        """Return the first record satisfying `predicate`, or None."""
        for element in self.elements.values():
            if predicate(element):
                return element
        return None

    def keys(self) -> List[str]:
        return list(self.elements.keys())

    def values(self) -> List[Translation]:
        return list(self.elements.values())

    def __contains__(self, key: object) -> bool:
        return key in self.elements

    def __iter__(self) -> Iterator[Translation]:
        return iter(list(self.elements.values()))

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"TranslationCollection({self.keys()!r})"
