"""In-memory collection store.

Holds flashcard sets for the lifetime of the process. Nothing is
written to disk.
"""

import logging

from src.domain.entities.flashcard_set import FlashcardSet

logger = logging.getLogger(__name__)


class InMemoryCollectionStore:
    """CollectionStore implementation backed by a list and an id index."""

    def __init__(self, sets: list[FlashcardSet] | None = None) -> None:
        self._sets: list[FlashcardSet] = []
        self._by_id: dict[str, FlashcardSet] = {}
        for flashcard_set in sets or []:
            self.add_set(flashcard_set)

    def add_set(self, flashcard_set: FlashcardSet) -> None:
        """Append a set. Raises ValueError if its id is already stored."""
        if flashcard_set.id in self._by_id:
            raise ValueError(f"Set {flashcard_set.id} already in collection")
        self._sets.append(flashcard_set)
        self._by_id[flashcard_set.id] = flashcard_set
        logger.debug(f"Stored set {flashcard_set.id} ({len(self._sets)} total)")

    def get_set(self, set_id: str) -> FlashcardSet | None:
        return self._by_id.get(set_id)

    def list_sets(self) -> list[FlashcardSet]:
        return list(self._sets)

    def count(self) -> int:
        return len(self._sets)
