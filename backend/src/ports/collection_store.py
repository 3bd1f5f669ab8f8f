"""Port interface for the flashcard set collection."""

from typing import Protocol, runtime_checkable

from src.domain.entities.flashcard_set import FlashcardSet


@runtime_checkable
class CollectionStore(Protocol):
    """Port for the ordered collection of flashcard sets.

    Sets are returned by reference: cards appended to a set obtained
    from the store are visible through the store. Adding a set is the
    only mutation; there is no delete.
    """

    def add_set(self, flashcard_set: FlashcardSet) -> None:
        """Append a set at the end of the collection.

        Args:
            flashcard_set: Newly created set
        """
        ...

    def get_set(self, set_id: str) -> FlashcardSet | None:
        """Look up a set by id.

        Args:
            set_id: Id of the set

        Returns:
            The set, or None if no set has that id
        """
        ...

    def list_sets(self) -> list[FlashcardSet]:
        """Get all sets in insertion order.

        Returns:
            New list holding the stored sets
        """
        ...

    def count(self) -> int:
        """Get the number of sets."""
        ...
