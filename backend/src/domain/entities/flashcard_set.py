"""Flashcard set entity - a named, ordered collection of flashcards."""

from dataclasses import dataclass, field
from typing import Self, TypedDict
from uuid import uuid4

from src.domain.entities.flashcard import EmptyFieldError, Flashcard, FlashcardDict


class FlashcardSetDict(TypedDict):
    """Flashcard set data structure for serialization."""

    id: str
    name: str
    cards: list[FlashcardDict]


@dataclass
class FlashcardSet:
    """Flashcard set entity.

    The card list is append-only: cards are never reordered or removed,
    and the set is never renamed. Insertion order is browse order.

    Attributes:
        name: Display name in the set list
        cards: Cards in the order they were added
        id: Unique set identifier (UUID v4)
    """

    name: str
    cards: list[Flashcard] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def create(cls, name: str) -> Self:
        """Create a new empty set.

        Raises:
            EmptyFieldError: If name is empty
        """
        if not name:
            raise EmptyFieldError("name")
        return cls(name=name)

    @property
    def card_count(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if the set has no cards yet."""
        return not self.cards

    def append_card(self, card: Flashcard) -> None:
        """Add a card at the end of the set."""
        self.cards.append(card)

    def card_at(self, index: int) -> Flashcard | None:
        """Get the card at a browse position, or None if out of range."""
        if 0 <= index < len(self.cards):
            return self.cards[index]
        return None

    def to_dict(self) -> FlashcardSetDict:
        return {
            "id": self.id,
            "name": self.name,
            "cards": [card.to_dict() for card in self.cards],
        }
