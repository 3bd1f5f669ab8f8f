"""Flashcard entity representing a single term/definition pair."""

from dataclasses import dataclass, field
from typing import Self, TypedDict
from uuid import uuid4


class EmptyFieldError(ValueError):
    """Raised when a required text field is the empty string."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} cannot be empty")


class FlashcardDict(TypedDict):
    """Flashcard data structure for serialization."""

    id: str
    term: str
    definition: str


@dataclass(frozen=True)
class Flashcard:
    """Flashcard entity.

    Cards are never edited after creation. Text is stored exactly as
    entered; only the empty string is rejected.

    Attributes:
        term: Front side, shown first
        definition: Back side, shown after a flip
        id: Unique card identifier (UUID v4)
    """

    term: str
    definition: str
    id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def create(cls, term: str, definition: str) -> Self:
        """Create a new flashcard with a fresh id.

        Raises:
            EmptyFieldError: If term or definition is empty
        """
        if not term:
            raise EmptyFieldError("term")
        if not definition:
            raise EmptyFieldError("definition")
        return cls(term=term, definition=definition)

    def to_dict(self) -> FlashcardDict:
        return {"id": self.id, "term": self.term, "definition": self.definition}
