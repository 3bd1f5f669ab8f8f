"""Domain entities - objects with identity."""

from .flashcard import EmptyFieldError, Flashcard, FlashcardDict
from .flashcard_set import FlashcardSet, FlashcardSetDict

__all__ = ["EmptyFieldError", "Flashcard", "FlashcardDict", "FlashcardSet", "FlashcardSetDict"]
