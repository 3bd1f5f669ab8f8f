"""Flashcards backend - in-memory flashcard sets with a card browser."""

__version__ = "0.1.0"
