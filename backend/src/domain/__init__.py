# Domain layer - Business logic (NO external dependencies)

from .entities import EmptyFieldError, Flashcard, FlashcardSet
from .value_objects import (
    Action,
    BrowsePosition,
    CardFace,
    CardForm,
    Screen,
    SetForm,
    ViewState,
)

__all__ = [
    "Action",
    "BrowsePosition",
    "CardFace",
    "CardForm",
    "EmptyFieldError",
    "Flashcard",
    "FlashcardSet",
    "Screen",
    "SetForm",
    "ViewState",
]
