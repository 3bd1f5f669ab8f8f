"""Domain value objects - immutable objects without identity."""

from .screen import Action, CardFace, Screen
from .view_state import BrowsePosition, CardForm, SetForm, ViewState

__all__ = [
    "Action",
    "BrowsePosition",
    "CardFace",
    "CardForm",
    "Screen",
    "SetForm",
    "ViewState",
]
