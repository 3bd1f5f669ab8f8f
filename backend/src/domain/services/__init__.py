"""Domain services - orchestration and business logic."""

from .navigator import (
    ALLOWED_ACTIONS,
    InvalidTransitionError,
    Navigator,
    SetNotFoundError,
)

__all__ = [
    "ALLOWED_ACTIONS",
    "InvalidTransitionError",
    "Navigator",
    "SetNotFoundError",
]
