"""Flashcard set API routes (read-only).

Sets and cards are created through the form actions on /api/view.
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from src.api.dependencies import CollectionStoreDep
from src.domain.entities.flashcard_set import FlashcardSet

router = APIRouter(prefix="/api/sets", tags=["sets"])


# =============================================================================
# Response Models
# =============================================================================


class SetSummary(BaseModel):
    """Set as shown in the set list."""

    id: str
    name: str
    card_count: int

    @classmethod
    def from_entity(cls, flashcard_set: FlashcardSet) -> "SetSummary":
        return cls(id=flashcard_set.id, name=flashcard_set.name, card_count=flashcard_set.card_count)


class SetsResponse(BaseModel):
    """Response for set listing."""

    sets: list[SetSummary]


class CardResponse(BaseModel):
    """Card in API response."""

    id: str
    term: str
    definition: str


class SetResponse(BaseModel):
    """Set with all of its cards."""

    id: str
    name: str
    card_count: int
    cards: list[CardResponse]


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error response wrapper."""

    error: ErrorDetail


# =============================================================================
# Routes
# =============================================================================


@router.get("", response_model=SetsResponse)
async def list_sets(store: CollectionStoreDep) -> SetsResponse:
    """List all sets in the order they were created."""
    return SetsResponse(sets=[SetSummary.from_entity(s) for s in store.list_sets()])


@router.get(
    "/{set_id}",
    response_model=SetResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Set not found"},
    },
)
async def get_set(set_id: str, store: CollectionStoreDep) -> SetResponse:
    """Get one set with its cards in browse order."""
    flashcard_set = store.get_set(set_id)
    if flashcard_set is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "SET_NOT_FOUND",
                    "message": f"Set {set_id} not found",
                }
            },
        )

    return SetResponse(
        id=flashcard_set.id,
        name=flashcard_set.name,
        card_count=flashcard_set.card_count,
        cards=[
            CardResponse(id=card.id, term=card.term, definition=card.definition)
            for card in flashcard_set.cards
        ],
    )
