"""View-state API routes.

The client renders whatever GET /api/view returns and reports each user
interaction (tap, typing, submit, cancel, back) to POST /api/view/actions.
"""

import logging
from typing import Self

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, model_validator

from src.api.dependencies import NavigatorDep
from src.api.routes.sets import ErrorResponse, SetSummary
from src.config import get_share_url, is_production
from src.domain.services.navigator import (
    InvalidTransitionError,
    Navigator,
    SetNotFoundError,
)
from src.domain.value_objects.screen import Action

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/view", tags=["view"])


# =============================================================================
# Request/Response Models
# =============================================================================


class ActionRequest(BaseModel):
    """A single user action.

    `set_id` is required for select_set and `name` for edit_set_form.
    edit_card_form takes `term`, `definition` or both.
    """

    action: Action
    set_id: str | None = None
    name: str | None = None
    term: str | None = None
    definition: str | None = None

    @model_validator(mode="after")
    def check_required_inputs(self) -> Self:
        if self.action == Action.SELECT_SET and self.set_id is None:
            raise ValueError("select_set requires set_id")
        if self.action == Action.EDIT_SET_FORM and self.name is None:
            raise ValueError("edit_set_form requires name")
        if self.action == Action.EDIT_CARD_FORM and self.term is None and self.definition is None:
            raise ValueError("edit_card_form requires term or definition")
        return self


class DetailView(BaseModel):
    """The open set and the card on screen.

    `face` and `text` are null when the set has no cards.
    """

    set_id: str
    set_name: str
    card_count: int
    card_index: int
    is_flipped: bool
    is_empty: bool
    face: str | None
    text: str | None
    can_flip: bool
    can_go_previous: bool
    can_go_next: bool


class SetFormView(BaseModel):
    """New-set form inputs."""

    name: str
    can_submit: bool


class CardFormView(BaseModel):
    """New-card form inputs."""

    term: str
    definition: str
    can_submit: bool


class ViewResponse(BaseModel):
    """Everything the client needs to draw the current screen."""

    screen: str
    allowed_actions: list[str]
    sets: list[SetSummary]
    detail: DetailView | None = None
    set_form: SetFormView | None = None
    card_form: CardFormView | None = None
    share_url: str


def render_view(navigator: Navigator) -> ViewResponse:
    """Build the response for the navigator's current state."""
    state = navigator.state

    detail = None
    flashcard_set = navigator.current_set()
    if flashcard_set is not None and state.browse is not None:
        face = navigator.visible_face()
        detail = DetailView(
            set_id=flashcard_set.id,
            set_name=flashcard_set.name,
            card_count=flashcard_set.card_count,
            card_index=state.browse.card_index,
            is_flipped=state.browse.is_flipped,
            is_empty=flashcard_set.is_empty(),
            face=face.value if face else None,
            text=navigator.visible_text(),
            can_flip=navigator.can_flip(),
            can_go_previous=navigator.can_go_previous(),
            can_go_next=navigator.can_go_next(),
        )

    set_form = None
    if state.set_form is not None:
        set_form = SetFormView(name=state.set_form.name, can_submit=state.set_form.can_submit)

    card_form = None
    if state.card_form is not None:
        card_form = CardFormView(
            term=state.card_form.term,
            definition=state.card_form.definition,
            can_submit=state.card_form.can_submit,
        )

    return ViewResponse(
        screen=state.screen.value,
        allowed_actions=sorted(a.value for a in navigator.allowed_actions()),
        sets=[SetSummary.from_entity(s) for s in navigator.store.list_sets()],
        detail=detail,
        set_form=set_form,
        card_form=card_form,
        share_url=get_share_url(),
    )


# =============================================================================
# Routes
# =============================================================================


@router.get("", response_model=ViewResponse)
async def get_view(navigator: NavigatorDep) -> ViewResponse:
    """Get the current screen and everything shown on it."""
    return render_view(navigator)


@router.post(
    "/actions",
    response_model=ViewResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Set not found"},
        409: {"model": ErrorResponse, "description": "Action not available on this screen"},
    },
)
async def dispatch_action(request: ActionRequest, navigator: NavigatorDep) -> ViewResponse:
    """Apply one user action and return the resulting view.

    Disabled controls (next on the last card, submit with an empty field)
    succeed without changing anything.
    """
    try:
        navigator.dispatch(
            request.action,
            set_id=request.set_id,
            name=request.name,
            term=request.term,
            definition=request.definition,
        )
    except InvalidTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "error": {
                    "code": "INVALID_TRANSITION",
                    "message": str(e),
                }
            },
        ) from None
    except SetNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": {
                    "code": "SET_NOT_FOUND",
                    "message": str(e),
                }
            },
        ) from None

    return render_view(navigator)


@router.post(
    "/reset",
    response_model=ViewResponse,
    responses={
        403: {"model": ErrorResponse, "description": "Not available in production"},
    },
)
async def reset_view(navigator: NavigatorDep) -> ViewResponse:
    """Return to the set list (DEV ONLY).

    Drops the browse position and any open form. Sets are kept.
    """
    if is_production():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={
                "error": {
                    "code": "FORBIDDEN",
                    "message": "Not available in production",
                }
            },
        )

    navigator.reset()
    logger.info("View reset to set list")
    return render_view(navigator)
