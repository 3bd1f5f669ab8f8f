"""Navigator service - the app's view-state machine."""

import logging
from dataclasses import replace

from src.domain.entities.flashcard import Flashcard
from src.domain.entities.flashcard_set import FlashcardSet
from src.domain.value_objects.screen import Action, CardFace, Screen
from src.domain.value_objects.view_state import (
    BrowsePosition,
    CardForm,
    SetForm,
    ViewState,
)
from src.ports.collection_store import CollectionStore

logger = logging.getLogger(__name__)


class SetNotFoundError(Exception):
    """Raised when a set id does not exist in the collection."""

    def __init__(self, set_id: str):
        self.set_id = set_id
        super().__init__(f"Set {set_id} not found")


class InvalidTransitionError(ValueError):
    """Raised when an action is not offered on the current screen."""

    def __init__(self, action: Action, screen: Screen, allowed: frozenset[Action]):
        self.action = action
        self.screen = screen
        self.allowed = allowed
        super().__init__(
            f"Action {action} not available on {screen}. "
            f"Allowed: {sorted(a.value for a in allowed)}"
        )


# Actions each screen offers. Disabled controls (boundary navigation,
# submit with an empty field) are still "offered" and act as no-ops.
ALLOWED_ACTIONS: dict[Screen, frozenset[Action]] = {
    Screen.SET_LIST: frozenset({Action.SELECT_SET, Action.OPEN_ADD_SET_FORM}),
    Screen.ADD_SET_FORM: frozenset(
        {Action.EDIT_SET_FORM, Action.SUBMIT_SET_FORM, Action.CANCEL_FORM}
    ),
    Screen.SET_DETAIL: frozenset(
        {
            Action.FLIP,
            Action.NEXT_CARD,
            Action.PREVIOUS_CARD,
            Action.OPEN_ADD_CARD_FORM,
            Action.BACK,
        }
    ),
    Screen.ADD_CARD_FORM: frozenset(
        {Action.EDIT_CARD_FORM, Action.SUBMIT_CARD_FORM, Action.CANCEL_FORM}
    ),
}


class Navigator:
    """Owns the current view state and applies user actions to it.

    Responsibilities:
    - Screen transitions (set list, set detail, the two forms)
    - Card browsing: flip, next, previous
    - Creating sets and cards on form submit

    Form submits are the only code paths that write to the collection.
    Each action method returns the resulting state.
    """

    def __init__(self, store: CollectionStore, state: ViewState | None = None):
        """Initialize navigator.

        Args:
            store: Collection the set list shows and submits write to
            state: Starting state (defaults to the set list)
        """
        self._store = store
        self._state = state or ViewState.initial()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def store(self) -> CollectionStore:
        return self._store

    def allowed_actions(self) -> frozenset[Action]:
        """Get the actions offered on the current screen."""
        return ALLOWED_ACTIONS[self._state.screen]

    def reset(self) -> ViewState:
        """Return to the set list, dropping browse position and form input."""
        self._state = ViewState.initial()
        return self._state

    def dispatch(
        self,
        action: Action,
        *,
        set_id: str | None = None,
        name: str | None = None,
        term: str | None = None,
        definition: str | None = None,
    ) -> ViewState:
        """Apply an action given as a message.

        Args:
            action: Action to apply
            set_id: Required for SELECT_SET
            name: Required for EDIT_SET_FORM
            term: Optional new term for EDIT_CARD_FORM
            definition: Optional new definition for EDIT_CARD_FORM

        Returns:
            The resulting view state

        Raises:
            InvalidTransitionError: If the current screen doesn't offer the action
            SetNotFoundError: If SELECT_SET names an unknown set
            ValueError: If a required argument is missing
        """
        match action:
            case Action.SELECT_SET:
                if set_id is None:
                    raise ValueError("select_set requires set_id")
                return self.select_set(set_id)
            case Action.OPEN_ADD_SET_FORM:
                return self.open_add_set_form()
            case Action.EDIT_SET_FORM:
                if name is None:
                    raise ValueError("edit_set_form requires name")
                return self.edit_set_form(name)
            case Action.SUBMIT_SET_FORM:
                return self.submit_set_form()
            case Action.CANCEL_FORM:
                return self.cancel_form()
            case Action.FLIP:
                return self.flip()
            case Action.NEXT_CARD:
                return self.next_card()
            case Action.PREVIOUS_CARD:
                return self.previous_card()
            case Action.OPEN_ADD_CARD_FORM:
                return self.open_add_card_form()
            case Action.EDIT_CARD_FORM:
                return self.edit_card_form(term=term, definition=definition)
            case Action.SUBMIT_CARD_FORM:
                return self.submit_card_form()
            case Action.BACK:
                return self.back()
        raise ValueError(f"Unknown action: {action}")

    # -------------------------------------------------------------------------
    # Set list
    # -------------------------------------------------------------------------

    def select_set(self, set_id: str) -> ViewState:
        """Open a set on its first card, term side up."""
        self._require(Action.SELECT_SET)
        if self._store.get_set(set_id) is None:
            raise SetNotFoundError(set_id)
        self._state = ViewState.set_detail(BrowsePosition(set_id=set_id))
        return self._state

    def open_add_set_form(self) -> ViewState:
        self._require(Action.OPEN_ADD_SET_FORM)
        self._state = ViewState(screen=Screen.ADD_SET_FORM, set_form=SetForm())
        return self._state

    def edit_set_form(self, name: str) -> ViewState:
        self._require(Action.EDIT_SET_FORM)
        self._state = replace(self._state, set_form=SetForm(name=name))
        return self._state

    def submit_set_form(self) -> ViewState:
        """Create the set and return to the set list.

        No-op while the name is empty.
        """
        self._require(Action.SUBMIT_SET_FORM)
        form = self._state.set_form or SetForm()
        if not form.can_submit:
            logger.debug("Ignoring set form submit with empty name")
            return self._state

        new_set = FlashcardSet.create(form.name)
        self._store.add_set(new_set)
        logger.info(f"Created set {new_set.id} ({new_set.name!r})")

        self._state = ViewState.initial()
        return self._state

    # -------------------------------------------------------------------------
    # Forms
    # -------------------------------------------------------------------------

    def cancel_form(self) -> ViewState:
        """Dismiss the open form without saving.

        The screen underneath comes back unchanged; for the card form that
        includes the card index and flip state.
        """
        self._require(Action.CANCEL_FORM)
        if self._state.screen == Screen.ADD_CARD_FORM and self._state.browse is not None:
            self._state = ViewState.set_detail(self._state.browse)
        else:
            self._state = ViewState.initial()
        return self._state

    # -------------------------------------------------------------------------
    # Set detail
    # -------------------------------------------------------------------------

    def flip(self) -> ViewState:
        """Toggle between the term and definition of the current card.

        No-op on an empty set.
        """
        self._require(Action.FLIP)
        browse = self._state.browse
        if browse is None or not self.can_flip():
            logger.debug("Ignoring flip with no card on screen")
            return self._state
        self._state = ViewState.set_detail(browse.flipped())
        return self._state

    def next_card(self) -> ViewState:
        """Advance one card. No-op on the last card."""
        self._require(Action.NEXT_CARD)
        browse = self._state.browse
        if browse is None or not self.can_go_next():
            logger.debug("Ignoring next at end of set")
            return self._state
        self._state = ViewState.set_detail(browse.moved_to(browse.card_index + 1))
        return self._state

    def previous_card(self) -> ViewState:
        """Go back one card. No-op on the first card."""
        self._require(Action.PREVIOUS_CARD)
        browse = self._state.browse
        if browse is None or not self.can_go_previous():
            logger.debug("Ignoring previous at start of set")
            return self._state
        self._state = ViewState.set_detail(browse.moved_to(browse.card_index - 1))
        return self._state

    def open_add_card_form(self) -> ViewState:
        self._require(Action.OPEN_ADD_CARD_FORM)
        self._state = ViewState(
            screen=Screen.ADD_CARD_FORM,
            browse=self._state.browse,
            card_form=CardForm(),
        )
        return self._state

    def edit_card_form(self, term: str | None = None, definition: str | None = None) -> ViewState:
        """Update the new-card inputs. Arguments left as None keep their value."""
        self._require(Action.EDIT_CARD_FORM)
        form = self._state.card_form or CardForm()
        if term is not None:
            form = replace(form, term=term)
        if definition is not None:
            form = replace(form, definition=definition)
        self._state = replace(self._state, card_form=form)
        return self._state

    def submit_card_form(self) -> ViewState:
        """Append the new card to the open set and close the form.

        The browse position is left where it was. No-op while the term or
        definition is empty.
        """
        self._require(Action.SUBMIT_CARD_FORM)
        form = self._state.card_form or CardForm()
        if not form.can_submit:
            logger.debug("Ignoring card form submit with empty field")
            return self._state

        browse = self._state.browse
        flashcard_set = self.current_set()
        if browse is None or flashcard_set is None:
            raise SetNotFoundError(browse.set_id if browse else "")

        card = Flashcard.create(term=form.term, definition=form.definition)
        flashcard_set.append_card(card)
        logger.info(
            f"Added card {card.id} to set {flashcard_set.id} "
            f"({flashcard_set.card_count} cards)"
        )

        self._state = ViewState.set_detail(browse)
        return self._state

    def back(self) -> ViewState:
        """Leave the set and return to the set list."""
        self._require(Action.BACK)
        self._state = ViewState.initial()
        return self._state

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def current_set(self) -> FlashcardSet | None:
        """Get the open set, or None on the set list."""
        if self._state.browse is None:
            return None
        return self._store.get_set(self._state.browse.set_id)

    def current_card(self) -> Flashcard | None:
        """Get the card on screen, or None if no set is open or it is empty."""
        flashcard_set = self.current_set()
        if flashcard_set is None or self._state.browse is None:
            return None
        return flashcard_set.card_at(self._state.browse.card_index)

    def visible_face(self) -> CardFace | None:
        if self.current_card() is None or self._state.browse is None:
            return None
        return CardFace.from_flipped(self._state.browse.is_flipped)

    def visible_text(self) -> str | None:
        """Get the text showing on the current card."""
        card = self.current_card()
        face = self.visible_face()
        if card is None or face is None:
            return None
        return card.definition if face == CardFace.DEFINITION else card.term

    def can_flip(self) -> bool:
        return self.current_card() is not None

    def can_go_next(self) -> bool:
        flashcard_set = self.current_set()
        browse = self._state.browse
        if flashcard_set is None or browse is None:
            return False
        return browse.card_index < flashcard_set.card_count - 1

    def can_go_previous(self) -> bool:
        flashcard_set = self.current_set()
        browse = self._state.browse
        if flashcard_set is None or browse is None or flashcard_set.is_empty():
            return False
        return browse.card_index > 0

    def can_submit(self) -> bool:
        """Check if the open form's submit control is enabled."""
        if self._state.screen == Screen.ADD_SET_FORM and self._state.set_form is not None:
            return self._state.set_form.can_submit
        if self._state.screen == Screen.ADD_CARD_FORM and self._state.card_form is not None:
            return self._state.card_form.can_submit
        return False

    def _require(self, action: Action) -> None:
        """Raise if the current screen doesn't offer the action."""
        allowed = self.allowed_actions()
        if action not in allowed:
            raise InvalidTransitionError(action, self._state.screen, allowed)
