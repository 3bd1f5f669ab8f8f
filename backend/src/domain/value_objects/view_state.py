"""View state value objects - the navigator's immutable state snapshots."""

from dataclasses import dataclass, replace

from src.domain.value_objects.screen import Screen


@dataclass(frozen=True)
class BrowsePosition:
    """Position within an open set.

    Attributes:
        set_id: Set being browsed
        card_index: Index of the card on screen
        is_flipped: Whether the definition side is showing
    """

    set_id: str
    card_index: int = 0
    is_flipped: bool = False

    def flipped(self) -> "BrowsePosition":
        return replace(self, is_flipped=not self.is_flipped)

    def moved_to(self, card_index: int) -> "BrowsePosition":
        """Move to another card, always showing its term side first."""
        return replace(self, card_index=card_index, is_flipped=False)


@dataclass(frozen=True)
class SetForm:
    """Live input of the new-set form."""

    name: str = ""

    @property
    def can_submit(self) -> bool:
        return bool(self.name)


@dataclass(frozen=True)
class CardForm:
    """Live inputs of the new-card form."""

    term: str = ""
    definition: str = ""

    @property
    def can_submit(self) -> bool:
        return bool(self.term) and bool(self.definition)


@dataclass(frozen=True)
class ViewState:
    """Complete navigation state.

    `browse` is kept while the new-card form is presented so that closing
    the form returns to the same card. Form inputs only exist while their
    form is on screen.
    """

    screen: Screen = Screen.SET_LIST
    browse: BrowsePosition | None = None
    set_form: SetForm | None = None
    card_form: CardForm | None = None

    @classmethod
    def initial(cls) -> "ViewState":
        return cls()

    @classmethod
    def set_detail(cls, browse: BrowsePosition) -> "ViewState":
        return cls(screen=Screen.SET_DETAIL, browse=browse)
