"""Screen and action value objects for navigation."""

from enum import StrEnum


class Screen(StrEnum):
    """Screens of the study app.

    State machine:
        SET_LIST <-> ADD_SET_FORM
           |  ^
           v  | (back)
        SET_DETAIL <-> ADD_CARD_FORM

    States:
        SET_LIST: All sets in creation order
        SET_DETAIL: Browsing the cards of one set
        ADD_SET_FORM: New-set form presented over the set list
        ADD_CARD_FORM: New-card form presented over the set detail
    """

    SET_LIST = "set_list"
    SET_DETAIL = "set_detail"
    ADD_SET_FORM = "add_set_form"
    ADD_CARD_FORM = "add_card_form"

    def is_form(self) -> bool:
        """Check if the screen is a modal form."""
        return self in (Screen.ADD_SET_FORM, Screen.ADD_CARD_FORM)

    def has_open_set(self) -> bool:
        """Check if a set is being browsed (possibly under a form)."""
        return self in (Screen.SET_DETAIL, Screen.ADD_CARD_FORM)


class Action(StrEnum):
    """User actions the navigator accepts."""

    SELECT_SET = "select_set"
    OPEN_ADD_SET_FORM = "open_add_set_form"
    EDIT_SET_FORM = "edit_set_form"
    SUBMIT_SET_FORM = "submit_set_form"
    CANCEL_FORM = "cancel_form"
    FLIP = "flip"
    NEXT_CARD = "next_card"
    PREVIOUS_CARD = "previous_card"
    OPEN_ADD_CARD_FORM = "open_add_card_form"
    EDIT_CARD_FORM = "edit_card_form"
    SUBMIT_CARD_FORM = "submit_card_form"
    BACK = "back"


class CardFace(StrEnum):
    """Which side of the current card is showing."""

    TERM = "term"
    DEFINITION = "definition"

    @classmethod
    def from_flipped(cls, is_flipped: bool) -> "CardFace":
        return cls.DEFINITION if is_flipped else cls.TERM
