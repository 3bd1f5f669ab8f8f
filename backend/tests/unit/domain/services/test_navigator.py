"""Tests for the Navigator view-state machine."""

import pytest

from src.adapters.in_memory_store import InMemoryCollectionStore
from src.domain.services.navigator import (
    ALLOWED_ACTIONS,
    InvalidTransitionError,
    Navigator,
    SetNotFoundError,
)
from src.domain.value_objects.screen import Action, CardFace, Screen
from src.domain.value_objects.view_state import BrowsePosition, CardForm, SetForm, ViewState

THREE_CARDS = (("one", "uno"), ("two", "dos"), ("three", "tres"))


class TestInitialState:
    def test_starts_on_empty_set_list(self, navigator: Navigator) -> None:
        assert navigator.state == ViewState.initial()
        assert navigator.store.count() == 0
        assert navigator.current_set() is None
        assert navigator.current_card() is None
        assert navigator.allowed_actions() == ALLOWED_ACTIONS[Screen.SET_LIST]

    def test_every_screen_has_actions(self) -> None:
        assert set(ALLOWED_ACTIONS) == set(Screen)


class TestAddSetForm:
    def test_create_set(self, navigator: Navigator, store: InMemoryCollectionStore) -> None:
        navigator.open_add_set_form()
        assert navigator.state.screen == Screen.ADD_SET_FORM
        assert navigator.state.set_form == SetForm()

        navigator.edit_set_form("Biology")
        assert navigator.can_submit()
        state = navigator.submit_set_form()

        assert state == ViewState.initial()
        assert [s.name for s in store.list_sets()] == ["Biology"]
        assert store.list_sets()[0].is_empty()

    def test_sets_listed_in_creation_order(
        self, navigator: Navigator, store: InMemoryCollectionStore
    ) -> None:
        for name in ("Biology", "Spanish", "Art"):
            navigator.open_add_set_form()
            navigator.edit_set_form(name)
            navigator.submit_set_form()

        assert [s.name for s in store.list_sets()] == ["Biology", "Spanish", "Art"]

    def test_empty_name_submit_is_noop(
        self, navigator: Navigator, store: InMemoryCollectionStore, make_set
    ) -> None:
        make_set("Existing")
        navigator.open_add_set_form()
        before = navigator.state

        assert not navigator.can_submit()
        after = navigator.submit_set_form()

        assert after == before
        assert after.screen == Screen.ADD_SET_FORM
        assert [s.name for s in store.list_sets()] == ["Existing"]

    def test_clearing_name_disables_submit(self, navigator: Navigator) -> None:
        navigator.open_add_set_form()
        navigator.edit_set_form("Bio")
        navigator.edit_set_form("")
        assert not navigator.can_submit()

    def test_cancel_discards_input(
        self, navigator: Navigator, store: InMemoryCollectionStore
    ) -> None:
        navigator.open_add_set_form()
        navigator.edit_set_form("Never saved")
        state = navigator.cancel_form()

        assert state == ViewState.initial()
        assert store.count() == 0

        navigator.open_add_set_form()
        assert navigator.state.set_form == SetForm()


class TestSelectSet:
    def test_opens_first_card_unflipped(self, navigator: Navigator, make_set) -> None:
        flashcard_set = make_set("Spanish", *THREE_CARDS)
        state = navigator.select_set(flashcard_set.id)

        assert state.screen == Screen.SET_DETAIL
        assert state.browse == BrowsePosition(set_id=flashcard_set.id)
        assert navigator.current_set() is flashcard_set
        assert navigator.visible_face() == CardFace.TERM
        assert navigator.visible_text() == "one"

    def test_unknown_set(self, navigator: Navigator) -> None:
        with pytest.raises(SetNotFoundError) as exc_info:
            navigator.select_set("missing")
        assert exc_info.value.set_id == "missing"
        assert navigator.state == ViewState.initial()


class TestBrowsing:
    @pytest.fixture
    def browsing(self, navigator: Navigator, make_set) -> Navigator:
        navigator.select_set(make_set("Spanish", *THREE_CARDS).id)
        return navigator

    def test_flip_twice_restores_face(self, browsing: Navigator) -> None:
        before = browsing.state
        cards_before = list(browsing.current_set().cards)

        browsing.flip()
        assert browsing.visible_face() == CardFace.DEFINITION
        assert browsing.visible_text() == "uno"

        browsing.flip()
        assert browsing.state == before
        assert browsing.visible_text() == "one"
        assert browsing.current_set().cards == cards_before

    def test_next_resets_flip(self, browsing: Navigator) -> None:
        browsing.flip()
        state = browsing.next_card()
        assert state.browse.card_index == 1
        assert state.browse.is_flipped is False
        assert browsing.visible_text() == "two"

    def test_previous_resets_flip(self, browsing: Navigator) -> None:
        browsing.next_card()
        browsing.flip()
        state = browsing.previous_card()
        assert state.browse.card_index == 0
        assert state.browse.is_flipped is False

    def test_next_on_last_card_is_noop(self, browsing: Navigator) -> None:
        browsing.next_card()
        browsing.next_card()
        browsing.flip()
        before = browsing.state
        assert before.browse.card_index == 2
        assert not browsing.can_go_next()

        after = browsing.next_card()

        assert after == before
        assert after.browse.card_index == 2
        assert after.browse.is_flipped is True

    def test_previous_on_first_card_is_noop(self, browsing: Navigator) -> None:
        before = browsing.state
        assert not browsing.can_go_previous()
        assert browsing.previous_card() == before
        assert browsing.state.browse.card_index == 0

    def test_boundary_flags(self, browsing: Navigator) -> None:
        assert (browsing.can_go_previous(), browsing.can_go_next()) == (False, True)
        browsing.next_card()
        assert (browsing.can_go_previous(), browsing.can_go_next()) == (True, True)
        browsing.next_card()
        assert (browsing.can_go_previous(), browsing.can_go_next()) == (True, False)

    def test_back_discards_position(self, browsing: Navigator) -> None:
        browsing.next_card()
        browsing.flip()
        state = browsing.back()

        assert state == ViewState.initial()
        assert browsing.current_set() is None


class TestEmptySet:
    @pytest.fixture
    def empty_detail(self, navigator: Navigator, make_set) -> Navigator:
        navigator.select_set(make_set("Chemistry").id)
        return navigator

    def test_no_card_on_screen(self, empty_detail: Navigator) -> None:
        assert empty_detail.current_card() is None
        assert empty_detail.visible_face() is None
        assert empty_detail.visible_text() is None
        assert not empty_detail.can_flip()
        assert not empty_detail.can_go_next()
        assert not empty_detail.can_go_previous()

    def test_browse_controls_are_noops(self, empty_detail: Navigator) -> None:
        before = empty_detail.state
        assert empty_detail.flip() == before
        assert empty_detail.next_card() == before
        assert empty_detail.previous_card() == before

    def test_add_card_still_offered(self, empty_detail: Navigator) -> None:
        assert Action.OPEN_ADD_CARD_FORM in empty_detail.allowed_actions()
        empty_detail.open_add_card_form()
        assert empty_detail.state.screen == Screen.ADD_CARD_FORM


class TestAddCardForm:
    def test_submit_appends_and_keeps_position(self, navigator: Navigator, make_set) -> None:
        flashcard_set = make_set("Spanish", *THREE_CARDS)
        navigator.select_set(flashcard_set.id)
        navigator.next_card()
        navigator.flip()
        position = navigator.state.browse

        navigator.open_add_card_form()
        assert navigator.state.browse == position
        assert navigator.state.card_form == CardForm()

        navigator.edit_card_form(term="four")
        navigator.edit_card_form(definition="cuatro")
        state = navigator.submit_card_form()

        assert state == ViewState.set_detail(position)
        assert [c.term for c in flashcard_set.cards] == ["one", "two", "three", "four"]
        assert flashcard_set.cards[-1].definition == "cuatro"

    def test_edit_keeps_other_field(self, navigator: Navigator, make_set) -> None:
        navigator.select_set(make_set("Spanish").id)
        navigator.open_add_card_form()
        navigator.edit_card_form(term="perro", definition="dog")
        navigator.edit_card_form(term="gato")
        assert navigator.state.card_form == CardForm(term="gato", definition="dog")

    @pytest.mark.parametrize("term,definition", [("", ""), ("perro", ""), ("", "dog")])
    def test_incomplete_submit_is_noop(
        self, navigator: Navigator, make_set, term: str, definition: str
    ) -> None:
        flashcard_set = make_set("Spanish")
        navigator.select_set(flashcard_set.id)
        navigator.open_add_card_form()
        navigator.edit_card_form(term=term, definition=definition)
        before = navigator.state

        assert not navigator.can_submit()
        assert navigator.submit_card_form() == before
        assert flashcard_set.is_empty()

    def test_cancel_returns_to_same_card(self, navigator: Navigator, make_set) -> None:
        flashcard_set = make_set("Spanish", *THREE_CARDS)
        navigator.select_set(flashcard_set.id)
        navigator.next_card()
        navigator.flip()
        before = navigator.state

        navigator.open_add_card_form()
        navigator.edit_card_form(term="discarded", definition="discarded")
        state = navigator.cancel_form()

        assert state == before
        assert flashcard_set.card_count == 3

    def test_new_card_visible_through_store(
        self, navigator: Navigator, store: InMemoryCollectionStore, make_set
    ) -> None:
        flashcard_set = make_set("Spanish")
        navigator.select_set(flashcard_set.id)
        navigator.open_add_card_form()
        navigator.edit_card_form(term="perro", definition="dog")
        navigator.submit_card_form()
        navigator.back()

        assert store.get_set(flashcard_set.id).card_count == 1


class TestInvalidTransitions:
    @pytest.mark.parametrize(
        "action",
        [Action.FLIP, Action.NEXT_CARD, Action.BACK, Action.SUBMIT_SET_FORM, Action.CANCEL_FORM],
    )
    def test_set_list_rejects(self, navigator: Navigator, action: Action) -> None:
        with pytest.raises(InvalidTransitionError) as exc_info:
            navigator.dispatch(action)
        assert exc_info.value.screen == Screen.SET_LIST
        assert exc_info.value.allowed == ALLOWED_ACTIONS[Screen.SET_LIST]
        assert navigator.state == ViewState.initial()

    def test_form_blocks_browsing(self, navigator: Navigator, make_set) -> None:
        navigator.select_set(make_set("Spanish", *THREE_CARDS).id)
        navigator.open_add_card_form()
        with pytest.raises(InvalidTransitionError):
            navigator.next_card()
        with pytest.raises(InvalidTransitionError):
            navigator.back()

    def test_cannot_select_while_in_set(self, navigator: Navigator, make_set) -> None:
        first = make_set("First")
        second = make_set("Second")
        navigator.select_set(first.id)
        with pytest.raises(InvalidTransitionError):
            navigator.select_set(second.id)

    def test_is_value_error(self, navigator: Navigator) -> None:
        with pytest.raises(ValueError):
            navigator.flip()


class TestDispatch:
    def test_dispatch_runs_full_flow(
        self, navigator: Navigator, store: InMemoryCollectionStore
    ) -> None:
        navigator.dispatch(Action.OPEN_ADD_SET_FORM)
        navigator.dispatch(Action.EDIT_SET_FORM, name="Biology")
        navigator.dispatch(Action.SUBMIT_SET_FORM)
        set_id = store.list_sets()[0].id

        navigator.dispatch(Action.SELECT_SET, set_id=set_id)
        navigator.dispatch(Action.OPEN_ADD_CARD_FORM)
        navigator.dispatch(
            Action.EDIT_CARD_FORM, term="Mitochondria", definition="Powerhouse of the cell"
        )
        navigator.dispatch(Action.SUBMIT_CARD_FORM)

        assert navigator.visible_text() == "Mitochondria"

    def test_accepts_plain_strings(self, navigator: Navigator) -> None:
        state = navigator.dispatch("open_add_set_form")
        assert state.screen == Screen.ADD_SET_FORM

    def test_missing_set_id(self, navigator: Navigator) -> None:
        with pytest.raises(ValueError, match="set_id"):
            navigator.dispatch(Action.SELECT_SET)

    def test_missing_name(self, navigator: Navigator) -> None:
        navigator.open_add_set_form()
        with pytest.raises(ValueError, match="name"):
            navigator.dispatch(Action.EDIT_SET_FORM)

    def test_reset(self, navigator: Navigator, make_set) -> None:
        navigator.select_set(make_set("Spanish", *THREE_CARDS).id)
        navigator.open_add_card_form()
        assert navigator.reset() == ViewState.initial()


class TestScenarios:
    def test_biology(self, navigator: Navigator, store: InMemoryCollectionStore) -> None:
        navigator.open_add_set_form()
        navigator.edit_set_form("Biology")
        navigator.submit_set_form()
        biology = store.list_sets()[0]
        assert biology.is_empty()

        navigator.select_set(biology.id)
        navigator.open_add_card_form()
        navigator.edit_card_form(term="Mitochondria", definition="Powerhouse of the cell")
        navigator.submit_card_form()

        assert biology.card_count == 1
        assert navigator.state.browse.card_index == 0
        assert navigator.state.browse.is_flipped is False
        assert navigator.visible_text() == "Mitochondria"

        navigator.flip()
        assert navigator.visible_text() == "Powerhouse of the cell"

    def test_empty_name_keeps_prior_sets(
        self, navigator: Navigator, store: InMemoryCollectionStore, make_set
    ) -> None:
        make_set("Biology")
        make_set("Spanish")

        navigator.open_add_set_form()
        navigator.edit_set_form("")
        navigator.submit_set_form()
        navigator.cancel_form()

        assert [s.name for s in store.list_sets()] == ["Biology", "Spanish"]

    def test_next_on_last_of_three(self, navigator: Navigator, make_set) -> None:
        navigator.select_set(make_set("Spanish", *THREE_CARDS).id)
        navigator.next_card()
        navigator.next_card()
        navigator.next_card()
        assert navigator.state.browse.card_index == 2
