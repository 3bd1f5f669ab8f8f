"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.adapters.in_memory_store import InMemoryCollectionStore
from src.app import app
from src.domain.entities.flashcard import Flashcard
from src.domain.entities.flashcard_set import FlashcardSet
from src.domain.services.navigator import Navigator


@pytest.fixture
def store() -> InMemoryCollectionStore:
    """Empty in-memory collection."""
    return InMemoryCollectionStore()


@pytest.fixture
def navigator(store: InMemoryCollectionStore) -> Navigator:
    """Navigator on the set list over an empty collection."""
    return Navigator(store)


@pytest.fixture
def make_set(store: InMemoryCollectionStore) -> Callable[..., FlashcardSet]:
    """Factory that stores a set holding the given (term, definition) pairs."""

    def _make_set(name: str, *pairs: tuple[str, str]) -> FlashcardSet:
        flashcard_set = FlashcardSet.create(name)
        for term, definition in pairs:
            flashcard_set.append_card(Flashcard.create(term, definition))
        store.add_set(flashcard_set)
        return flashcard_set

    return _make_set


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, Any, None]:
    """Test client over a fresh, empty collection."""
    monkeypatch.setenv("COLLECTION_SEED", "empty")
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, Any, None]:
    """Test client over the bundled sample sets."""
    monkeypatch.setenv("COLLECTION_SEED", "sample")
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def act(client: TestClient) -> Callable[..., dict]:
    """Post one action and return the rendered view, asserting success."""

    def _act(action: str, **inputs: str) -> dict:
        response = client.post("/api/view/actions", json={"action": action, **inputs})
        assert response.status_code == 200, response.text
        return response.json()

    return _act
