"""
Composition Root.

Centralized dependency wiring for the application.
All factory functions that instantiate adapters belong here to maintain
hexagonal architecture (domain NEVER imports from adapters).
"""

import logging

from src.adapters.in_memory_store import InMemoryCollectionStore
from src.adapters.sample_sets import load_sample_sets
from src.config import SEED_SAMPLE
from src.domain.services.navigator import Navigator
from src.ports.collection_store import CollectionStore

logger = logging.getLogger(__name__)


def create_collection_store(seed: str) -> CollectionStore:
    """Create the in-memory collection store.

    Args:
        seed: 'sample' to preload the bundled sets, anything else starts empty

    Returns:
        InMemoryCollectionStore, empty or holding the sample sets
    """
    if seed == SEED_SAMPLE:
        sets = load_sample_sets()
        logger.info(f"Loaded {len(sets)} sample sets")
        return InMemoryCollectionStore(sets)
    return InMemoryCollectionStore()


def create_navigator(store: CollectionStore) -> Navigator:
    """Create a Navigator on the set list screen.

    Returns:
        Navigator reading from and writing to the given store
    """
    return Navigator(store)
