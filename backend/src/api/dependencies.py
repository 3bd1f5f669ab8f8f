"""FastAPI dependency injection module.

Provides singleton instances of services for API routes.
Uses lifespan events for initialization and cleanup.
"""

import logging
from typing import Annotated

from fastapi import Depends

from src.composition import create_collection_store, create_navigator
from src.config import get_collection_seed
from src.domain.services.navigator import Navigator
from src.ports.collection_store import CollectionStore

logger = logging.getLogger(__name__)


# Singletons stored at module level
_collection_store: CollectionStore | None = None
_navigator: Navigator | None = None


async def init_dependencies() -> None:
    """Initialize all singleton dependencies.

    Called during FastAPI lifespan startup.
    """
    global _collection_store, _navigator

    seed = get_collection_seed()
    _collection_store = create_collection_store(seed)
    _navigator = create_navigator(_collection_store)
    logger.info(f"Collection ready ({seed}, {_collection_store.count()} sets)")


async def cleanup_dependencies() -> None:
    """Drop singletons on shutdown.

    Called during FastAPI lifespan shutdown. Sets are not persisted, so
    everything in the collection is discarded here.
    """
    global _collection_store, _navigator

    if _collection_store is not None:
        logger.info(f"Discarding {_collection_store.count()} sets")
    _collection_store = None
    _navigator = None


def get_collection_store() -> CollectionStore:
    """Dependency: Get CollectionStore instance."""
    if _collection_store is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _collection_store


def get_navigator() -> Navigator:
    """Dependency: Get Navigator instance."""
    if _navigator is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _navigator


# Type aliases for dependency injection
CollectionStoreDep = Annotated[CollectionStore, Depends(get_collection_store)]
NavigatorDep = Annotated[Navigator, Depends(get_navigator)]
