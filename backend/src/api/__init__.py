"""API layer - FastAPI routes and dependencies."""

from .dependencies import (
    CollectionStoreDep,
    NavigatorDep,
    cleanup_dependencies,
    get_collection_store,
    get_navigator,
    init_dependencies,
)
from .routes import sets_router, share_router, view_router

__all__ = [
    # Routes
    "view_router",
    "sets_router",
    "share_router",
    # Dependencies
    "init_dependencies",
    "cleanup_dependencies",
    "get_collection_store",
    "get_navigator",
    # Type aliases
    "CollectionStoreDep",
    "NavigatorDep",
]
