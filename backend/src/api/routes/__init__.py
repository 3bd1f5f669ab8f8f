"""API routes module."""

from .sets import router as sets_router
from .share import router as share_router
from .view import router as view_router

__all__ = ["sets_router", "share_router", "view_router"]
